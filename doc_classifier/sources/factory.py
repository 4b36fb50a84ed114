from pathlib import Path

from doc_classifier.config.settings import Settings
from doc_classifier.sources.base import BaseTextSource
from doc_classifier.sources.exceptions import UnsupportedFileTypeError
from doc_classifier.sources.pdfplumber_source import PdfPlumberSource
from doc_classifier.sources.plain_text_source import PlainTextSource
from doc_classifier.sources.pymupdf_source import PyMuPdfSource


class TextSourceFactory:
    """Picks the text source for a file by its extension."""

    PDF_ENGINES: dict[str, type[BaseTextSource]] = {
        "pdfplumber": PdfPlumberSource,
        "pymupdf": PyMuPdfSource,
    }
    TEXT_EXTENSIONS = frozenset({".txt"})
    PDF_EXTENSIONS = frozenset({".pdf"})

    @classmethod
    def supported_extensions(cls) -> frozenset[str]:
        return cls.TEXT_EXTENSIONS | cls.PDF_EXTENSIONS

    @classmethod
    def create(cls, settings: Settings, path: Path) -> BaseTextSource:
        suffix = path.suffix.lower()
        if suffix in cls.TEXT_EXTENSIONS:
            return PlainTextSource()
        if suffix in cls.PDF_EXTENSIONS:
            return cls._create_pdf_source(settings)
        raise UnsupportedFileTypeError(
            f"Unsupported file type '{suffix or path.name}'. "
            f"Choose from: {sorted(cls.supported_extensions())}"
        )

    @classmethod
    def _create_pdf_source(cls, settings: Settings) -> BaseTextSource:
        engine = settings.pdf_engine.lower()
        source_cls = cls.PDF_ENGINES.get(engine)
        if source_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.PDF_ENGINES)}"
            )
        return source_cls()
