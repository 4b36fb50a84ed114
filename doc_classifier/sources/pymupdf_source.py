from collections.abc import Iterator

import pymupdf

from doc_classifier.sources.base import PagedPdfSource


class PyMuPdfSource(PagedPdfSource):
    """Text layer of searchable (OCR'd) PDFs via PyMuPDF."""

    engine = "pymupdf"

    def iter_pages(self, data: bytes) -> Iterator[str]:
        with pymupdf.open(stream=data, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
            for page in doc:
                yield page.get_text()
