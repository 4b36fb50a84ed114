from pathlib import Path

from doc_classifier.config.settings import Settings
from doc_classifier.logging.logger import Log
from doc_classifier.processor.models import DocumentText
from doc_classifier.sources.factory import TextSourceFactory


class FileLoader:
    """Reads a file from disk and turns it into a DocumentText keyed by its path."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def load(self, path: Path) -> DocumentText:
        """Read the file and extract its text.

        Raises:
            FileNotFoundError: if the file does not exist.
            UnsupportedFileTypeError: if no text source handles the extension.
            TextExtractionError: if the content cannot be turned into text.
        """
        source = TextSourceFactory.create(self._settings, path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        text = source.extract(path.read_bytes())
        Log.info(f"Loaded {len(text)} chars from {path}")
        return DocumentText(document_id=str(path), text=text)
