from abc import ABC, abstractmethod
from collections.abc import Iterator

from doc_classifier.logging.logger import Log
from doc_classifier.sources.exceptions import TextExtractionError


class BaseTextSource(ABC):
    """Contract for all adapters that turn file content into document text."""

    @abstractmethod
    def extract(self, data: bytes) -> str:
        """Extract plain text from file content.

        Args:
            data: Raw file content.

        Returns:
            Extracted text as a single string.

        Raises:
            TextExtractionError: if extraction fails for any reason.
        """


class PagedPdfSource(BaseTextSource):
    """Joins the per-page text layer of a searchable PDF, one page per line block.

    Blank pages (scans without recognized text) are dropped.
    """

    engine: str = ""

    def extract(self, data: bytes) -> str:
        try:
            pages = [text.strip() for text in self.iter_pages(data)]
        except Exception as exc:
            raise TextExtractionError(f"{self.engine} extraction failed: {exc}") from exc
        text = "\n".join(page for page in pages if page)
        Log.debug(f"{self.engine}: {len(pages)} pages, {len(text)} chars")
        return text

    @abstractmethod
    def iter_pages(self, data: bytes) -> Iterator[str]:
        """Yield the text layer of each page in order."""
