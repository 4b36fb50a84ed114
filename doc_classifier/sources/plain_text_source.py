from doc_classifier.sources.base import BaseTextSource
from doc_classifier.sources.exceptions import TextExtractionError


class PlainTextSource(BaseTextSource):
    """Reads text already recognized by an OCR engine and saved as UTF-8."""

    def extract(self, data: bytes) -> str:
        try:
            return data.decode("utf-8-sig").strip()
        except UnicodeDecodeError as exc:
            raise TextExtractionError(f"Text file is not valid UTF-8: {exc}") from exc
