from dataclasses import dataclass

from doc_classifier.classification.models import ClassificationResult
from doc_classifier.classification.rules import FALLBACK_CATEGORY


@dataclass(frozen=True)
class DocumentText:
    """OCR output for one document, as handed over by the OCR provider.

    ``ocr_confidence`` is ``None`` when the source does not report one.
    """

    document_id: str
    text: str
    ocr_confidence: float | None = None


@dataclass(frozen=True)
class DocumentClassification:
    """Classification record for one document, keyed by its identity."""

    document_id: str
    classification: ClassificationResult
    ocr_confidence: float | None = None
    matched_keywords: tuple[str, ...] = ()
    error: str | None = None

    @property
    def is_matched(self) -> bool:
        return bool(self.matched_keywords)

    @classmethod
    def failed(
        cls,
        document_id: str,
        error: str,
        ocr_confidence: float | None = None,
    ) -> "DocumentClassification":
        """Record for a document that could not be read or classified."""
        return cls(
            document_id=document_id,
            classification=ClassificationResult(category=FALLBACK_CATEGORY),
            ocr_confidence=ocr_confidence,
            error=error,
        )
