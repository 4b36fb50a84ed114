from abc import ABC, abstractmethod

from doc_classifier.classification.models import ClassificationResult


class BaseClassifier(ABC):
    """Contract for all document classifiers."""

    @abstractmethod
    def classify(self, text: str) -> ClassificationResult:
        """Classify one document's OCR text.

        Args:
            text: Raw text as produced by the OCR provider. May be empty.

        Returns:
            ClassificationResult with category, product type, keywords and metadata.
            Never raises; internal failures yield the fallback result.
        """
