from doc_classifier.classification.base import BaseClassifier
from doc_classifier.classification.classifier import TextClassifier
from doc_classifier.config.settings import Settings


class ClassifierFactory:
    """Creates the configured classifier."""

    @classmethod
    def create(cls, settings: Settings) -> BaseClassifier:
        if settings.max_keywords < 1:
            raise ValueError(f"max_keywords must be positive, got {settings.max_keywords}")
        return TextClassifier(max_keywords=settings.max_keywords)
