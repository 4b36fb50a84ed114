"""Rule-based document classifier combining all scoring passes."""

from collections.abc import Sequence

from doc_classifier.classification.base import BaseClassifier
from doc_classifier.classification.category import score_category
from doc_classifier.classification.models import (
    CategoryRule,
    ClassificationResult,
    ProductRule,
)
from doc_classifier.classification.product import score_product_type
from doc_classifier.classification.rules import (
    CATEGORY_RULES,
    FALLBACK_CATEGORY,
    PRODUCT_RULES,
    normalize_category_rule,
    normalize_product_rule,
)
from doc_classifier.logging.logger import Log
from doc_classifier.metadata.extractor import extract_metadata
from doc_classifier.text.keywords import DEFAULT_MAX_KEYWORDS, extract_keywords
from doc_classifier.text.normalizer import normalize


class TextClassifier(BaseClassifier):
    """Stateless classifier over category and product rule tables.

    Rules are normalized once here, so callers may write keywords and model
    patterns as they appear on the document ("ゲートウェイ", "KP-GWBP").
    """

    def __init__(
        self,
        *,
        category_rules: Sequence[CategoryRule] = CATEGORY_RULES,
        product_rules: Sequence[ProductRule] = PRODUCT_RULES,
        max_keywords: int = DEFAULT_MAX_KEYWORDS,
    ) -> None:
        self._category_rules = tuple(normalize_category_rule(rule) for rule in category_rules)
        self._product_rules = tuple(normalize_product_rule(rule) for rule in product_rules)
        self._max_keywords = max_keywords

    def classify(self, text: str) -> ClassificationResult:
        try:
            normalized = normalize(text)
            category = score_category(normalized, self._category_rules)
            product = score_product_type(normalized, self._product_rules)
            result = ClassificationResult(
                category=category.category,
                category_confidence=category.confidence,
                product_type=product.product_type,
                product_confidence=product.confidence_score,
                keywords=tuple(extract_keywords(normalized, self._max_keywords)),
                metadata=extract_metadata(normalized),
            )
        except Exception as exc:
            Log.error(f"Text classification failed: {exc}")
            return ClassificationResult(category=FALLBACK_CATEGORY)
        Log.info(
            f"Classified as {result.category} ({result.category_confidence:.3f}), "
            f"product {result.product_type or 'unknown'} ({result.product_confidence})"
        )
        return result


_default_classifier = TextClassifier()


def classify_category(text: str) -> ClassificationResult:
    """Classify ``text`` with the default rule tables."""
    return _default_classifier.classify(text)
