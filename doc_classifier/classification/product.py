from collections.abc import Sequence

from doc_classifier.classification.models import ProductMatch, ProductRule
from doc_classifier.classification.rules import (
    KEYWORD_WEIGHT,
    MODEL_PATTERN_WEIGHT,
    PRODUCT_RULES,
)
from doc_classifier.logging.logger import Log
from doc_classifier.text.normalizer import normalize


def product_score(normalized_text: str, rule: ProductRule) -> int:
    """Weighted evidence for one product rule; any exclude pattern zeroes it."""
    if any(pattern in normalized_text for pattern in rule.exclude_patterns):
        return 0
    keyword_hits = sum(1 for keyword in set(rule.keywords) if keyword in normalized_text)
    model_hits = sum(1 for pattern in set(rule.model_patterns) if pattern in normalized_text)
    return keyword_hits * KEYWORD_WEIGHT + model_hits * MODEL_PATTERN_WEIGHT


def score_product_type(
    normalized_text: str,
    rules: Sequence[ProductRule] = PRODUCT_RULES,
) -> ProductMatch:
    """Pick the highest scoring product rule; the first rule wins ties."""
    try:
        best = ProductMatch()
        for rule in rules:
            score = product_score(normalized_text, rule)
            if score > best.confidence_score:
                best = ProductMatch(product_type=rule.name, confidence_score=score)
                Log.debug(f"Product type candidate: {rule.name} (score {score})")
    except Exception as exc:
        Log.error(f"Product type scoring failed: {exc}")
        return ProductMatch()
    Log.debug(
        f"Product type selected: {best.product_type or 'unknown'} "
        f"(score {best.confidence_score})"
    )
    return best


def classify_product_type(text: str) -> tuple[str | None, int]:
    """Return ``(product_type, confidence_score)`` for raw or normalized text."""
    match = score_product_type(normalize(text))
    return match.product_type, match.confidence_score
