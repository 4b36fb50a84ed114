from collections.abc import Sequence

from doc_classifier.classification.models import CategoryMatch, CategoryRule
from doc_classifier.classification.rules import CATEGORY_RULES, FALLBACK_CATEGORY
from doc_classifier.logging.logger import Log


def category_score(normalized_text: str, rule: CategoryRule) -> float:
    """Share of the rule's keywords present in the text, damped by one."""
    matched = sum(1 for keyword in set(rule.keywords) if keyword in normalized_text)
    return matched / (len(rule.keywords) + 1)


def score_category(
    normalized_text: str,
    rules: Sequence[CategoryRule] = CATEGORY_RULES,
) -> CategoryMatch:
    """Pick the best category; the first rule wins ties, ``その他`` when nothing matches."""
    try:
        best = CategoryMatch(category=FALLBACK_CATEGORY)
        for rule in rules:
            confidence = category_score(normalized_text, rule)
            if confidence > best.confidence:
                best = CategoryMatch(category=rule.name, confidence=confidence)
    except Exception as exc:
        Log.error(f"Category scoring failed: {exc}")
        return CategoryMatch(category=FALLBACK_CATEGORY)
    Log.debug(f"Category selected: {best.category} ({best.confidence:.3f})")
    return best
