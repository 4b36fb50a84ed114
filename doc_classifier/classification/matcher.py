"""Product-aware matching of user search keywords against a document.

Keywords that name a product type ("ゲートウェイ", "パワコン", ...) match only when
the document's product type was resolved with enough evidence. Other keywords
match by plain substring containment.
"""

from collections.abc import Mapping, Sequence

from doc_classifier.classification.product import score_product_type
from doc_classifier.classification.rules import KEYWORD_PRODUCT_TYPES, MIN_PRODUCT_CONFIDENCE
from doc_classifier.logging.logger import Log
from doc_classifier.text.normalizer import normalize


def keyword_matches(
    normalized_text: str,
    normalized_keyword: str,
    product_type: str | None,
    confidence_score: int,
    keyword_product_types: Mapping[str, str] = KEYWORD_PRODUCT_TYPES,
) -> bool:
    if not normalized_keyword:
        return False
    expected_type = keyword_product_types.get(normalized_keyword)
    if expected_type is None:
        return normalized_keyword in normalized_text
    if confidence_score < MIN_PRODUCT_CONFIDENCE:
        return False
    return product_type == expected_type


def filter_keywords(
    normalized_text: str,
    raw_keywords: Sequence[str],
    product_type: str | None,
    confidence_score: int,
) -> list[str]:
    """Return the subset of ``raw_keywords`` the document matches, in input order.

    Matched keywords are returned as given by the caller, for display and tagging.
    """
    try:
        matched = [
            keyword
            for keyword in raw_keywords
            if keyword_matches(normalized_text, normalize(keyword), product_type, confidence_score)
        ]
    except Exception as exc:
        Log.error(f"Keyword matching failed: {exc}")
        return []
    Log.debug(f"Matched {len(matched)}/{len(raw_keywords)} keywords: {matched}")
    return matched


def match_keywords(text: str, keywords: Sequence[str]) -> list[str]:
    """Resolve the product type of ``text`` and filter ``keywords`` against it."""
    normalized_text = normalize(text)
    product = score_product_type(normalized_text)
    return filter_keywords(
        normalized_text,
        keywords,
        product.product_type,
        product.confidence_score,
    )
