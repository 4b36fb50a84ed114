"""Fixed rule tables for category and product-type classification.

Keywords are stored in normalized form so they compare directly against
normalized document text ("ゲートウェイ" becomes "ゲ-トウェイ").
When a product type is added, extend PRODUCT_RULES and KEYWORD_PRODUCT_TYPES together.
"""

from dataclasses import replace

from doc_classifier.classification.models import CategoryRule, ProductRule
from doc_classifier.text.normalizer import normalize

FALLBACK_CATEGORY = "その他"

GATEWAY = "gateway"
POWER_CONDITIONER = "power_conditioner"
BATTERY_UNIT = "battery_unit"
PV_UNIT = "pv_unit"

KEYWORD_WEIGHT = 2
MODEL_PATTERN_WEIGHT = 3
# Minimum product score before product-bearing search keywords are trusted.
# Tied to the weights above.
MIN_PRODUCT_CONFIDENCE = 3


def _normalized(*values: str) -> tuple[str, ...]:
    return tuple(normalize(value) for value in values)


def normalize_category_rule(rule: CategoryRule) -> CategoryRule:
    """Bring a caller-supplied rule into the form matched against normalized text."""
    return replace(rule, keywords=_normalized(*rule.keywords))


def normalize_product_rule(rule: ProductRule) -> ProductRule:
    return replace(
        rule,
        keywords=_normalized(*rule.keywords),
        model_patterns=_normalized(*rule.model_patterns),
        exclude_patterns=_normalized(*rule.exclude_patterns),
    )


CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule("申請書", _normalized("申請", "補助金", "助成金", "交付", "様式", "承認")),
    CategoryRule(
        "事業計画書", _normalized("事業計画", "実施計画", "目的", "概要", "効果", "期間")
    ),
    CategoryRule("収支計画書", _normalized("収支", "予算", "経費", "支出", "収入", "内訳")),
    CategoryRule("見積書", _normalized("見積", "見積書", "税込", "消費税", "合計金額", "単価")),
    CategoryRule("請求書", _normalized("請求", "請求書", "支払", "振込", "口座", "期限")),
    CategoryRule(FALLBACK_CATEGORY),
)

PRODUCT_RULES: tuple[ProductRule, ...] = (
    ProductRule(
        GATEWAY,
        keywords=_normalized("ゲートウェイ", "マルチ蓄電システム用ゲートウェイ", "ゲートウエイ"),
        model_patterns=_normalized("kp-gwbp", "gwbp", "kpgwbp"),
        exclude_patterns=_normalized("パワーコンディショナ", "パワコン", "kp-bp", "kpbp"),
    ),
    ProductRule(
        POWER_CONDITIONER,
        keywords=_normalized("パワーコンディショナ", "マルチ蓄電パワーコンディショナ", "パワコン"),
        model_patterns=_normalized("kpbp", "kp-bp"),
        exclude_patterns=_normalized("ゲートウェイ", "ゲートウエイ", "kp-gwbp", "kpgwbp"),
    ),
    ProductRule(
        BATTERY_UNIT,
        keywords=_normalized("蓄電池ユニット", "蓄電池"),
        model_patterns=_normalized("kp-bu", "kpbu"),
    ),
    ProductRule(
        PV_UNIT,
        keywords=_normalized("PVユニット", "PV"),
        model_patterns=_normalized("kp-pv", "kppv"),
    ),
)

KEYWORD_PRODUCT_TYPES: dict[str, str] = {
    **dict.fromkeys(_normalized("ゲートウェイ", "ゲートウエイ"), GATEWAY),
    **dict.fromkeys(_normalized("パワーコンディショナ", "パワコン"), POWER_CONDITIONER),
    **dict.fromkeys(_normalized("蓄電池ユニット", "蓄電池"), BATTERY_UNIT),
    **dict.fromkeys(_normalized("PVユニット", "PV"), PV_UNIT),
}
