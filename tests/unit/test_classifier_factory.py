import pytest

from doc_classifier.classification.classifier import TextClassifier
from doc_classifier.classification.factory import ClassifierFactory
from doc_classifier.classification.models import CategoryRule, ProductRule
from doc_classifier.config.settings import Settings


class TestClassifierFactory:
    def test_creates_text_classifier(self) -> None:
        classifier = ClassifierFactory.create(Settings())
        assert isinstance(classifier, TextClassifier)

    def test_honors_max_keywords(self) -> None:
        classifier = ClassifierFactory.create(Settings(max_keywords=2))
        result = classifier.classify("a b c d")
        assert [k.keyword for k in result.keywords] == ["a", "b"]

    def test_rejects_non_positive_max_keywords(self) -> None:
        with pytest.raises(ValueError, match="max_keywords"):
            ClassifierFactory.create(Settings(max_keywords=0))


class TestTextClassifier:
    def test_uses_injected_rules(self) -> None:
        classifier = TextClassifier(
            category_rules=[CategoryRule("label", ("kp",))],
            product_rules=[ProductRule("widget", model_patterns=("kp-1",))],
        )
        result = classifier.classify("KP-1")
        assert result.category == "label"
        assert result.product_type == "widget"
        assert result.product_confidence == 3

    def test_falls_back_on_internal_error(self) -> None:
        result = TextClassifier().classify(None)  # type: ignore[arg-type]
        assert result.category == "その他"
        assert result.category_confidence == 0.0
