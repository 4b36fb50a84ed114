import time
from unittest.mock import MagicMock

import pytest

from doc_classifier.classification.classifier import TextClassifier
from doc_classifier.classification.models import ClassificationResult
from doc_classifier.processor.batch import BatchProcessor
from doc_classifier.processor.models import DocumentText


def _echo_classifier(delays: dict[str, float] | None = None) -> MagicMock:
    """Classifier whose category is the input text, optionally delayed per text."""
    delays = delays or {}

    def classify(text: str) -> ClassificationResult:
        time.sleep(delays.get(text, 0.0))
        if text == "bad":
            raise RuntimeError("boom")
        return ClassificationResult(category=text)

    classifier = MagicMock()
    classifier.classify.side_effect = classify
    return classifier


class TestBatchProcess:
    def test_returns_results_in_input_order(self) -> None:
        classifier = _echo_classifier({"slow": 0.05})
        processor = BatchProcessor(classifier, max_workers=3)
        documents = [DocumentText("1", "slow"), DocumentText("2", "fast"), DocumentText("3", "x")]

        results = processor.process(documents)

        assert [r.document_id for r in results] == ["1", "2", "3"]

    def test_correlates_results_by_document_id(self) -> None:
        classifier = _echo_classifier({"a": 0.03, "b": 0.01})
        processor = BatchProcessor(classifier, max_workers=4)
        documents = [DocumentText(f"doc-{text}", text) for text in ("a", "b", "c", "d")]

        results = processor.process(documents)

        for result in results:
            assert result.document_id == f"doc-{result.classification.category}"

    def test_failure_is_recorded_per_document(self) -> None:
        processor = BatchProcessor(_echo_classifier(), max_workers=2)
        documents = [DocumentText("ok", "fine"), DocumentText("ko", "bad")]

        ok, ko = processor.process(documents)

        assert ok.error is None
        assert ok.classification.category == "fine"
        assert ko.error == "boom"
        assert ko.classification.category == "その他"

    def test_carries_ocr_confidence(self) -> None:
        processor = BatchProcessor(_echo_classifier())
        (result,) = processor.process([DocumentText("1", "t", ocr_confidence=0.95)])
        assert result.ocr_confidence == 0.95

    def test_empty_batch(self) -> None:
        assert BatchProcessor(_echo_classifier()).process([]) == []

    def test_rejects_duplicate_ids(self) -> None:
        processor = BatchProcessor(_echo_classifier())
        with pytest.raises(ValueError, match="Duplicate document_id"):
            processor.process([DocumentText("1", "a"), DocumentText("1", "b")])

    def test_rejects_non_positive_workers(self) -> None:
        with pytest.raises(ValueError, match="max_workers"):
            BatchProcessor(_echo_classifier(), max_workers=0)


class TestBatchKeywordMatching:
    def test_matches_keywords_with_product_disambiguation(self) -> None:
        processor = BatchProcessor(TextClassifier(), max_workers=2)
        documents = [
            DocumentText("gw", "マルチ蓄電システム用ゲートウェイ\n型式 KP-GWBP"),
            DocumentText("pcs", "パワーコンディショナ KP-BP"),
        ]

        gw, pcs = processor.process(documents, keywords=["ゲートウェイ"])

        assert gw.matched_keywords == ("ゲートウェイ",)
        assert gw.is_matched
        assert pcs.matched_keywords == ()
        assert not pcs.is_matched

    def test_without_keywords_nothing_is_matched(self) -> None:
        processor = BatchProcessor(TextClassifier())
        (result,) = processor.process([DocumentText("gw", "ゲートウェイ KP-GWBP")])
        assert result.matched_keywords == ()
        assert result.classification.product_type == "gateway"
