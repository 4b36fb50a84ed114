"""Concurrent classification of document batches."""

from collections.abc import Sequence
from concurrent.futures import Future, ThreadPoolExecutor, as_completed

from doc_classifier.classification.base import BaseClassifier
from doc_classifier.classification.matcher import filter_keywords
from doc_classifier.logging.logger import Log
from doc_classifier.processor.models import DocumentClassification, DocumentText
from doc_classifier.text.normalizer import normalize


class BatchProcessor:
    """Classifies documents independently on a worker pool.

    Results are correlated to their document by ``document_id`` and returned
    in input order, whatever order the workers finish in.
    """

    def __init__(self, classifier: BaseClassifier, max_workers: int = 4) -> None:
        if max_workers < 1:
            raise ValueError(f"max_workers must be positive, got {max_workers}")
        self._classifier = classifier
        self._max_workers = max_workers

    def process(
        self,
        documents: Sequence[DocumentText],
        keywords: Sequence[str] | None = None,
    ) -> list[DocumentClassification]:
        """Classify every document; with ``keywords``, also record which ones match."""
        self._require_unique_ids(documents)
        Log.info(f"Batch started: {len(documents)} documents")

        results: dict[str, DocumentClassification] = {}
        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            future_to_document: dict[Future[DocumentClassification], DocumentText] = {
                executor.submit(self.process_one, document, keywords): document
                for document in documents
            }
            for future in as_completed(future_to_document):
                document = future_to_document[future]
                try:
                    results[document.document_id] = future.result()
                except Exception as exc:
                    Log.exception(f"Document {document.document_id} failed: {exc}")
                    results[document.document_id] = DocumentClassification.failed(
                        document.document_id, str(exc), document.ocr_confidence
                    )

        failed = sum(1 for result in results.values() if result.error)
        Log.info(f"Batch finished: {len(results) - failed} succeeded, {failed} failed")
        return [results[document.document_id] for document in documents]

    def process_one(
        self,
        document: DocumentText,
        keywords: Sequence[str] | None = None,
    ) -> DocumentClassification:
        classification = self._classifier.classify(document.text)
        matched: tuple[str, ...] = ()
        if keywords:
            matched = tuple(
                filter_keywords(
                    normalize(document.text),
                    keywords,
                    classification.product_type,
                    classification.product_confidence,
                )
            )
        Log.debug(f"Document {document.document_id}: matched keywords {matched}")
        return DocumentClassification(
            document_id=document.document_id,
            classification=classification,
            ocr_confidence=document.ocr_confidence,
            matched_keywords=matched,
        )

    @staticmethod
    def _require_unique_ids(documents: Sequence[DocumentText]) -> None:
        seen: set[str] = set()
        for document in documents:
            if document.document_id in seen:
                raise ValueError(f"Duplicate document_id in batch: {document.document_id}")
            seen.add(document.document_id)
