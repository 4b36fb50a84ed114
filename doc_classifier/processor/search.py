"""Matched / unmatched partition of classified documents for a keyword search."""

from collections.abc import Iterable, Sequence
from dataclasses import replace

from doc_classifier.logging.logger import Log
from doc_classifier.processor.models import DocumentClassification

KEYWORD_SEPARATOR = ","


def keywords_to_storage(keywords: Sequence[str]) -> str:
    """Comma-joined form a persistence layer stores alongside a processed document.

    Nothing in this package persists results; this pair defines the stored format
    for the storage collaborator so it round-trips with ``keywords_from_storage``.
    """
    return KEYWORD_SEPARATOR.join(keywords)


def keywords_from_storage(value: str | None) -> list[str]:
    """Inverse of ``keywords_to_storage``; a missing or empty value means no tags."""
    return parse_search_keywords(value) if value else []


def parse_search_keywords(search_text: str) -> list[str]:
    """Split user input such as ``"ゲートウェイ, 設置前"`` into keywords."""
    keywords = (keyword.strip() for keyword in search_text.split(KEYWORD_SEPARATOR))
    return [keyword for keyword in keywords if keyword]


class SearchSession:
    """Accumulates search results across batches for one keyword search.

    Membership is keyed by document id. Only ``add`` and ``move`` change it;
    moving a document never re-runs classification. A document moved into the
    matched group is tagged with all search keywords, one moved out loses its tags.
    """

    def __init__(self, keywords: Sequence[str]) -> None:
        self.keywords = tuple(keywords)
        self._results: dict[str, DocumentClassification] = {}
        self._matched_ids: dict[str, None] = {}
        self._unmatched_ids: dict[str, None] = {}

    def add(self, results: Iterable[DocumentClassification]) -> None:
        for result in results:
            self._results[result.document_id] = result
            self._place(result.document_id, matched=result.is_matched)
        Log.info(
            f"Search results: {len(self._matched_ids)} matched, "
            f"{len(self._unmatched_ids)} unmatched"
        )

    def move(self, document_id: str, *, matched: bool) -> DocumentClassification:
        """Manually re-file a document into the matched or unmatched group."""
        result = self._get(document_id)
        tags = self.keywords if matched else ()
        result = replace(result, matched_keywords=tags)
        self._results[document_id] = result
        self._place(document_id, matched=matched)
        Log.info(f"Document {document_id} moved to {'matched' if matched else 'unmatched'}")
        return result

    def move_many(self, document_ids: Iterable[str], *, matched: bool) -> None:
        for document_id in document_ids:
            self.move(document_id, matched=matched)

    def is_matched(self, document_id: str) -> bool:
        self._get(document_id)
        return document_id in self._matched_ids

    @property
    def matched(self) -> list[DocumentClassification]:
        return [self._results[document_id] for document_id in self._matched_ids]

    @property
    def unmatched(self) -> list[DocumentClassification]:
        return [self._results[document_id] for document_id in self._unmatched_ids]

    def clear(self) -> None:
        self._results.clear()
        self._matched_ids.clear()
        self._unmatched_ids.clear()

    def _get(self, document_id: str) -> DocumentClassification:
        result = self._results.get(document_id)
        if result is None:
            raise KeyError(f"Unknown document_id: {document_id}")
        return result

    def _place(self, document_id: str, *, matched: bool) -> None:
        self._matched_ids.pop(document_id, None)
        self._unmatched_ids.pop(document_id, None)
        target = self._matched_ids if matched else self._unmatched_ids
        target[document_id] = None
