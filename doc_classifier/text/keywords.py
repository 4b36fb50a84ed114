import re
from collections import Counter

from doc_classifier.logging.logger import Log
from doc_classifier.text.models import KeywordScore
from doc_classifier.text.normalizer import normalize

DEFAULT_MAX_KEYWORDS = 10
DEFAULT_SUMMARY_LENGTH = 100

_TOKEN_SPLIT_RE = re.compile(r"[\s,.。、．，]+")

_CHARACTER_TYPE_PATTERNS: dict[str, re.Pattern[str]] = {
    "hiragana": re.compile(r"[\u3040-\u309f]"),
    "katakana": re.compile(r"[\u30a0-\u30ff]"),
    "kanji": re.compile(r"[\u4e00-\u9fff]"),
    "alphabet": re.compile(r"[a-zA-Z]"),
    "number": re.compile(r"[0-9]"),
}


def tokenize(text: str) -> list[str]:
    """Split on whitespace and sentence punctuation, dropping empty tokens."""
    try:
        tokens = [token for token in _TOKEN_SPLIT_RE.split(text) if token]
    except Exception as exc:
        Log.error(f"Tokenization failed: {exc}")
        return [text]
    Log.debug(f"Tokenized into {len(tokens)} tokens")
    return tokens


def extract_keywords(text: str, max_keywords: int = DEFAULT_MAX_KEYWORDS) -> list[KeywordScore]:
    """Score tokens by relative frequency, highest first.

    Ties keep first-seen order. Returns an empty list for empty input or on failure.
    """
    try:
        normalized = normalize(text)
        if not normalized:
            return []
        tokens = tokenize(normalized)
        if not tokens:
            return []
        total = len(tokens)
        # Counter preserves first-seen order and sorted() is stable
        scored = [
            KeywordScore(keyword=token, score=count / total)
            for token, count in Counter(tokens).items()
        ]
        keywords = sorted(scored, key=lambda item: item.score, reverse=True)[:max_keywords]
    except Exception as exc:
        Log.error(f"Keyword extraction failed: {exc}")
        return []
    Log.debug(f"Extracted {len(keywords)} keywords")
    return keywords


def summarize(text: str, max_length: int = DEFAULT_SUMMARY_LENGTH) -> str:
    """Head of the normalized text, marked with an ellipsis when truncated."""
    try:
        normalized = normalize(text)
        if len(normalized) <= max_length:
            return normalized
        summary = normalized[:max_length] + "..."
    except Exception as exc:
        Log.error(f"Summarization failed: {exc}")
        return text
    Log.debug(f"Summarized {len(text)} chars -> {len(summary)} chars")
    return summary


def detect_character_types(text: str) -> frozenset[str]:
    try:
        types = frozenset(
            name for name, pattern in _CHARACTER_TYPE_PATTERNS.items() if pattern.search(text)
        )
    except Exception as exc:
        Log.error(f"Character type detection failed: {exc}")
        return frozenset()
    Log.debug(f"Detected character types: {sorted(types)}")
    return types
