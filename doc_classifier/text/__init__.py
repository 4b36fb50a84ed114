from doc_classifier.text.keywords import (
    detect_character_types,
    extract_keywords,
    summarize,
    tokenize,
)
from doc_classifier.text.models import KeywordScore
from doc_classifier.text.normalizer import normalize

__all__ = [
    "KeywordScore",
    "detect_character_types",
    "extract_keywords",
    "normalize",
    "summarize",
    "tokenize",
]
