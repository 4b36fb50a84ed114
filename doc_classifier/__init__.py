from doc_classifier.classification.classifier import classify_category
from doc_classifier.classification.matcher import match_keywords
from doc_classifier.classification.models import ClassificationResult
from doc_classifier.classification.product import classify_product_type
from doc_classifier.metadata.extractor import extract_metadata
from doc_classifier.metadata.models import ExtractedMetadata
from doc_classifier.text import KeywordScore, extract_keywords, normalize, tokenize

__all__ = [
    "ClassificationResult",
    "ExtractedMetadata",
    "KeywordScore",
    "classify_category",
    "classify_product_type",
    "extract_keywords",
    "extract_metadata",
    "match_keywords",
    "normalize",
    "tokenize",
]
