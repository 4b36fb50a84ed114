from dataclasses import dataclass, field

from doc_classifier.metadata.models import ExtractedMetadata
from doc_classifier.text.models import KeywordScore


@dataclass(frozen=True)
class CategoryRule:
    """A document category and its characteristic keywords.

    An empty keyword tuple marks the zero-score fallback category.
    """

    name: str
    keywords: tuple[str, ...] = ()


@dataclass(frozen=True)
class ProductRule:
    """Evidence for one product type found on labels and manual pages."""

    name: str
    keywords: tuple[str, ...] = ()
    model_patterns: tuple[str, ...] = ()
    exclude_patterns: tuple[str, ...] = ()


@dataclass(frozen=True)
class CategoryMatch:
    category: str
    confidence: float = 0.0


@dataclass(frozen=True)
class ProductMatch:
    product_type: str | None = None
    confidence_score: int = 0


@dataclass(frozen=True)
class ClassificationResult:
    """Everything the classifier knows about one document."""

    category: str
    category_confidence: float = 0.0
    product_type: str | None = None
    product_confidence: int = 0
    keywords: tuple[KeywordScore, ...] = ()
    metadata: ExtractedMetadata = field(default_factory=ExtractedMetadata)
