from dataclasses import dataclass


@dataclass(frozen=True)
class KeywordScore:
    """A token and its share of all tokens in one document (0..1)."""

    keyword: str
    score: float
