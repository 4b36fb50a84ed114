from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractedMetadata:
    """Structured fields found in a document. ``None`` means not found."""

    document_date: str | None = None
    amount: int | None = None
    company_name: str | None = None
    project_name: str | None = None
