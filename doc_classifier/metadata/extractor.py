"""Regex extraction of date, amount, company and project name from document text."""

import re
from collections.abc import Callable
from typing import TypeVar

from doc_classifier.logging.logger import Log
from doc_classifier.metadata.models import ExtractedMetadata
from doc_classifier.text.normalizer import normalize

DATE_RE = re.compile(r"\d{4}[-/年]\d{1,2}[-/月]\d{1,2}日?")
AMOUNT_RE = re.compile(r"[¥￥]?\s*(\d[\d,]*)\s*円")
COMPANY_RE = re.compile(r"[（(]?(?:株式|有限|合同)?会社[）)]?\s*([^\s「」（）()]+)")
PROJECT_RE = re.compile(r"([^\s「」（）()]+)(?:事業|計画)")

T = TypeVar("T")


def _extract_document_date(text: str) -> str | None:
    match = DATE_RE.search(text)
    return match.group(0) if match else None


def _extract_amount(text: str) -> int | None:
    match = AMOUNT_RE.search(text)
    return int(match.group(1).replace(",", "")) if match else None


def _extract_company_name(text: str) -> str | None:
    match = COMPANY_RE.search(text)
    return match.group(1) if match else None


def _extract_project_name(text: str) -> str | None:
    match = PROJECT_RE.search(text)
    return match.group(1) if match else None


def _safe(extractor: Callable[[str], T], text: str) -> T | None:
    try:
        return extractor(text)
    except Exception as exc:
        Log.error(f"Metadata extraction failed in {extractor.__name__}: {exc}")
        return None


def extract_metadata(text: str) -> ExtractedMetadata:
    """Extract each field independently; a field that fails or is absent stays ``None``."""
    normalized = normalize(text)
    metadata = ExtractedMetadata(
        document_date=_safe(_extract_document_date, normalized),
        amount=_safe(_extract_amount, normalized),
        company_name=_safe(_extract_company_name, normalized),
        project_name=_safe(_extract_project_name, normalized),
    )
    Log.debug(f"Metadata extracted: {metadata}")
    return metadata
