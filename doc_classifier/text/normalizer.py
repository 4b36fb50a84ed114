"""Canonicalization of raw OCR text before any matching.

Steps, in order:
1. Collapse whitespace runs (full-width space included) to one ASCII space, trim.
2. Lower-case Latin letters, half-width and full-width.
3. Full-width digits to ASCII (code point - 0xFEE0).
4. Full-width Latin letters to ASCII (code point - 0xFEE0).
5. Every hyphen/dash-like character to the ASCII hyphen.
"""

import re

from doc_classifier.logging.logger import Log

FULLWIDTH_OFFSET = 0xFEE0

_WHITESPACE_RE = re.compile(r"\s+")

_CASE_FOLD = str.maketrans(
    {chr(cp): chr(cp + 0x20) for cp in (*range(0x41, 0x5B), *range(0xFF21, 0xFF3B))}
)
_FULLWIDTH_DIGITS = str.maketrans(
    {chr(cp): chr(cp - FULLWIDTH_OFFSET) for cp in range(0xFF10, 0xFF1A)}
)
_FULLWIDTH_LETTERS = str.maketrans(
    {
        chr(cp): chr(cp - FULLWIDTH_OFFSET)
        for cp in (*range(0xFF21, 0xFF3B), *range(0xFF41, 0xFF5B))
    }
)

DASH_CHARACTERS = (
    "-"  # hyphen-minus
    "－"  # fullwidth hyphen-minus
    "﹣"  # small hyphen-minus
    "−"  # minus sign
    "‐"  # hyphen
    "‑"  # non-breaking hyphen
    "‒"  # figure dash
    "–"  # en dash
    "—"  # em dash
    "―"  # horizontal bar
    "⁃"  # hyphen bullet
    "﹘"  # small em dash
    "⎯"  # horizontal line extension
    "⏤"  # straightness
    "ー"  # katakana prolonged sound mark
    "ｰ"  # halfwidth prolonged sound mark
    "─"  # box drawings light horizontal
    "━"  # box drawings heavy horizontal
)
_DASHES = str.maketrans({dash: "-" for dash in DASH_CHARACTERS})


def normalize(text: str) -> str:
    """Return the canonical form of ``text``; the input itself on any failure."""
    try:
        normalized = _WHITESPACE_RE.sub(" ", text).strip()
        normalized = normalized.translate(_CASE_FOLD)
        normalized = normalized.translate(_FULLWIDTH_DIGITS)
        normalized = normalized.translate(_FULLWIDTH_LETTERS)
        normalized = normalized.translate(_DASHES)
    except Exception as exc:
        Log.error(f"Text normalization failed: {exc}")
        return text
    Log.debug(f"Normalized {len(text)} chars -> {len(normalized)} chars")
    return normalized
