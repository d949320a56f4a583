"""Keyword and movie number normalization for matching and ranking."""

import re
import unicodedata
from difflib import SequenceMatcher


def trim_keyword(keyword: str | None) -> str:
    """Strip surrounding whitespace from a search keyword."""
    if not keyword:
        return ""
    return keyword.strip()


def normalize_number(value: str) -> str:
    """
    Normalize a movie number for comparison.

    Folds compatibility characters, uppercases and drops separators:
    - "abc-123" -> "ABC123"
    - "ABC_123" -> "ABC123"
    - "ａｂｃ １２３" -> "ABC123"
    """
    if not value:
        return ""
    folded = unicodedata.normalize("NFKC", value).upper()
    return re.sub(r"[\W_]", "", folded)


def calculate_similarity(keyword: str, number: str) -> float:
    """
    Calculate similarity between a keyword and a movie number.

    Returns a score between 0.0 and 1.0, with 1.0 for numbers that are
    equal once case and separators are ignored.
    """
    norm1 = normalize_number(keyword)
    norm2 = normalize_number(number)

    if not norm1 or not norm2:
        return 0.0

    if norm1 == norm2:
        return 1.0

    return SequenceMatcher(None, norm1, norm2).ratio()
