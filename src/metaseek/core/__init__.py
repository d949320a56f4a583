"""Core types, models, and utilities."""

from .exceptions import (
    InvalidIDError,
    InvalidKeywordError,
    MetaseekError,
    NotFoundError,
    ProviderNotFoundError,
    ValidationError,
)
from .models import MovieInfo, MovieSearchResult
from .normalization import calculate_similarity, normalize_number, trim_keyword
from .priority import PrioritySlice
from .types import ProviderCapability

__all__ = [
    # Types
    "ProviderCapability",
    # Models
    "MovieInfo",
    "MovieSearchResult",
    # Normalization
    "calculate_similarity",
    "normalize_number",
    "trim_keyword",
    # Ranking
    "PrioritySlice",
    # Exceptions
    "InvalidIDError",
    "InvalidKeywordError",
    "MetaseekError",
    "NotFoundError",
    "ProviderNotFoundError",
    "ValidationError",
]
