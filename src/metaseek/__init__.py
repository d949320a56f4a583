"""Metaseek - movie metadata lookup across pluggable providers with a write-back cache."""

from metaseek.client import MetaseekClient
from metaseek.core.exceptions import (
    InvalidIDError,
    InvalidKeywordError,
    MetaseekError,
    NotFoundError,
    ProviderNotFoundError,
)
from metaseek.core.models import MovieInfo, MovieSearchResult
from metaseek.core.types import ProviderCapability
from metaseek.engine import Engine
from metaseek.providers.base import AbstractProvider, ProviderConfig
from metaseek.providers.registry import ProviderRegistry

__version__ = "0.1.0"
__all__ = [
    # Client
    "Engine",
    "MetaseekClient",
    # Providers
    "AbstractProvider",
    "ProviderCapability",
    "ProviderConfig",
    "ProviderRegistry",
    # Models
    "MovieInfo",
    "MovieSearchResult",
    # Errors
    "InvalidIDError",
    "InvalidKeywordError",
    "MetaseekError",
    "NotFoundError",
    "ProviderNotFoundError",
    # Version
    "__version__",
]
