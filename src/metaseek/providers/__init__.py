"""Provider interface and registry."""

from metaseek.providers.base import AbstractProvider, ProviderConfig
from metaseek.providers.registry import ProviderRegistry

__all__ = [
    "AbstractProvider",
    "ProviderConfig",
    "ProviderRegistry",
]
