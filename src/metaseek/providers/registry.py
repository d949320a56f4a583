"""Provider registry mapping provider names to instances."""

from __future__ import annotations

import importlib
import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from metaseek.providers.base import AbstractProvider, ProviderConfig

if TYPE_CHECKING:
    from metaseek.config import MetaseekSettings

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """
    Name-keyed collection of movie providers.

    Populated once at startup and only read afterwards, so concurrent
    lookups need no locking.
    """

    def __init__(self) -> None:
        self._providers: dict[str, AbstractProvider] = {}

    def register(self, provider: AbstractProvider) -> None:
        """Register a provider under its name. Disabled providers are skipped."""
        if not provider.is_enabled:
            logger.info(f"Skipping disabled provider: {provider.name}")
            return
        if provider.name in self._providers:
            raise ValueError(f"Provider already registered: {provider.name}")
        self._providers[provider.name] = provider

    def get(self, name: str) -> AbstractProvider | None:
        """Look up a provider by name."""
        return self._providers.get(name)

    def all(self) -> list[AbstractProvider]:
        """Return every registered provider."""
        return list(self._providers.values())

    def names(self) -> list[str]:
        """Return the names of all registered providers."""
        return list(self._providers)

    def __contains__(self, name: object) -> bool:
        return name in self._providers

    def __len__(self) -> int:
        return len(self._providers)

    @classmethod
    def from_providers(cls, providers: Iterable[AbstractProvider]) -> "ProviderRegistry":
        """Create a registry from ready-made provider instances."""
        registry = cls()
        for provider in providers:
            registry.register(provider)
        return registry

    @classmethod
    def from_settings(cls, settings: "MetaseekSettings") -> "ProviderRegistry":
        """
        Create a registry with providers configured from settings.

        Each entry of settings.providers is an import spec of the form
        "package.module:ClassName". Priority overrides are matched by
        the provider class NAME.
        """
        registry = cls()
        for spec in settings.providers:
            provider_cls = _load_provider_class(spec)
            config = ProviderConfig(
                priority=settings.provider_priorities.get(provider_cls.NAME),
            )
            registry.register(provider_cls(config))
        return registry

    async def close_all(self) -> None:
        """Close all registered providers."""
        for provider in self._providers.values():
            await provider.close()


def _load_provider_class(spec: str) -> type[AbstractProvider]:
    """Import a provider class from a "module:attr" spec."""
    module_name, sep, attr = spec.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"Invalid provider spec (expected 'module:Class'): {spec}")

    module = importlib.import_module(module_name)
    provider_cls = getattr(module, attr, None)
    if not isinstance(provider_cls, type) or not issubclass(provider_cls, AbstractProvider):
        raise ValueError(f"Not a provider class: {spec}")
    return provider_cls
