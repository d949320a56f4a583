"""Abstract base provider declaring the capabilities the engine consumes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from pydantic import BaseModel

from metaseek.core.models import MovieInfo, MovieSearchResult
from metaseek.core.types import ProviderCapability


class ProviderConfig(BaseModel):
    """Configuration for a provider."""

    priority: float | None = None
    enabled: bool = True


class AbstractProvider(ABC):
    """
    Abstract base class for all movie providers.

    A provider wraps one site or service. The engine only relies on:
    - a stable name and a ranking priority
    - ID normalization
    - fetch-by-ID, plus keyword search when SEARCH is declared
    """

    # Class-level configuration (to be overridden by subclasses)
    NAME: ClassVar[str]
    PRIORITY: ClassVar[float] = 1.0
    CAPABILITIES: ClassVar[frozenset[ProviderCapability]] = frozenset(
        {ProviderCapability.FETCH}
    )

    def __init__(self, config: ProviderConfig | None = None) -> None:
        self.config = config or ProviderConfig()

    @property
    def name(self) -> str:
        """Stable, non-empty provider name."""
        return self.NAME

    @property
    def priority(self) -> float:
        """Ranking multiplier (higher = ranked first)."""
        if self.config.priority is not None:
            return self.config.priority
        return self.PRIORITY

    @property
    def capabilities(self) -> frozenset[ProviderCapability]:
        """Capabilities this provider implements."""
        return self.CAPABILITIES

    @property
    def is_enabled(self) -> bool:
        """Whether this provider is enabled."""
        return self.config.enabled

    def supports(self, capability: ProviderCapability) -> bool:
        """Check if this provider declares the given capability."""
        return capability in self.capabilities

    def normalize_id(self, raw_id: str) -> str:
        """
        Normalize a raw movie ID for this provider.

        Returns an empty string when the ID is not recognized.
        Override to apply site-specific rules.
        """
        return raw_id.strip() if raw_id else ""

    @abstractmethod
    async def get_movie_info_by_id(self, movie_id: str) -> MovieInfo:
        """
        Fetch the full record for a normalized movie ID.

        Args:
            movie_id: ID already passed through normalize_id

        Returns:
            The movie record

        Raises:
            Any provider-specific error when the lookup fails
        """
        ...

    async def search_movie(self, keyword: str) -> list[MovieSearchResult]:
        """Search movies by keyword. Only called when SEARCH is declared."""
        raise NotImplementedError(f"{self.name} does not support keyword search")

    async def close(self) -> None:
        """Release provider resources."""
        return None

    async def __aenter__(self) -> "AbstractProvider":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(name={self.name!r}, priority={self.priority})>"
