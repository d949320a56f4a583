"""Main library client for standalone usage."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from metaseek.config import MetaseekSettings, get_settings
from metaseek.core.models import MovieInfo, MovieSearchResult
from metaseek.db.session import DatabaseManager
from metaseek.engine import Engine
from metaseek.providers.registry import ProviderRegistry

if TYPE_CHECKING:
    from metaseek.providers.base import AbstractProvider

logger = logging.getLogger(__name__)


class MetaseekClient:
    """
    Main client for the metaseek library.

    Wires settings, the metadata cache and the provider registry into an
    Engine, and owns their lifecycle.

    Usage:
        async with MetaseekClient(providers=[MyProvider()]) as client:
            # Search a single provider
            results = await client.search_movie("ABC-123", "my-provider")

            # Search every provider, ranked
            results = await client.search_movie_all("abc123", lazy=True)

            # Fetch a full record
            info = await client.get_movie_info_by_id("abc00123", "my-provider")

    Without explicit providers, the registry is built from settings.
    """

    def __init__(
        self,
        settings: MetaseekSettings | None = None,
        *,
        providers: Iterable["AbstractProvider"] | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            settings: Application settings. If not provided, loaded from environment.
            providers: Provider instances to register instead of settings.providers.
        """
        self._settings = settings or get_settings()
        self._providers = list(providers) if providers is not None else None
        self._database: DatabaseManager | None = None
        self._registry: ProviderRegistry | None = None
        self._engine: Engine | None = None

    async def __aenter__(self) -> MetaseekClient:
        """Initialize resources on context entry."""
        await self._initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Clean up resources on context exit."""
        await self.close()

    async def _initialize(self) -> None:
        """Initialize client resources."""
        level = "DEBUG" if self._settings.debug else self._settings.log_level.upper()
        logging.getLogger("metaseek").setLevel(level)

        self._database = DatabaseManager(
            self._settings.database_url,
            self._settings.database_echo,
            pool_size=self._settings.db_pool_size,
            max_overflow=self._settings.db_max_overflow,
        )
        if self._settings.auto_migrate:
            await self._database.create_tables()
            logger.info("Database tables ensured")

        if self._providers is not None:
            self._registry = ProviderRegistry.from_providers(self._providers)
        else:
            self._registry = ProviderRegistry.from_settings(self._settings)
        logger.info(f"Registered providers: {', '.join(self._registry.names()) or 'none'}")

        self._engine = Engine(self._registry, self._database.session_factory)

    async def close(self) -> None:
        """Close all resources."""
        if self._registry:
            await self._registry.close_all()
            self._registry = None

        if self._database:
            await self._database.close()
            self._database = None

        self._engine = None

    @property
    def engine(self) -> Engine:
        """The underlying lookup engine."""
        if self._engine is None:
            raise RuntimeError(
                "Client not initialized. Use 'async with MetaseekClient() as client:'"
            )
        return self._engine

    async def search_movie(
        self,
        keyword: str,
        name: str,
        lazy: bool = False,
    ) -> list[MovieSearchResult]:
        """Search one provider by keyword."""
        return await self.engine.search_movie(keyword, name, lazy)

    async def search_movie_all(
        self,
        keyword: str,
        lazy: bool = False,
    ) -> list[MovieSearchResult]:
        """Search all providers and rank the merged results."""
        return await self.engine.search_movie_all(keyword, lazy)

    async def get_movie_info_by_id(
        self,
        movie_id: str,
        name: str,
        lazy: bool = False,
    ) -> MovieInfo:
        """Fetch a full movie record from one provider."""
        return await self.engine.get_movie_info_by_id(movie_id, name, lazy)
