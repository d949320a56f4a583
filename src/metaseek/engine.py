"""Lookup engine orchestrating providers, ranking and the metadata cache."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from metaseek.core.exceptions import (
    InvalidIDError,
    InvalidKeywordError,
    NotFoundError,
    ProviderNotFoundError,
)
from metaseek.core.models import MovieInfo, MovieSearchResult
from metaseek.core.normalization import calculate_similarity, trim_keyword
from metaseek.core.priority import PrioritySlice
from metaseek.core.types import ProviderCapability
from metaseek.db.repositories.movie_info import MovieInfoRepository

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

    from metaseek.providers.base import AbstractProvider
    from metaseek.providers.registry import ProviderRegistry

logger = logging.getLogger(__name__)


class Engine:
    """
    Answers movie lookups from providers, backed by a best-effort cache.

    Lookup flow:
    1. Validate the keyword or ID and resolve the provider
    2. In lazy mode, serve a valid cached record when one exists
    3. Otherwise query one provider, or fan out to all of them
    4. Rank fan-out results by similarity x provider priority
    5. Write fetched records back to the cache

    Cache failures never reach the caller: reads degrade to a miss and
    writes are logged and dropped. Each cache operation opens its own
    session so concurrent fan-out tasks never share one.
    """

    def __init__(
        self,
        registry: "ProviderRegistry",
        session_factory: "async_sessionmaker[AsyncSession]",
    ) -> None:
        """
        Initialize the engine.

        Args:
            registry: Providers available for lookups
            session_factory: Session factory for the metadata cache
        """
        self._registry = registry
        self._session_factory = session_factory

    @property
    def registry(self) -> "ProviderRegistry":
        return self._registry

    def _get_provider(self, name: str) -> "AbstractProvider":
        provider = self._registry.get(name)
        if provider is None:
            raise ProviderNotFoundError(name)
        return provider

    # ------------------------------------------------------------------
    # Single provider search
    # ------------------------------------------------------------------

    async def search_movie(
        self,
        keyword: str,
        name: str,
        lazy: bool = False,
    ) -> list[MovieSearchResult]:
        """
        Search one provider by keyword.

        Args:
            keyword: Movie number, ID or free text
            name: Provider name
            lazy: Serve a cached record before asking the provider

        Returns:
            The provider's results, unranked

        Raises:
            InvalidKeywordError: Keyword is empty after trimming
            ProviderNotFoundError: No provider with that name
        """
        if not (keyword := trim_keyword(keyword)):
            raise InvalidKeywordError()
        provider = self._get_provider(name)
        return await self._search_movie(keyword, provider, lazy)

    async def _search_movie(
        self,
        keyword: str,
        provider: "AbstractProvider",
        lazy: bool,
    ) -> list[MovieSearchResult]:
        if provider.supports(ProviderCapability.SEARCH):
            if lazy:
                info = await self._load_by_keyword(provider.name, keyword)
                if info is not None and info.valid():
                    return [info.to_search_result()]
            return await provider.search_movie(keyword)

        # Providers without search treat the keyword as an ID.
        info = await self._get_movie_info_by_id(keyword, provider, lazy=True)
        return [info.to_search_result()]

    # ------------------------------------------------------------------
    # All provider search
    # ------------------------------------------------------------------

    async def search_movie_all(
        self,
        keyword: str,
        lazy: bool = False,
    ) -> list[MovieSearchResult]:
        """
        Search every registered provider concurrently.

        Provider failures are logged and skipped. Valid results are ranked
        by keyword similarity times provider priority. Valid lazy cache hits
        are returned in storage order, without ranking.

        Raises:
            InvalidKeywordError: Keyword is empty after trimming
            NotFoundError: No valid result from any provider
        """
        if not (keyword := trim_keyword(keyword)):
            raise InvalidKeywordError()

        if lazy:
            cached = [
                info.to_search_result()
                for info in await self._load_all_by_keyword(keyword)
                if info.valid()
            ]
            if cached:
                logger.debug(f"Cache hit for all-provider search: {keyword}")
                return cached

        responses = await self._search_movie_all(keyword)

        # post-processing
        ps: PrioritySlice[MovieSearchResult] = PrioritySlice()
        for provider, results in responses:
            for result in results:
                if not result.valid():
                    continue
                ps.append(calculate_similarity(keyword, result.number) * provider.priority, result)

        if not ps:
            raise NotFoundError(details={"keyword": keyword})
        return ps.sort().underlying()

    async def _search_movie_all(
        self,
        keyword: str,
    ) -> list[tuple["AbstractProvider", list[MovieSearchResult]]]:
        """Run the search on all providers in parallel."""
        providers = self._registry.all()
        tasks = [self._try_search(keyword, provider) for provider in providers]
        responses = await asyncio.gather(*tasks)
        return list(zip(providers, responses))

    async def _try_search(
        self,
        keyword: str,
        provider: "AbstractProvider",
    ) -> list[MovieSearchResult]:
        """Search a single provider, turning its failure into no results."""
        try:
            return await self._search_movie(keyword, provider, lazy=False)
        except Exception as e:
            logger.warning(f"Provider {provider.name} search failed for {keyword!r}: {e}")
            return []

    # ------------------------------------------------------------------
    # Fetch by ID
    # ------------------------------------------------------------------

    async def get_movie_info_by_id(
        self,
        movie_id: str,
        name: str,
        lazy: bool = False,
    ) -> MovieInfo:
        """
        Fetch a full movie record by provider-local ID.

        Args:
            movie_id: Raw ID, normalized by the provider
            name: Provider name
            lazy: Serve a cached record before asking the provider

        Returns:
            A valid movie record

        Raises:
            ProviderNotFoundError: No provider with that name
            InvalidIDError: Provider rejected the ID
            NotFoundError: Provider returned an invalid record
        """
        provider = self._get_provider(name)
        return await self._get_movie_info_by_id(movie_id, provider, lazy)

    async def _get_movie_info_by_id(
        self,
        movie_id: str,
        provider: "AbstractProvider",
        lazy: bool,
    ) -> MovieInfo:
        if not (movie_id := provider.normalize_id(movie_id)):
            raise InvalidIDError()

        if lazy:
            info = await self._load_by_id(provider.name, movie_id)
            if info is not None and info.valid():
                return info

        info = await provider.get_movie_info_by_id(movie_id)
        if not info.valid():
            raise NotFoundError(
                f"invalid movie info from {provider.name}",
                details={"provider": provider.name, "id": movie_id},
            )

        await self._save(info)
        return info

    # ------------------------------------------------------------------
    # Cache access
    # ------------------------------------------------------------------

    async def _load_by_keyword(self, provider: str, keyword: str) -> MovieInfo | None:
        try:
            async with self._session_factory() as session:
                row = await MovieInfoRepository(session).get_by_provider_and_keyword(
                    provider, keyword
                )
                return MovieInfo.model_validate(row) if row is not None else None
        except Exception as e:
            logger.warning(f"Cache lookup failed for {provider}/{keyword}: {e}")
            return None

    async def _load_by_id(self, provider: str, movie_id: str) -> MovieInfo | None:
        try:
            async with self._session_factory() as session:
                row = await MovieInfoRepository(session).get_by_provider_and_id(
                    provider, movie_id
                )
                if row is None:
                    logger.debug(f"Cache miss for {provider}/{movie_id}")
                    return None
                logger.debug(f"Cache hit for {provider}/{movie_id}")
                return MovieInfo.model_validate(row)
        except Exception as e:
            logger.warning(f"Cache lookup failed for {provider}/{movie_id}: {e}")
            return None

    async def _load_all_by_keyword(self, keyword: str) -> list[MovieInfo]:
        try:
            async with self._session_factory() as session:
                rows = await MovieInfoRepository(session).find_by_id_or_number(keyword)
                return [MovieInfo.model_validate(row) for row in rows]
        except Exception as e:
            logger.warning(f"Cache lookup failed for {keyword}: {e}")
            return []

    async def _save(self, info: MovieInfo) -> None:
        """Upsert a fetched record. Failures are logged and ignored."""
        try:
            async with self._session_factory() as session:
                await MovieInfoRepository(session).upsert(info)
                await session.commit()
        except Exception as e:
            logger.warning(f"Failed to cache movie info {info.provider}/{info.id}: {e}")
