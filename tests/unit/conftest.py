"""Unit test fixtures with in-memory providers."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from typing import Any

import pytest

from metaseek.core.exceptions import NotFoundError
from metaseek.core.models import MovieInfo, MovieSearchResult
from metaseek.core.types import ProviderCapability
from metaseek.providers.base import AbstractProvider, ProviderConfig

# ============================================================================
# Fake Provider
# ============================================================================


class FakeProvider(AbstractProvider):
    """Provider serving canned data and recording every call."""

    NAME = "fake"

    def __init__(
        self,
        name: str = "fake",
        priority: float = 1.0,
        *,
        searchable: bool = True,
        search_results: Iterable[MovieSearchResult] = (),
        search_error: Exception | None = None,
        infos: Iterable[MovieInfo] = (),
        fetch_error: Exception | None = None,
        id_pattern: str | None = None,
        config: ProviderConfig | None = None,
    ) -> None:
        super().__init__(config or ProviderConfig(priority=priority))
        self._name = name
        self._searchable = searchable
        self._search_results = list(search_results)
        self._search_error = search_error
        self._infos = {info.id: info for info in infos}
        self._fetch_error = fetch_error
        self._id_pattern = re.compile(id_pattern) if id_pattern else None
        self.search_calls: list[str] = []
        self.fetch_calls: list[str] = []
        self.closed = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def capabilities(self) -> frozenset[ProviderCapability]:
        if self._searchable:
            return frozenset({ProviderCapability.SEARCH, ProviderCapability.FETCH})
        return frozenset({ProviderCapability.FETCH})

    def normalize_id(self, raw_id: str) -> str:
        movie_id = super().normalize_id(raw_id)
        if self._id_pattern and not self._id_pattern.fullmatch(movie_id):
            return ""
        return movie_id

    async def search_movie(self, keyword: str) -> list[MovieSearchResult]:
        self.search_calls.append(keyword)
        if self._search_error is not None:
            raise self._search_error
        return [result.model_copy() for result in self._search_results]

    async def get_movie_info_by_id(self, movie_id: str) -> MovieInfo:
        self.fetch_calls.append(movie_id)
        if self._fetch_error is not None:
            raise self._fetch_error
        if movie_id not in self._infos:
            raise NotFoundError(details={"id": movie_id})
        return self._infos[movie_id].model_copy()

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def make_provider() -> Callable[..., FakeProvider]:
    """Factory fixture for fake providers."""

    def _make(*args: Any, **kwargs: Any) -> FakeProvider:
        return FakeProvider(*args, **kwargs)

    return _make
