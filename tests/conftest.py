"""Shared test fixtures for all tests."""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from datetime import date
from typing import Any

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from metaseek.config import MetaseekSettings
from metaseek.core.models import MovieInfo, MovieSearchResult
from metaseek.db.base import Base, create_session_factory

# ============================================================================
# Sample Data Fixtures
# ============================================================================


def build_movie_info(**overrides: Any) -> MovieInfo:
    """Create a valid movie info, overriding any field."""
    data: dict[str, Any] = {
        "id": "xyz1",
        "number": "XYZ-001",
        "title": "Sample Movie",
        "summary": "A sample movie used in tests.",
        "provider": "A",
        "homepage": "https://a.example.com/movie/xyz1",
        "director": "Jane Director",
        "actors": ["Actor One", "Actor Two"],
        "thumb_url": "https://a.example.com/thumb/xyz1.jpg",
        "cover_url": "https://a.example.com/cover/xyz1.jpg",
        "preview_images": ["https://a.example.com/preview/xyz1-1.jpg"],
        "maker": "Sample Studio",
        "label": "Sample Label",
        "series": "Samples",
        "genres": ["Drama"],
        "score": 4.5,
        "runtime": 120,
        "release_date": date(2022, 3, 15),
    }
    data.update(overrides)
    return MovieInfo(**data)


def build_search_result(**overrides: Any) -> MovieSearchResult:
    """Create a valid search result, overriding any field."""
    data: dict[str, Any] = {
        "id": "abc123",
        "number": "ABC-123",
        "title": "Sample Result",
        "provider": "A",
        "homepage": "https://a.example.com/movie/abc123",
        "thumb_url": "https://a.example.com/thumb/abc123.jpg",
        "score": 3.0,
    }
    data.update(overrides)
    return MovieSearchResult(**data)


@pytest.fixture
def make_movie_info() -> Callable[..., MovieInfo]:
    """Factory fixture for valid movie infos."""
    return build_movie_info


@pytest.fixture
def make_search_result() -> Callable[..., MovieSearchResult]:
    """Factory fixture for valid search results."""
    return build_search_result


@pytest.fixture
def sample_movie_info() -> MovieInfo:
    """A single valid movie info."""
    return build_movie_info()


# ============================================================================
# Database Fixtures
# ============================================================================


@pytest.fixture
def database_url(tmp_path) -> str:
    """SQLite file database private to one test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'metaseek.db'}"


@pytest.fixture
async def db_engine(database_url: str) -> AsyncIterator[AsyncEngine]:
    """Create an engine with all tables in place."""
    engine = create_async_engine(database_url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def db_session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory from engine."""
    return create_session_factory(db_engine)


@pytest.fixture
async def db_session(
    db_session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Get a database session for one test."""
    async with db_session_factory() as session:
        yield session


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def test_settings(database_url: str) -> MetaseekSettings:
    """Create test settings backed by the per-test SQLite database."""
    return MetaseekSettings(
        database_url=database_url,
        auto_migrate=True,
        providers=[],
        debug=True,
        log_level="DEBUG",
    )
