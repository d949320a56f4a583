"""Domain models for movie metadata."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


def _present(*values: str) -> bool:
    return all(value and value.strip() for value in values)


class MovieSearchResult(BaseModel):
    """Listing projection of a movie returned by keyword search."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(default="", description="Provider-local movie ID")
    number: str = Field(default="", description="Human-oriented movie number")
    title: str = Field(default="", description="Movie title")
    provider: str = Field(default="", description="Name of the provider")
    homepage: str = Field(default="", description="Movie page on the provider site")
    thumb_url: str = Field(default="", description="Thumbnail image URL")
    cover_url: str = Field(default="", description="Cover image URL")
    score: float = Field(default=0.0, ge=0.0, description="Provider rating")
    release_date: date | None = Field(default=None, description="Release date")

    def valid(self) -> bool:
        """Check that all identifying fields are present."""
        return _present(self.id, self.number, self.title, self.provider, self.homepage)


class MovieInfo(BaseModel):
    """Full metadata record for one movie, keyed by (provider, id)."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(default="", description="Provider-local movie ID")
    number: str = Field(default="", description="Human-oriented movie number")
    title: str = Field(default="", description="Movie title")
    summary: str = Field(default="", description="Plot summary")
    provider: str = Field(default="", description="Name of the provider")
    homepage: str = Field(default="", description="Movie page on the provider site")

    director: str = Field(default="", description="Director name")
    actors: list[str] = Field(default_factory=list, description="Cast member names")

    thumb_url: str = Field(default="", description="Thumbnail image URL")
    big_thumb_url: str = Field(default="", description="Large thumbnail image URL")
    cover_url: str = Field(default="", description="Cover image URL")
    big_cover_url: str = Field(default="", description="Large cover image URL")
    preview_video_url: str = Field(default="", description="Preview video URL")
    preview_video_hls_url: str = Field(default="", description="Preview HLS playlist URL")
    preview_images: list[str] = Field(default_factory=list, description="Preview image URLs")

    maker: str = Field(default="", description="Studio / maker")
    label: str = Field(default="", description="Publishing label")
    series: str = Field(default="", description="Series name")
    genres: list[str] = Field(default_factory=list, description="Genre tags")
    score: float = Field(default=0.0, ge=0.0, description="Provider rating")
    runtime: int = Field(default=0, ge=0, description="Runtime in minutes")
    release_date: date | None = Field(default=None, description="Release date")

    def valid(self) -> bool:
        """Check that all identifying fields are present."""
        return _present(self.id, self.number, self.title, self.provider, self.homepage)

    def to_search_result(self) -> MovieSearchResult:
        """Project this record into a search listing entry."""
        return MovieSearchResult(
            id=self.id,
            number=self.number,
            title=self.title,
            provider=self.provider,
            homepage=self.homepage,
            thumb_url=self.thumb_url,
            cover_url=self.cover_url,
            score=self.score,
            release_date=self.release_date,
        )
