"""MovieInfo database model."""

from __future__ import annotations

from datetime import date

from sqlalchemy import Date, Float, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from metaseek.db.base import Base, JSONList, TimestampMixin


class MovieInfoModel(Base, TimestampMixin):
    """
    Cached movie record fetched from a provider.

    Keyed by (id, provider): the same ID may exist on several sites,
    and each provider owns its own copy. Rows are only ever written
    through an upsert, never deleted.
    """

    __tablename__ = "movie_infos"

    # Identity
    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    provider: Mapped[str] = mapped_column(String(100), primary_key=True)
    number: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Human-oriented movie number, distinct from the opaque ID",
    )

    # Descriptive fields
    title: Mapped[str] = mapped_column(Text, nullable=False, default="")
    summary: Mapped[str] = mapped_column(Text, nullable=False, default="")
    homepage: Mapped[str] = mapped_column(String(2000), nullable=False, default="")
    director: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    actors: Mapped[list[str]] = mapped_column(JSONList, nullable=False, default=list)

    # Media
    thumb_url: Mapped[str] = mapped_column(String(2000), nullable=False, default="")
    big_thumb_url: Mapped[str] = mapped_column(String(2000), nullable=False, default="")
    cover_url: Mapped[str] = mapped_column(String(2000), nullable=False, default="")
    big_cover_url: Mapped[str] = mapped_column(String(2000), nullable=False, default="")
    preview_video_url: Mapped[str] = mapped_column(String(2000), nullable=False, default="")
    preview_video_hls_url: Mapped[str] = mapped_column(
        String(2000), nullable=False, default=""
    )
    preview_images: Mapped[list[str]] = mapped_column(JSONList, nullable=False, default=list)

    # Classification
    maker: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    label: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    series: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    genres: Mapped[list[str]] = mapped_column(JSONList, nullable=False, default=list)
    score: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    runtime: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    release_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    __table_args__ = (
        # Number lookups across all providers
        Index("ix_movie_infos_number", "number"),
        # Provider-scoped number lookups
        Index("ix_movie_infos_provider_number", "provider", "number"),
    )

    def __repr__(self) -> str:
        return (
            f"<MovieInfoModel(provider='{self.provider}', id='{self.id}', "
            f"number='{self.number}')>"
        )
