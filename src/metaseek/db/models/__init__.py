"""Database models."""

from .movie_info import MovieInfoModel

__all__ = ["MovieInfoModel"]
