"""Repository implementations."""

from .movie_info import MovieInfoRepository

__all__ = ["MovieInfoRepository"]
