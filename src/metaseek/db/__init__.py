"""Database layer."""

from .base import Base, TimestampMixin, create_engine, create_session_factory
from .models import MovieInfoModel
from .repositories import MovieInfoRepository
from .session import DatabaseManager

__all__ = [
    # Base
    "Base",
    "TimestampMixin",
    "create_engine",
    "create_session_factory",
    # Models
    "MovieInfoModel",
    # Repositories
    "MovieInfoRepository",
    # Session
    "DatabaseManager",
]
