"""MovieInfo repository backing the metadata cache."""

from collections.abc import Sequence

from sqlalchemy import ColumnElement, func, or_, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from metaseek.core.models import MovieInfo
from metaseek.db.models.movie_info import MovieInfoModel

# Dialects with native INSERT ... ON CONFLICT support
_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}

_KEY_COLUMNS = ("id", "provider")


class MovieInfoRepository:
    """Repository for cached movie records."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @staticmethod
    def _matches_keyword(keyword: str) -> ColumnElement[bool]:
        # Keyword may be either a number or an ID; case should not matter.
        return or_(
            func.upper(MovieInfoModel.number) == func.upper(keyword),
            func.upper(MovieInfoModel.id) == func.upper(keyword),
        )

    async def find_by_id_or_number(self, keyword: str) -> Sequence[MovieInfoModel]:
        """Find records of any provider whose number or ID matches the keyword."""
        stmt = select(MovieInfoModel).where(self._matches_keyword(keyword))
        result = await self._session.execute(stmt)
        return result.scalars().all()

    async def get_by_provider_and_keyword(
        self,
        provider: str,
        keyword: str,
    ) -> MovieInfoModel | None:
        """Find the first record of a provider whose number or ID matches the keyword."""
        stmt = (
            select(MovieInfoModel)
            .where(MovieInfoModel.provider == provider)
            .where(self._matches_keyword(keyword))
            .limit(1)
        )
        result = await self._session.execute(stmt)
        return result.scalars().first()

    async def get_by_provider_and_id(
        self,
        provider: str,
        movie_id: str,
    ) -> MovieInfoModel | None:
        """Find a record by exact (provider, id) key."""
        stmt = select(MovieInfoModel).where(
            MovieInfoModel.id == movie_id,
            MovieInfoModel.provider == provider,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert(self, info: MovieInfo) -> None:
        """
        Insert a record, or overwrite every field of the existing one.

        Conflicts are resolved on the (id, provider) key by the database,
        so concurrent upserts of the same record are safe.
        """
        dialect = self._session.get_bind().dialect.name
        insert = _UPSERT_INSERTS.get(dialect)
        if insert is None:
            raise ValueError(f"Upsert not supported for dialect: {dialect}")

        values = info.model_dump()
        stmt = insert(MovieInfoModel).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=list(_KEY_COLUMNS),
            set_={
                **{
                    column: stmt.excluded[column]
                    for column in values
                    if column not in _KEY_COLUMNS
                },
                "updated_at": func.now(),
            },
        )
        await self._session.execute(stmt)
