"""Base repository with common CRUD operations."""

from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import and_, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

from src.marketplace.schemas.pagination import decode_cursor, encode_cursor

ModelType = TypeVar("ModelType", bound=SQLModel)


class BaseRepository(Generic[ModelType]):
    """Base repository providing common database operations.

    Repositories handle data access only. Transaction control (commit)
    should be done in the service layer.
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, id: UUID) -> ModelType | None:
        """Get a record by its primary key."""
        result = await self.session.execute(
            select(self.model).where(self.model.id == id)  # type: ignore[attr-defined]
        )
        return result.scalar_one_or_none()

    def add(self, entity: ModelType) -> None:
        """Add entity to session (no flush/commit)."""
        self.session.add(entity)

    async def delete(self, entity: ModelType) -> None:
        """Mark entity for deletion (no commit)."""
        await self.session.delete(entity)

    async def paginate(
        self,
        query: Any,  # SelectOfScalar - SQLModel query over self.model
        cursor: str | None,
        limit: int,
    ) -> tuple[list[ModelType], str | None, bool]:
        """Run a query one page at a time, newest first.

        Rows are ordered by ``(created_at, id)`` descending; the cursor holds
        the position of the last row returned. An unreadable cursor restarts
        from the first page.

        Returns:
            Tuple of (items, next_cursor, has_more)
        """
        created_at = self.model.created_at  # type: ignore[attr-defined]
        id_ = self.model.id  # type: ignore[attr-defined]

        if cursor:
            try:
                after_created, after_id = decode_cursor(cursor)
            except ValueError:
                pass
            else:
                query = query.where(
                    or_(
                        created_at < after_created,
                        and_(created_at == after_created, id_ < after_id),
                    )
                )

        # Fetch limit + 1 to determine if there are more results
        query = query.order_by(created_at.desc(), id_.desc()).limit(limit + 1)

        result = await self.session.execute(query)
        items = list(result.scalars().all())

        has_more = len(items) > limit
        if has_more:
            items = items[:limit]

        next_cursor = None
        if has_more and items:
            last = items[-1]
            next_cursor = encode_cursor(last.created_at, last.id)  # type: ignore[attr-defined]

        return items, next_cursor, has_more
