"""Storage access for bookmarks."""
from typing import Any, Protocol

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from models.bookmark import Bookmark

# Range of the integer primary key. Ids outside it cannot be stored, and some
# drivers (asyncpg, sqlite3) refuse to bind them at all.
MIN_BOOKMARK_ID = 1
MAX_BOOKMARK_ID = 2**31 - 1


def is_storable_id(bookmark_id: int) -> bool:
    """Whether an id can exist in bookmarks_table."""
    return MIN_BOOKMARK_ID <= bookmark_id <= MAX_BOOKMARK_ID


class BookmarkRepository(Protocol):
    """The four store operations the bookmark service needs."""

    async def list_all(self) -> list[Bookmark]:
        """Return every bookmark in store order."""
        ...

    async def get_by_id(self, bookmark_id: int) -> Bookmark | None:
        """Return the bookmark with this id, or None."""
        ...

    async def insert(self, values: dict[str, Any]) -> Bookmark:
        """Store a new bookmark and return it with its assigned id."""
        ...

    async def delete_by_id(self, bookmark_id: int) -> bool:
        """Delete the bookmark with this id. Returns False if there was none."""
        ...


class SqlBookmarkRepository:
    """
    BookmarkRepository backed by an AsyncSession.

    Note: Does not commit. Caller (session generator) handles commit at request end.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_all(self) -> list[Bookmark]:
        result = await self.db.execute(select(Bookmark).order_by(Bookmark.id))
        return list(result.scalars().all())

    async def get_by_id(self, bookmark_id: int) -> Bookmark | None:
        if not is_storable_id(bookmark_id):
            return None
        result = await self.db.execute(
            select(Bookmark).where(Bookmark.id == bookmark_id),
        )
        return result.scalar_one_or_none()

    async def insert(self, values: dict[str, Any]) -> Bookmark:
        bookmark = Bookmark(**values)
        self.db.add(bookmark)
        await self.db.flush()
        await self.db.refresh(bookmark)
        return bookmark

    async def delete_by_id(self, bookmark_id: int) -> bool:
        if not is_storable_id(bookmark_id):
            return False
        result = await self.db.execute(
            delete(Bookmark).where(Bookmark.id == bookmark_id),
        )
        return result.rowcount > 0
