"""FastAPI dependencies for injection."""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from db.session import get_async_session
from services.bookmark_repository import BookmarkRepository, SqlBookmarkRepository


async def get_bookmark_repository(
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkRepository:
    """Provide the SQL-backed bookmark repository bound to the request session."""
    return SqlBookmarkRepository(db)
