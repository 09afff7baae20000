"""Bookmark CRUD endpoints."""
from fastapi import APIRouter, Depends, Response

from api.dependencies import get_bookmark_repository
from schemas.bookmark import BookmarkCreate, BookmarkResponse
from schemas.errors import ErrorResponse
from services import bookmark_service
from services.bookmark_repository import BookmarkRepository

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])


@router.get("", response_model=list[BookmarkResponse])
async def list_bookmarks(
    repo: BookmarkRepository = Depends(get_bookmark_repository),
) -> list[BookmarkResponse]:
    """List all bookmarks."""
    return await bookmark_service.list_bookmarks(repo)


@router.post(
    "",
    response_model=BookmarkResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}},
)
async def create_bookmark(
    response: Response,
    data: BookmarkCreate | None = None,
    repo: BookmarkRepository = Depends(get_bookmark_repository),
) -> BookmarkResponse:
    """Create a new bookmark. `title`, `url` and `rating` are required."""
    bookmark = await bookmark_service.create_bookmark(repo, data or BookmarkCreate())
    response.headers["Location"] = f"{router.prefix}/{bookmark.id}"
    return bookmark


@router.get(
    "/{bookmark_id}",
    response_model=BookmarkResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_bookmark(
    bookmark_id: int,
    repo: BookmarkRepository = Depends(get_bookmark_repository),
) -> BookmarkResponse:
    """Get a single bookmark by ID."""
    return await bookmark_service.get_bookmark(repo, bookmark_id)


@router.delete(
    "/{bookmark_id}",
    status_code=204,
    responses={404: {"model": ErrorResponse}},
)
async def delete_bookmark(
    bookmark_id: int,
    repo: BookmarkRepository = Depends(get_bookmark_repository),
) -> None:
    """Delete a bookmark."""
    await bookmark_service.delete_bookmark(repo, bookmark_id)
