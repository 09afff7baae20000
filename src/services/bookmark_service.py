"""Service layer for bookmark CRUD operations."""
import logging

from core.sanitize import escape_title, sanitize_description
from models.bookmark import Bookmark
from schemas.bookmark import BookmarkCreate, BookmarkResponse
from services.bookmark_repository import BookmarkRepository
from services.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

# Checked in this order; the first missing one is reported.
REQUIRED_FIELDS = ("title", "url", "rating")


def render_bookmark(bookmark: Bookmark) -> BookmarkResponse:
    """Build the client representation of a bookmark with escaping/sanitizing applied."""
    return BookmarkResponse(
        id=bookmark.id,
        title=escape_title(bookmark.title),
        url=bookmark.url,
        description=sanitize_description(bookmark.description),
        rating=bookmark.rating,
    )


def check_required_fields(data: BookmarkCreate) -> None:
    """
    Reject a create request that lacks a required field.

    A field sent as null counts as missing.

    Raises:
        ValidationError: Naming the first missing field in REQUIRED_FIELDS order.
    """
    for field in REQUIRED_FIELDS:
        if getattr(data, field) is None:
            raise ValidationError(field)


async def list_bookmarks(repo: BookmarkRepository) -> list[BookmarkResponse]:
    """Get all bookmarks in store order."""
    bookmarks = await repo.list_all()
    return [render_bookmark(b) for b in bookmarks]


async def get_bookmark(repo: BookmarkRepository, bookmark_id: int) -> BookmarkResponse:
    """
    Get a bookmark by ID.

    Raises:
        NotFoundError: If no bookmark has this id.
    """
    bookmark = await repo.get_by_id(bookmark_id)
    if bookmark is None:
        logger.info("Bookmark %s not found", bookmark_id)
        raise NotFoundError(bookmark_id)
    return render_bookmark(bookmark)


async def create_bookmark(
    repo: BookmarkRepository,
    data: BookmarkCreate,
) -> BookmarkResponse:
    """
    Validate and store a new bookmark.

    Validation happens before the repository is touched, so a rejected request
    never writes anything.

    Raises:
        ValidationError: If title, url or rating is missing.
    """
    check_required_fields(data)

    bookmark = await repo.insert(data.model_dump())
    logger.info("Created bookmark %s", bookmark.id)
    return render_bookmark(bookmark)


async def delete_bookmark(repo: BookmarkRepository, bookmark_id: int) -> None:
    """
    Delete a bookmark.

    Raises:
        NotFoundError: If no bookmark has this id.
    """
    deleted = await repo.delete_by_id(bookmark_id)
    if not deleted:
        logger.info("Bookmark %s not found for delete", bookmark_id)
        raise NotFoundError(bookmark_id)
    logger.info("Deleted bookmark %s", bookmark_id)
