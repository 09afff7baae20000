"""Exceptions raised by the bookmark service layer."""


class BookmarkServiceError(Exception):
    """
    Base exception for bookmark operations.

    Carries the message shown to the client and the HTTP status it maps to, so
    the API layer can translate any subclass without knowing about it.
    """

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(BookmarkServiceError):
    """Raised when a required field is absent from a create request."""

    status_code = 400

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing '{field}' in request body")


class NotFoundError(BookmarkServiceError):
    """Raised when no bookmark matches the requested id."""

    status_code = 404

    def __init__(self, bookmark_id: int) -> None:
        self.bookmark_id = bookmark_id
        super().__init__("Bookmark doesn't exist")
