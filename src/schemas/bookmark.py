"""Pydantic schemas for bookmark endpoints."""
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

# Fits the NUMERIC(3, 2) rating column: 0.00 to 9.99.
Rating = Annotated[Decimal, Field(ge=0, max_digits=3, decimal_places=2)]


class BookmarkCreate(BaseModel):
    """
    Schema for creating a new bookmark.

    Every field is optional at the schema level. Required fields are checked by
    the service so a missing field produces a "Missing '<field>' in request
    body" error rather than a generic validation failure.
    """

    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    url: str | None = None
    description: str | None = None
    rating: Rating | None = None


class BookmarkResponse(BaseModel):
    """Schema for bookmark responses. Text fields are already sanitized."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    url: str
    description: str | None
    rating: Decimal
