"""Bookmark model for storing bookmarks."""
from decimal import Decimal

from sqlalchemy import Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base


class Bookmark(Base):
    """Bookmark model - a titled, rated link with an optional description."""

    __tablename__ = "bookmarks_table"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    rating: Mapped[Decimal] = mapped_column(Numeric(3, 2), nullable=False)

    def __repr__(self) -> str:
        return f"<Bookmark id={self.id} title={self.title!r}>"
