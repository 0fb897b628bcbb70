from __future__ import annotations

import logging

from config import settings
from utils.validators import BookValidator

logger = logging.getLogger(__name__)

FIELDS = ("title", "author", "genres", "pages", "published_year", "tags")


class BookFieldError(ValueError):
    """Raised by strict construction when required fields are missing or malformed."""

    def __init__(self, problems: list[str]) -> None:
        self.problems = problems
        super().__init__("Invalid book: " + "; ".join(problems))


class Book:
    """A single book in the library.

    Fields are plain attributes and stay writable after construction. Nothing is
    validated unless ``settings.strict_books`` is enabled.
    """

    def __init__(self, title: str, author: str, pages: int, published_year: int,
                 genres: list[str] | None = None, tags: list[str] | None = None) -> None:
        self.title = title
        self.author = author
        self.genres = genres if genres is not None else []
        self.pages = pages
        self.published_year = published_year
        self.tags = tags if tags is not None else []

        if settings.strict_books:
            problems = BookValidator.validate(self.to_dict())
            if problems:
                logger.info("Rejected book %r: %s", title, problems)
                raise BookFieldError(problems)

    def __repr__(self) -> str:
        return (f"Book(title={self.title!r}, author={self.author!r}, genres={self.genres!r}, "
                f"pages={self.pages!r}, published_year={self.published_year!r}, tags={self.tags!r})")

    def __str__(self) -> str:
        return f"{self.title} by {self.author} ({self.published_year}, {self.pages} pages)"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    # Mutable fields, so no hashing
    __hash__ = None  # type: ignore[assignment]

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "author": self.author,
            "genres": self.genres,
            "pages": self.pages,
            "published_year": self.published_year,
            "tags": self.tags,
        }

    @staticmethod
    def from_dict(data: dict) -> "Book":
        return Book(
            title=data.get("title"),
            author=data.get("author"),
            genres=list(data.get("genres") or []),
            pages=data.get("pages"),
            published_year=data.get("published_year"),
            tags=list(data.get("tags") or []),
        )
