import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional

from book import Book

logger = logging.getLogger(__name__)


class Library:
    """An ordered, in-memory collection of books.

    Insertion order is kept as-is: it drives the order of ``titles()``,
    ``genres()`` and ``tags()``.
    """

    def __init__(self, books: Optional[Iterable[Book]] = None) -> None:
        self._books: List[Book] = list(books) if books is not None else []

    @property
    def books(self) -> List[Book]:
        return self._books

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[Book]:
        return iter(self._books)

    # ------------------------- Core operations ------------------------- #
    def add_book(self, book: Book) -> None:
        """Append a book. No dedup, no reordering."""
        self._books.append(book)
        logger.debug("Added %r (%d books)", book.title, len(self._books))

    def find_by_author(self, author: Optional[str]) -> List[Book]:
        """Books whose author equals ``author`` exactly, in library order."""
        return [book for book in self._books if book.author == author]

    def genres(self) -> List[str]:
        """Every genre once, in order of first appearance across the books."""
        seen = set()
        result: List[str] = []
        for book in self._books:
            for genre in book.genres:
                if genre not in seen:
                    seen.add(genre)
                    result.append(genre)
        return result

    def titles(self) -> List[str]:
        return [book.title for book in self._books]

    def tags(self) -> List[str]:
        """All tags of all books, flattened. Duplicates are kept."""
        return [tag for book in self._books for tag in book.tags]

    def get_statistics(self) -> Dict[str, Any]:
        """Get library statistics."""
        return {
            "total_books": len(self._books),
            "unique_authors": len({book.author for book in self._books}),
            "unique_genres": len(self.genres()),
            "total_pages": sum(book.pages or 0 for book in self._books),
        }
