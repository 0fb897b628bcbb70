import pytest

from book import Book, BookFieldError
from config import settings


def test_defaults_for_genres_and_tags():
    book = Book(title="Plain", author="Eve", pages=10, published_year=2001)
    assert book.genres == []
    assert book.tags == []


def test_default_lists_are_not_shared():
    a = Book(title="A", author="Eve", pages=1, published_year=2001)
    b = Book(title="B", author="Eve", pages=1, published_year=2001)
    a.tags.append("x")
    assert b.tags == []


def test_required_fields_must_be_passed():
    with pytest.raises(TypeError):
        Book(title="No pages", author="Eve")


def test_fields_are_writable(book1):
    book1.title = "Ruby 102"
    book1.pages = 220
    book1.genres = ["Programming"]
    assert book1.to_dict()["title"] == "Ruby 102"
    assert book1.pages == 220
    assert book1.genres == ["Programming"]


def test_permissive_construction():
    book = Book(title="Mystery", author=None, genres=[], pages=-5, published_year=2023)
    assert book.author is None
    assert book.pages == -5


def test_equality_by_value(book1):
    twin = Book.from_dict(book1.to_dict())
    assert twin == book1
    assert twin is not book1
    twin.tags = ["ruby"]
    assert twin != book1


def test_not_equal_to_other_types(book1):
    assert book1 != book1.to_dict()


def test_to_dict(book3):
    assert book3.to_dict() == {
        "title": "Gardening Basics",
        "author": "Alice",
        "genres": ["Hobby", "Outdoors"],
        "pages": 120,
        "published_year": 2018,
        "tags": ["plants"],
    }


def test_from_dict_fills_missing_lists():
    book = Book.from_dict({"title": "Extra", "author": "Eve", "pages": 150, "published_year": 2021})
    assert book.genres == []
    assert book.tags == []


def test_repr_names_fields(book1):
    assert "title='Ruby 101'" in repr(book1)
    assert "pages=200" in repr(book1)


def test_strict_mode_rejects_missing_author(monkeypatch):
    monkeypatch.setattr(settings, "strict_books", True)
    with pytest.raises(BookFieldError) as exc_info:
        Book(title="Mystery", author=None, pages=100, published_year=2023)
    assert exc_info.value.problems == ["author must be non-empty text"]
    assert "author must be non-empty text" in str(exc_info.value)


def test_strict_mode_reports_every_problem(monkeypatch):
    monkeypatch.setattr(settings, "strict_books", True)
    with pytest.raises(BookFieldError) as exc_info:
        Book(title="", author="Eve", pages=-1, published_year=None)
    assert exc_info.value.problems == [
        "title must be non-empty text",
        "published_year must be an integer",
        "pages must not be negative",
    ]


def test_strict_mode_accepts_valid_book(monkeypatch, book1):
    monkeypatch.setattr(settings, "strict_books", True)
    assert Book.from_dict(book1.to_dict()) == book1


def test_book_field_error_is_value_error():
    assert issubclass(BookFieldError, ValueError)


def test_str(book1):
    assert str(book1) == "Ruby 101 by Alice (2020, 200 pages)"
