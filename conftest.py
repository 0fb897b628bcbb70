import pytest

from book import Book
from config import settings
from library import Library
from utils.ui_helpers import OUTPUT_MODE_ENV


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    # The CLI writes its output mode into the environment; keep it per-test
    monkeypatch.delenv(OUTPUT_MODE_ENV, raising=False)
    monkeypatch.setattr(settings, "strict_books", False)
    monkeypatch.setattr(settings, "default_output", "plain")


@pytest.fixture
def book1():
    return Book(title="Ruby 101", author="Alice", genres=["Programming", "Education"], pages=200,
                published_year=2020, tags=["ruby", "beginner"])


@pytest.fixture
def book2():
    return Book(title="RSpec Mastery", author="Bob", genres=["Programming", "Testing"], pages=350,
                published_year=2022, tags=["rspec", "advanced"])


@pytest.fixture
def book3():
    return Book(title="Gardening Basics", author="Alice", genres=["Hobby", "Outdoors"], pages=120,
                published_year=2018, tags=["plants"])


@pytest.fixture
def lib(book1, book2, book3):
    return Library([book1, book2, book3])
