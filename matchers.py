"""Collection and attribute matchers for Book / Library assertions.

Every matcher returns ``True`` when the expectation holds and raises
``MatcherError`` otherwise, so it can be used bare inside a pytest test or
wrapped in ``assert``.
"""
from collections import Counter
from typing import Any, Callable, Iterable, List, Sequence

from book import FIELDS, Book


class MatcherError(AssertionError):
    pass


def _show(items: Iterable[Any]) -> str:
    return "[" + ", ".join(repr(i) for i in items) + "]"


def includes(collection: Iterable[Any], *items: Any) -> bool:
    """Every item is a member of ``collection``."""
    values = list(collection)
    missing = [item for item in items if item not in values]
    if missing:
        raise MatcherError(f"expected {_show(values)} to include {_show(missing)}")
    return True


def excludes(collection: Iterable[Any], *items: Any) -> bool:
    values = list(collection)
    present = [item for item in items if item in values]
    if present:
        raise MatcherError(f"expected {_show(values)} not to include {_show(present)}")
    return True


def _counts_equal(actual: List[Any], expected: List[Any]) -> bool:
    try:
        return Counter(actual) == Counter(expected)
    except TypeError:
        # Unhashable elements (e.g. Book): pairwise removal
        remaining = list(actual)
        for item in expected:
            if item not in remaining:
                return False
            remaining.remove(item)
        return not remaining


def contains_exactly(collection: Iterable[Any], *items: Any) -> bool:
    """Same elements as ``items``, duplicates counted, order ignored."""
    values = list(collection)
    if not _counts_equal(values, list(items)):
        raise MatcherError(f"expected {_show(values)} to contain exactly {_show(items)}")
    return True


def match_array(collection: Iterable[Any], expected: Iterable[Any]) -> bool:
    return contains_exactly(collection, *expected)


def starts_with(sequence: Sequence[Any], *items: Any) -> bool:
    values = list(sequence)
    if values[:len(items)] != list(items):
        raise MatcherError(f"expected {_show(values)} to start with {_show(items)}")
    return True


def ends_with(sequence: Sequence[Any], *items: Any) -> bool:
    values = list(sequence)
    if items and (len(values) < len(items) or values[-len(items):] != list(items)):
        raise MatcherError(f"expected {_show(values)} to end with {_show(items)}")
    return True


def greater_than(bound: Any) -> Callable[[Any], bool]:
    def check(value: Any) -> bool:
        return value is not None and value > bound
    check.__name__ = f"greater_than({bound!r})"
    return check


def less_than(bound: Any) -> Callable[[Any], bool]:
    def check(value: Any) -> bool:
        return value is not None and value < bound
    check.__name__ = f"less_than({bound!r})"
    return check


def _attribute_mismatches(book: Book, expected: dict) -> List[str]:
    actual = book.to_dict()
    problems = []
    for name, want in expected.items():
        if name not in FIELDS:
            problems.append(f"{name}: no such attribute")
            continue
        got = actual[name]
        if callable(want):
            if not want(got):
                problems.append(f"{name}: {got!r} does not satisfy {getattr(want, '__name__', want)}")
        elif got != want:
            problems.append(f"{name}: expected {want!r}, got {got!r}")
    return problems


def has_attributes(book: Book, **expected: Any) -> bool:
    """Each named field equals its expected value, or satisfies it when callable."""
    problems = _attribute_mismatches(book, expected)
    if problems:
        raise MatcherError(f"expected {book!r} to have attributes: " + "; ".join(problems))
    return True


def all_have_attributes(books: Iterable[Book], **expected: Any) -> bool:
    """``has_attributes`` for every book. An empty collection passes."""
    failures = []
    for index, book in enumerate(books):
        problems = _attribute_mismatches(book, expected)
        if problems:
            failures.append(f"[{index}] {book.title!r}: " + "; ".join(problems))
    if failures:
        raise MatcherError("expected all books to have attributes:\n  " + "\n  ".join(failures))
    return True
