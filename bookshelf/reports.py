"""Sorting, statistics and searches over a collection of books."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from bookshelf.book import Book, BookList, EmptyListError

SORT_TOO_SHORT_MESSAGE = (
    "Cannot perform sorting because the list is empty or contains only one book!"
)

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _require_books(books: Iterable[Book]) -> list[Book]:
    items = list(books)
    if not items:
        raise EmptyListError()
    return items


def sort_by_type_and_id(books: Iterable[Book]) -> BookList:
    """Insertion-sort books by type and then book ID into a new list."""
    items = list(books)
    if len(items) < 2:
        raise EmptyListError(SORT_TOO_SHORT_MESSAGE)
    result = BookList()
    for book in items:
        result.insert_maintain_order(book)
    return result


def author_with_most_books(books: Iterable[Book]) -> tuple[str, list[str]]:
    """Return the author with most books (alphabetically first on ties) and their titles."""
    items = _require_books(books)
    counts = Counter(book.author for book in items)
    author = min(counts, key=lambda name: (-counts[name], name))
    return author, [book.title for book in items if book.author == author]


def publisher_with_fewest_books(books: Iterable[Book]) -> tuple[str, list[str]]:
    """Return the publisher with fewest books (alphabetically first on ties) and their titles."""
    items = _require_books(books)
    counts = Counter(book.publisher for book in items)
    publisher = min(counts, key=lambda name: (counts[name], name))
    return publisher, [book.title for book in items if book.publisher == publisher]


def statistics_by_year(books: Iterable[Book]) -> dict[int, list[str]]:
    """Map each publication year, in ascending order, to its titles."""
    items = _require_books(books)
    by_year: dict[int, list[str]] = {}
    for book in items:
        by_year.setdefault(book.publication_year, []).append(book.title)
    return dict(sorted(by_year.items()))


def count_by_type(books: Iterable[Book]) -> dict[str, int]:
    """Map each book type, in ascending order, to its number of books."""
    items = _require_books(books)
    counts = Counter(book.book_type for book in items)
    return dict(sorted(counts.items()))


def find_books_by_type(books: Iterable[Book], book_type: str) -> list[str]:
    """Titles of books whose type equals ``book_type``, ignoring ASCII case."""
    items = _require_books(books)
    wanted = book_type.translate(_ASCII_LOWER)
    return [
        book.title
        for book in items
        if book.book_type.translate(_ASCII_LOWER) == wanted
    ]