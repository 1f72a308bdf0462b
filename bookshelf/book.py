"""Book records, an ordered book collection and table formatting."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

EMPTY_LIST_MESSAGE = "Cannot perform because the list is empty!"

_TABLE_BORDER = (
    "+--------+---------------------------+--------------------+"
    "--------------------+--------+--------------------+"
)
_TABLE_HEADER = (
    "| ID     | Title                     | Author             |"
    " Publisher          | Year   | Type               |"
)
_COLUMN_WIDTHS = (6, 25, 18, 18, 6, 18)


class EmptyListError(ValueError):
    """Raised when an operation needs at least one book but there is none."""

    def __init__(self, message: str = EMPTY_LIST_MESSAGE) -> None:
        super().__init__(message)


@dataclass
class Book:
    """A single library book."""

    book_id: int
    title: str
    author: str
    publisher: str
    publication_year: int
    book_type: str


def _goes_after(new_book: Book, current: Book) -> bool:
    """Whether ordered insertion should move past ``current``."""
    return new_book.book_type >= current.book_type and new_book.book_id > current.book_id


class BookList:
    """An ordered collection of books with positional insertion and deletion."""

    def __init__(self, books: Iterable[Book] | None = None) -> None:
        self._books: list[Book] = list(books) if books is not None else []

    def __iter__(self) -> Iterator[Book]:
        return iter(self._books)

    def __len__(self) -> int:
        return len(self._books)

    def insert_at_head(self, book: Book) -> None:
        """Put ``book`` first."""
        self._books.insert(0, book)

    def insert_at_tail(self, book: Book) -> None:
        """Put ``book`` last."""
        self._books.append(book)

    def insert_at_middle(self, book: Book) -> None:
        """Put ``book`` right after the middle book (or alone if empty)."""
        if not self._books:
            self._books.append(book)
            return
        self._books.insert(self.middle_index() + 1, book)

    def insert_maintain_order(self, book: Book) -> None:
        """Insert ``book`` before the first book it should not go after."""
        position = next(
            (index for index, current in enumerate(self._books) if not _goes_after(book, current)),
            len(self._books),
        )
        self._books.insert(position, book)

    def delete_at_head(self) -> Book:
        """Remove and return the first book."""
        if not self._books:
            raise EmptyListError()
        return self._books.pop(0)

    def delete_at_tail(self) -> Book:
        """Remove and return the last book."""
        if not self._books:
            raise EmptyListError()
        return self._books.pop()

    def delete_at_middle(self) -> Book:
        """Remove and return the middle book."""
        return self._books.pop(self.middle_index())

    def middle_index(self) -> int:
        """Index of the middle book; the upper one when the count is even."""
        if not self._books:
            raise EmptyListError()
        return len(self._books) // 2


def format_cell(text: str, width: int) -> str:
    """Pad ``text`` to ``width``, or shorten it to three characters and '...'."""
    if len(text) > width:
        return text[:3] + "..."
    return text.ljust(width)


def format_table(books: Iterable[Book]) -> str:
    """Render books as a bordered text table, each line ending in a newline."""
    lines = [_TABLE_BORDER, _TABLE_HEADER, _TABLE_BORDER]
    for book in books:
        fields = (
            str(book.book_id),
            book.title,
            book.author,
            book.publisher,
            str(book.publication_year),
            book.book_type,
        )
        cells = (format_cell(value, width) for value, width in zip(fields, _COLUMN_WIDTHS))
        lines.append("| " + " | ".join(cells) + " |")
    lines.append(_TABLE_BORDER)
    return "".join(line + "\n" for line in lines)