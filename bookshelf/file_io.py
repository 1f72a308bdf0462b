"""Loading books from a data file or from interactive keyboard entry."""

from __future__ import annotations

import re
import sys
from os import PathLike
from typing import TextIO

from bookshelf.book import Book, BookList

DEFAULT_FILE = "books.txt"
OPEN_FAILED_MESSAGE = "Unable to open the file!"
ADD_PROMPT = "\nEnter [1] to add a book, [0] to return to the main menu: "
INVALID_INT_MESSAGE = "Invalid input. Please enter an integer: "
ADDED_MESSAGE = "\nBook added successfully!\n"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_FIELD_COUNT = 6


def _leading_int(text: str) -> int | None:
    """Parse the integer at the start of ``text`` (after whitespace), if any."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def _to_int(text: str) -> int:
    value = _leading_int(text)
    if value is None:
        raise ValueError(f"invalid integer: {text!r}")
    return value


def _read_line(stdin: TextIO) -> str:
    """Read one line without its newline; raise EOFError at end of input."""
    line = stdin.readline()
    if not line:
        raise EOFError("unexpected end of input")
    return line[:-1] if line.endswith("\n") else line


def _read_int(stdin: TextIO) -> int | None:
    """Read a line and parse its leading integer; None if there is none."""
    return _leading_int(_read_line(stdin))


def _read_required_int(stdin: TextIO, stdout: TextIO) -> int:
    """Keep reading lines until one starts with an integer."""
    while (value := _read_int(stdin)) is None:
        stdout.write(INVALID_INT_MESSAGE)
    return value


def parse_line(line: str) -> Book:
    """Parse ``id|title|author|publisher|year|type`` into a Book."""
    fields = line.rstrip("\n").split("|")
    fields += [""] * (_FIELD_COUNT - len(fields))
    raw_id, title, author, publisher, raw_year, book_type = fields[:_FIELD_COUNT]
    return Book(
        book_id=_to_int(raw_id),
        title=title,
        author=author,
        publisher=publisher,
        publication_year=_to_int(raw_year),
        book_type=book_type,
    )


def read_from_file(books: BookList, path: str | PathLike[str]) -> int:
    """Append every book in the file at ``path`` to ``books``; return how many."""
    count = 0
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            books.insert_at_tail(parse_line(line))
            count += 1
    return count


def read_from_keyboard(
    books: BookList,
    maintain_order: bool,
    insert_pos: int,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Interactively add books until the user declines; return how many were added.

    With ``maintain_order`` books go into ordered position; otherwise
    ``insert_pos`` 1 puts them first, 2 last and anything else in the middle.
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    added = 0

    while True:
        stdout.write(ADD_PROMPT)
        try:
            choice = _read_int(stdin)
        except EOFError:
            break
        stdout.write("\n")
        if not choice:
            break

        stdout.write("Enter book ID: ")
        book_id = _read_required_int(stdin, stdout)
        stdout.write("Enter book title: ")
        title = _read_line(stdin)
        stdout.write("Enter author name: ")
        author = _read_line(stdin)
        stdout.write("Enter publisher: ")
        publisher = _read_line(stdin)
        stdout.write("Enter publication year: ")
        year = _read_required_int(stdin, stdout)
        stdout.write("Enter type: ")
        book_type = _read_line(stdin)

        book = Book(book_id, title, author, publisher, year, book_type)
        if maintain_order:
            books.insert_maintain_order(book)
        elif insert_pos == 1:
            books.insert_at_head(book)
        elif insert_pos == 2:
            books.insert_at_tail(book)
        else:
            books.insert_at_middle(book)

        added += 1
        stdout.write(ADDED_MESSAGE)

    return added


def input_source(
    choice: int,
    maintain_order: bool,
    books: BookList,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """Fill ``books`` from the data file (choice 1) or the keyboard (choice 2).

    When ``maintain_order`` is set, books are always entered from the keyboard
    and placed in order.
    """
    stdout = sys.stdout if stdout is None else stdout
    if maintain_order:
        read_from_keyboard(books, True, 2, stdin, stdout)
    elif choice == 1:
        try:
            read_from_file(books, DEFAULT_FILE)
        except OSError:
            stdout.write(OPEN_FAILED_MESSAGE + "\n")
    elif choice == 2:
        read_from_keyboard(books, False, 2, stdin, stdout)