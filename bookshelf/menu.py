"""Interactive menus of the library book manager."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterable, TextIO

from bookshelf.book import Book, BookList, EmptyListError, format_table
from bookshelf.file_io import _read_int, _read_line, input_source, read_from_keyboard
from bookshelf.reports import (
    author_with_most_books,
    count_by_type,
    find_books_by_type,
    publisher_with_fewest_books,
    sort_by_type_and_id,
    statistics_by_year,
)

_MENU_TITLE = "\n===== LIBRARY BOOK MANAGEMENT =====\n"
_MENU_FOOTER = "===================================\n"

_EDIT_MENU = (
    _MENU_TITLE
    + "Insertion: [1]: Beginning, [2]: End, [3]: Middle\n"
    + "Deletion: [4]: Beginning, [5]: End, [6]: Middle"
    + "\n==============================\n"
    + "Enter a choice from [1, 6] to operate: "
)


def source_menu_text() -> str:
    """Text of the menu that picks where the books come from."""
    return (
        _MENU_TITLE
        + "Please select the data source to operate on:\n"
        + "\n"
        + "1. Read books from file\n"
        + "2. Enter books from keyboard\n"
        + "\n"
        + _MENU_FOOTER
    )


def main_menu_text() -> str:
    """Text of the main operations menu."""
    return (
        _MENU_TITLE
        + "1. Add/Delete books at the beginning/end/middle\n"
        + "2. Sort by type and book ID\n"
        + "3. Add book while maintaining order\n"
        + "4. Find the author with the most books\n"
        + "5. Find the publisher with the fewest books\n"
        + "6. Statistics by publication year\n"
        + "7. Count books by type\n"
        + "8. Find books by type\n"
        + "9. Print books\n"
        + "0. Exit\n"
        + _MENU_FOOTER
    )


def _ask_int(stdin: TextIO) -> int:
    """Read an integer answer; end of input or a non-number counts as 0."""
    try:
        value = _read_int(stdin)
    except EOFError:
        return 0
    return 0 if value is None else value


def _print_books(books: Iterable[Book], stdout: TextIO) -> None:
    stdout.write("\n" + format_table(books))


def _titles(titles: Iterable[str], separator: str = " ") -> str:
    return "".join(f"[{title}]{separator}" for title in titles)


def _offer_print(books: BookList, stdin: TextIO, stdout: TextIO, question: str) -> None:
    stdout.write(question + "\nEnter [1] to accept, [0] to deny: ")
    if _ask_int(stdin):
        _print_books(books, stdout)


def _replace_contents(books: BookList, ordered: Iterable[Book]) -> None:
    items = list(ordered)
    while len(books):
        books.delete_at_tail()
    for book in items:
        books.insert_at_tail(book)


def get_choice(stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """Ask for the data source until the answer is 1 or 2."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    while True:
        stdout.write(source_menu_text())
        stdout.write("Enter a choice from [1, 2] to operate: ")
        choice = _read_int(stdin) or 0
        if 1 <= choice <= 2:
            return choice
        stdout.write("Please enter a choice from [1, 2]\n")


def _choose_operation(stdin: TextIO, stdout: TextIO) -> int:
    while True:
        stdout.write(main_menu_text())
        stdout.write("Enter a choice from [0, 9] to operate: ")
        choice = _ask_int(stdin)
        if 0 <= choice <= 9:
            return choice
        stdout.write("Please enter a choice from [0, 9]\n")


def _wait(stdin: TextIO, stdout: TextIO) -> int:
    stdout.write("\nThe previous request has been completed")
    stdout.write("\nEnter a choice from [0, 9] to continue: ")
    choice = _ask_int(stdin)
    stdout.write("\n")
    if 0 <= choice <= 9:
        return choice
    stdout.write("Please enter a choice from [0, 9]\n")
    return _choose_operation(stdin, stdout)


def _edit_books(books: BookList, stdin: TextIO, stdout: TextIO) -> None:
    stdout.write(_EDIT_MENU)
    sub_choice = _ask_int(stdin)
    deletions = {4: books.delete_at_head, 5: books.delete_at_tail, 6: books.delete_at_middle}
    if 1 <= sub_choice <= 3:
        read_from_keyboard(books, False, sub_choice, stdin, stdout)
    elif sub_choice in deletions:
        try:
            deletions[sub_choice]()
        except EmptyListError as error:
            stdout.write(str(error))
    else:
        stdout.write("Please enter a choice from [1, 6]\n")
    _offer_print(
        books, stdin, stdout, "\nSuccessfully done!. Would you like to print the list?"
    )


def _sort_books(books: BookList, stdin: TextIO, stdout: TextIO) -> None:
    try:
        ordered = sort_by_type_and_id(books)
    except EmptyListError as error:
        stdout.write(str(error))
        return
    _replace_contents(books, ordered)
    _offer_print(books, stdin, stdout, "\nSorted! Do you want to print the list?")


def _add_in_order(books: BookList, stdin: TextIO, stdout: TextIO) -> None:
    input_source(0, True, books, stdin, stdout)


def _show_top_author(books: BookList, stdin: TextIO, stdout: TextIO) -> None:
    stdout.write("\n-> FIND THE AUTHOR WITH THE MOST BOOKS")
    try:
        author, titles = author_with_most_books(books)
    except EmptyListError as error:
        stdout.write(str(error))
        return
    stdout.write(f"\nAuthor name: {author}")
    stdout.write("\nHis books: " + _titles(titles))


def _show_smallest_publisher(books: BookList, stdin: TextIO, stdout: TextIO) -> None:
    stdout.write("\n-> FIND THE PUBLISHER WITH THE FEWEST BOOKS")
    try:
        publisher, titles = publisher_with_fewest_books(books)
    except EmptyListError as error:
        stdout.write(str(error))
        return
    stdout.write(f"\nPublisher name: {publisher}")
    stdout.write("\nTheir books: " + _titles(titles))


def _show_year_statistics(books: BookList, stdin: TextIO, stdout: TextIO) -> None:
    stdout.write("\n-> STATISTICS BY PUBLICATION YEAR")
    try:
        by_year = statistics_by_year(books)
    except EmptyListError as error:
        stdout.write(str(error))
        return
    for year, titles in by_year.items():
        stdout.write(f"\n{year}: " + _titles(titles, separator=""))


def _show_type_counts(books: BookList, stdin: TextIO, stdout: TextIO) -> None:
    stdout.write("\n-> COUNT BOOKS BY TYPE")
    try:
        counts = count_by_type(books)
    except EmptyListError as error:
        stdout.write(str(error))
        return
    stdout.write("\n")
    for book_type, count in counts.items():
        stdout.write(f"{book_type}: {count}\n")


def _search_by_type(books: BookList, stdin: TextIO, stdout: TextIO) -> None:
    stdout.write("\n-> FIND BOOKS BY TYPE")
    stdout.write("\nEnter the type name (e.g., 'Lap trinh', 'AI'): ")
    try:
        wanted = _read_line(stdin)
    except EOFError:
        wanted = ""
    try:
        titles = find_books_by_type(books, wanted)
    except EmptyListError as error:
        stdout.write(str(error))
        return
    if not titles:
        stdout.write(f"Sorry, no book with that type '{wanted}'!")
        return
    stdout.write(f"List of books with type '{wanted}': " + _titles(titles))


def _show_books(books: BookList, stdin: TextIO, stdout: TextIO) -> None:
    _print_books(books, stdout)


_Handler = Callable[[BookList, TextIO, TextIO], None]

_HANDLERS: dict[int, _Handler] = {
    1: _edit_books,
    2: _sort_books,
    3: _add_in_order,
    4: _show_top_author,
    5: _show_smallest_publisher,
    6: _show_year_statistics,
    7: _show_type_counts,
    8: _search_by_type,
    9: _show_books,
}


def run_main_menu(
    books: BookList, stdin: TextIO | None = None, stdout: TextIO | None = None
) -> None:
    """Run operations chosen from the main menu until the user picks 0."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    choice = _choose_operation(stdin, stdout)
    while choice:
        _HANDLERS[choice](books, stdin, stdout)
        if choice != 9:
            stdout.write("\n")
        choice = _wait(stdin, stdout)


def main(argv: list[str] | None = None) -> int:
    """Start the interactive library book manager."""
    parser = argparse.ArgumentParser(
        prog="bookshelf", description="Interactive library book management."
    )
    parser.parse_args(argv)
    books = BookList()
    try:
        choice = get_choice()
    except EOFError:
        return 1
    input_source(choice, False, books)
    _print_books(books, sys.stdout)
    run_main_menu(books)
    return 0


if __name__ == "__main__":
    sys.exit(main())