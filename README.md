# bookshelf

A small interactive console program for keeping a library's book catalogue.
It can add, remove, sort and search books, and it can report on them.

Each book has an ID, a title, an author, a publisher, a publication year and a
type.

## Installing

```
pip install .
```

## Running

```
bookshelf
```

The command takes no options other than `--help`.

The program first asks where the books should come from:

1. Read them from `books.txt` in the current directory. If the file cannot be
   opened, the program says so and starts with an empty list.
2. Type them in at the keyboard.

Each line of `books.txt` holds one book, with the fields separated by `|`:

```
101|Clean Code|Robert Martin|Prentice Hall|2008|Lap trinh
102|Deep Learning|Ian Goodfellow|MIT Press|2016|AI
```

Once the books are loaded, the program prints them as a table and shows the
main menu:

| Choice | Action |
|--------|--------|
| 1 | Add books at the beginning, end or middle of the list, or delete the first, last or middle book |
| 2 | Sort by type, then by book ID |
| 3 | Add books in ordered position |
| 4 | Find the author with the most books |
| 5 | Find the publisher with the fewest books |
| 6 | List titles grouped by publication year |
| 7 | Count books by type |
| 8 | Find books by type (ASCII case is ignored) |
| 9 | Print all books |
| 0 | Exit |

After each action the program asks for the next choice. Entering `0`, or
reaching the end of input, ends the program.

In the printed table, a value longer than its column is cut to its first
three characters followed by `...`.

## Using it as a library

```python
from bookshelf.book import Book, BookList, format_table
from bookshelf.reports import count_by_type, find_books_by_type

books = BookList([
    Book(1, "Clean Code", "Robert Martin", "Prentice Hall", 2008, "Lap trinh"),
    Book(2, "Deep Learning", "Ian Goodfellow", "MIT Press", 2016, "AI"),
])
print(format_table(books))
print(count_by_type(books))          # {'AI': 1, 'Lap trinh': 1}
print(find_books_by_type(books, "ai"))  # ['Deep Learning']
```

- `bookshelf.book` holds `Book`, `BookList` (insertion and deletion at the
  head, tail and middle, plus ordered insertion), `format_cell`,
  `format_table` and `EmptyListError`, which is raised when an operation needs
  at least one book.
- `bookshelf.reports` holds `sort_by_type_and_id`, `author_with_most_books`,
  `publisher_with_fewest_books`, `statistics_by_year`, `count_by_type` and
  `find_books_by_type`.
- `bookshelf.file_io` holds `parse_line`, which parses one `|`-separated line
  into a `Book`, `read_from_file`, which appends every book in a file to a
  `BookList` and returns how many it read, and `read_from_keyboard` and
  `input_source` for interactive entry.
- `bookshelf.menu` holds the menus and `main`, the function behind the
  `bookshelf` command.

## What it does not do

The catalogue lives only in memory while the program runs. Books that are
added, deleted or sorted are not written back to `books.txt` or anywhere else.

## Tests

```
pip install .[test]
pytest
```