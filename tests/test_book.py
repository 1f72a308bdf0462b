import pytest

from bookshelf.book import (
    EMPTY_LIST_MESSAGE,
    Book,
    BookList,
    EmptyListError,
    format_cell,
    format_table,
)


def make(book_id, book_type="AI", title=None):
    return Book(book_id, title or f"T{book_id}", "Author", "Pub", 2000 + book_id, book_type)


def ids(book_list):
    return [book.book_id for book in book_list]


def test_init_and_len():
    books = [make(1), make(2)]
    bl = BookList(books)
    assert len(bl) == 2
    assert list(bl) == books
    assert len(BookList()) == 0


def test_insert_head_and_tail():
    bl = BookList()
    bl.insert_at_tail(make(1))
    bl.insert_at_head(make(2))
    bl.insert_at_tail(make(3))
    assert ids(bl) == [2, 1, 3]


def test_insert_at_middle_odd_count():
    bl = BookList([make(1), make(2), make(3)])
    bl.insert_at_middle(make(9))
    assert ids(bl) == [1, 2, 9, 3]


def test_insert_at_middle_even_count_uses_upper_middle():
    bl = BookList([make(1), make(2)])
    bl.insert_at_middle(make(9))
    assert ids(bl) == [1, 2, 9]


def test_insert_at_middle_empty():
    bl = BookList()
    bl.insert_at_middle(make(4))
    assert ids(bl) == [4]


def test_delete_at_head_and_tail_return_removed():
    a, b, c = make(1), make(2), make(3)
    bl = BookList([a, b, c])
    assert bl.delete_at_head() is a
    assert bl.delete_at_tail() is c
    assert list(bl) == [b]


def test_delete_at_middle():
    a, b, c = make(1), make(2), make(3)
    bl = BookList([a, b, c])
    assert bl.delete_at_middle() is b
    assert list(bl) == [a, c]
    assert bl.delete_at_middle() is c
    assert bl.delete_at_middle() is a
    assert len(bl) == 0


@pytest.mark.parametrize("method", ["delete_at_head", "delete_at_tail", "delete_at_middle", "middle_index"])
def test_empty_operations_raise(method):
    with pytest.raises(EmptyListError) as info:
        getattr(BookList(), method)()
    assert str(info.value) == EMPTY_LIST_MESSAGE


def test_middle_index_matches_deleted_position():
    books = [make(n) for n in range(5)]
    bl = BookList(books)
    index = bl.middle_index()
    assert bl.delete_at_middle() is books[index]


def test_insert_maintain_order_by_type_then_id():
    bl = BookList([make(1, "A"), make(3, "A"), make(5, "B")])
    bl.insert_maintain_order(make(2, "A"))
    bl.insert_maintain_order(make(6, "B"))
    assert [(b.book_type, b.book_id) for b in bl] == [
        ("A", 1), ("A", 2), ("A", 3), ("B", 5), ("B", 6)
    ]


def test_insert_maintain_order_into_empty():
    bl = BookList()
    bl.insert_maintain_order(make(7))
    assert ids(bl) == [7]


def test_format_cell_truncates():
    assert format_cell("A very long title indeed", 6) == "A v..."


def test_format_cell_pads():
    cell = format_cell("abc", 10)
    assert len(cell) == 10
    assert cell.startswith("abc")
    assert cell.strip() == "abc"


def test_format_table_layout():
    table = format_table([make(1, "AI", "Short"), make(2, "Web", "Other")])
    lines = table.splitlines()
    border = lines[0]
    assert lines[1] == (
        "| ID     | Title                     | Author             |"
        " Publisher          | Year   | Type               |"
    )
    assert lines[2] == border and lines[-1] == border
    assert len(lines) == 6
    assert all(len(line) == len(border) for line in lines)
    assert "Short" in lines[3] and "Other" in lines[4]
    assert table.endswith("\n")


def test_format_table_empty():
    lines = format_table([]).splitlines()
    assert len(lines) == 4