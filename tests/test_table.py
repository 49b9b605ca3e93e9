import pytest

from consolekit import BufferedIO
from consolekit.ui import BlockLayout, BorderStyle, Table, TableStyle

BOOKS = [
    ["99921-58-10-7", "Divine Comedy", "Dante Alighieri"],
    ["9971-5-0210-0", "A Tale of Two Cities", "Charles Dickens"],
    ["960-425-059-0", "The Lord of the Rings", "J. R. R. Tolkien"],
    ["80-902734-1-6", "And Then There Were None", "Agatha Christie"],
]

LONG_BOOKS = [
    [
        "99921-58-10-7",
        "Divine Comedy Divine Comedy Divine Comedy Divine Comedy Divine Comedy ",
        "Dante Alighieri",
    ],
    [
        "9971-5-0210-0",
        "A Tale of Two Cities",
        "Charles Dickens Charles Dickens Charles Dickens",
    ],
    ["960-425-059-0", "The Lord of the Rings", "J. R. R. Tolkien"],
    ["80-902734-1-6", "And Then There Were None", "Agatha Christie"],
]


def _book_table(style: TableStyle, rows=BOOKS) -> Table:
    table = Table(style)
    table.set_header_row(["ISBN", "Title", "Author"])
    table.add_rows(rows)
    return table


def test_render_ascii_border(io: BufferedIO) -> None:
    _book_table(TableStyle.ascii_border()).render(io)
    assert io.fetch_output() == """\
+---------------+--------------------------+------------------+
| ISBN          | Title                    | Author           |
+---------------+--------------------------+------------------+
| 99921-58-10-7 | Divine Comedy            | Dante Alighieri  |
| 9971-5-0210-0 | A Tale of Two Cities     | Charles Dickens  |
| 960-425-059-0 | The Lord of the Rings    | J. R. R. Tolkien |
| 80-902734-1-6 | And Then There Were None | Agatha Christie  |
+---------------+--------------------------+------------------+
"""


def test_ascii_border_is_the_default(io: BufferedIO) -> None:
    other = BufferedIO()
    _book_table(TableStyle.ascii_border()).render(other)

    table = Table()
    table.set_header_row(["ISBN", "Title", "Author"])
    table.add_rows(BOOKS)
    table.render(io)
    assert io.fetch_output() == other.fetch_output()


def test_render_empty(io: BufferedIO) -> None:
    table = Table(TableStyle.ascii_border())
    assert table.is_empty()
    table.render(io)
    assert io.fetch_output() == ""


def test_render_solid_border(io: BufferedIO) -> None:
    _book_table(TableStyle.solid_border()).render(io)
    assert io.fetch_output() == """\
┌───────────────┬──────────────────────────┬──────────────────┐
│ ISBN          │ Title                    │ Author           │
├───────────────┼──────────────────────────┼──────────────────┤
│ 99921-58-10-7 │ Divine Comedy            │ Dante Alighieri  │
│ 9971-5-0210-0 │ A Tale of Two Cities     │ Charles Dickens  │
│ 960-425-059-0 │ The Lord of the Rings    │ J. R. R. Tolkien │
│ 80-902734-1-6 │ And Then There Were None │ Agatha Christie  │
└───────────────┴──────────────────────────┴──────────────────┘
"""


def test_render_borderless(io: BufferedIO) -> None:
    _book_table(TableStyle.borderless()).render(io)
    assert io.fetch_output() == """\
ISBN          Title                    Author
============= ======================== ================
99921-58-10-7 Divine Comedy            Dante Alighieri
9971-5-0210-0 A Tale of Two Cities     Charles Dickens
960-425-059-0 The Lord of the Rings    J. R. R. Tolkien
80-902734-1-6 And Then There Were None Agatha Christie
"""


def test_render_without_header_row(io: BufferedIO) -> None:
    table = Table(TableStyle.ascii_border())
    table.add_rows(BOOKS[:2])
    table.render(io)
    assert io.fetch_output() == """\
+---------------+----------------------+-----------------+
| 99921-58-10-7 | Divine Comedy        | Dante Alighieri |
| 9971-5-0210-0 | A Tale of Two Cities | Charles Dickens |
+---------------+----------------------+-----------------+
"""


def test_render_alignment(io: BufferedIO) -> None:
    style = TableStyle.ascii_border()
    style.set_column_alignment(1, "center").set_column_alignment(2, "right")
    _book_table(style).render(io)
    assert io.fetch_output() == """\
+---------------+--------------------------+------------------+
| ISBN          |          Title           |           Author |
+---------------+--------------------------+------------------+
| 99921-58-10-7 |      Divine Comedy       |  Dante Alighieri |
| 9971-5-0210-0 |   A Tale of Two Cities   |  Charles Dickens |
| 960-425-059-0 |  The Lord of the Rings   | J. R. R. Tolkien |
| 80-902734-1-6 | And Then There Were None |  Agatha Christie |
+---------------+--------------------------+------------------+
"""


def test_unknown_alignment_fails() -> None:
    with pytest.raises(ValueError):
        TableStyle.ascii_border().set_column_alignment(0, "justify")


def test_render_with_word_wrapping(io: BufferedIO) -> None:
    _book_table(TableStyle.ascii_border(), LONG_BOOKS).render(io)
    assert io.fetch_output() == """\
+---------------+------------------------------------+-------------------------+
| ISBN          | Title                              | Author                  |
+---------------+------------------------------------+-------------------------+
| 99921-58-10-7 | Divine Comedy Divine Comedy Divine | Dante Alighieri         |
|               | Comedy Divine Comedy Divine Comedy |                         |
| 9971-5-0210-0 | A Tale of Two Cities               | Charles Dickens Charles |
|               |                                    | Dickens Charles Dickens |
| 960-425-059-0 | The Lord of the Rings              | J. R. R. Tolkien        |
| 80-902734-1-6 | And Then There Were None           | Agatha Christie         |
+---------------+------------------------------------+-------------------------+
"""


def test_render_with_word_wrapping_of_non_ascii_text(io: BufferedIO) -> None:
    rows = [list(row) for row in LONG_BOOKS]
    rows[0][1] = rows[0][1].replace("Divine", "Diviné").replace("Comedy", "Cömédy")
    _book_table(TableStyle.ascii_border(), rows).render(io)
    # Widths are counted in characters, not in bytes.
    assert io.fetch_output() == """\
+---------------+------------------------------------+-------------------------+
| ISBN          | Title                              | Author                  |
+---------------+------------------------------------+-------------------------+
| 99921-58-10-7 | Diviné Cömédy Diviné Cömédy Diviné | Dante Alighieri         |
|               | Cömédy Diviné Cömédy Diviné Cömédy |                         |
| 9971-5-0210-0 | A Tale of Two Cities               | Charles Dickens Charles |
|               |                                    | Dickens Charles Dickens |
| 960-425-059-0 | The Lord of the Rings              | J. R. R. Tolkien        |
| 80-902734-1-6 | And Then There Were None           | Agatha Christie         |
+---------------+------------------------------------+-------------------------+
"""


def test_render_with_more_word_wrapping(io: BufferedIO) -> None:
    rows = [list(row) for row in LONG_BOOKS]
    rows[0][0] = "99921-58-10-7 99921-58-10-7 99921-58-10-7 99921-58-10-7"
    _book_table(TableStyle.ascii_border(), rows).render(io)
    assert io.fetch_output() == """\
+---------------+------------------------------------+-------------------------+
| ISBN          | Title                              | Author                  |
+---------------+------------------------------------+-------------------------+
| 99921-58-10-7 | Divine Comedy Divine Comedy Divine | Dante Alighieri         |
| 99921-58-10-7 | Comedy Divine Comedy Divine Comedy |                         |
| 99921-58-10-7 |                                    |                         |
| 99921-58-10-7 |                                    |                         |
| 9971-5-0210-0 | A Tale of Two Cities               | Charles Dickens Charles |
|               |                                    | Dickens Charles Dickens |
| 960-425-059-0 | The Lord of the Rings              | J. R. R. Tolkien        |
| 80-902734-1-6 | And Then There Were None           | Agatha Christie         |
+---------------+------------------------------------+-------------------------+
"""


def test_render_with_word_cuts(io: BufferedIO) -> None:
    rows = [list(row) for row in LONG_BOOKS]
    rows[0][1] = "DivineComedy" * 5 + " "
    _book_table(TableStyle.ascii_border(), rows).render(io)
    assert io.fetch_output() == """\
+---------------+----------------------------------+-------------------------+
| ISBN          | Title                            | Author                  |
+---------------+----------------------------------+-------------------------+
| 99921-58-10-7 | DivineComedyDivineComedyDivineCo | Dante Alighieri         |
|               | medyDivineComedyDivineComedy     |                         |
| 9971-5-0210-0 | A Tale of Two Cities             | Charles Dickens Charles |
|               |                                  | Dickens Charles Dickens |
| 960-425-059-0 | The Lord of the Rings            | J. R. R. Tolkien        |
| 80-902734-1-6 | And Then There Were None         | Agatha Christie         |
+---------------+----------------------------------+-------------------------+
"""


def test_render_with_word_wrapping_and_indentation(io: BufferedIO) -> None:
    _book_table(TableStyle.ascii_border(), LONG_BOOKS).render(io, 4)
    assert io.fetch_output() == """\
    +---------------+-----------------------------+-------------------------+
    | ISBN          | Title                       | Author                  |
    +---------------+-----------------------------+-------------------------+
    | 99921-58-10-7 | Divine Comedy Divine Comedy | Dante Alighieri         |
    |               | Divine Comedy Divine Comedy |                         |
    |               | Divine Comedy               |                         |
    | 9971-5-0210-0 | A Tale of Two Cities        | Charles Dickens Charles |
    |               |                             | Dickens Charles Dickens |
    | 960-425-059-0 | The Lord of the Rings       | J. R. R. Tolkien        |
    | 80-902734-1-6 | And Then There Were None    | Agatha Christie         |
    +---------------+-----------------------------+-------------------------+
"""


def test_render_formatted_cells(io: BufferedIO) -> None:
    rows = [[f"[b]{row[0]}[/b]"] + row[1:] for row in BOOKS]
    _book_table(TableStyle.ascii_border(), rows).render(io)
    assert io.fetch_output() == """\
+---------------+--------------------------+------------------+
| ISBN          | Title                    | Author           |
+---------------+--------------------------+------------------+
| 99921-58-10-7 | Divine Comedy            | Dante Alighieri  |
| 9971-5-0210-0 | A Tale of Two Cities     | Charles Dickens  |
| 960-425-059-0 | The Lord of the Rings    | J. R. R. Tolkien |
| 80-902734-1-6 | And Then There Were None | Agatha Christie  |
+---------------+--------------------------+------------------+
"""


def test_table_in_a_block_layout(io: BufferedIO) -> None:
    table = Table(TableStyle.ascii_border())
    table.add_row(["a", "b"])
    layout = BlockLayout()
    layout.begin_block()
    layout.add(table)
    layout.end_block()
    layout.render(io)
    assert io.fetch_output() == "  +---+---+\n  | a | b |\n  +---+---+\n"


def test_border_style_from_rich_box(io: BufferedIO) -> None:
    import rich.box

    style = TableStyle(BorderStyle.from_box(rich.box.ROUNDED))
    Table(style).add_row(["a", "b"]).render(io)
    assert io.fetch_output() == "╭───┬───╮\n│ a │ b │\n╰───┴───╯\n"


def test_set_row(io: BufferedIO) -> None:
    table = Table(TableStyle.borderless())
    table.set_row(0, ["a", "b"])
    table.set_row(1, ["c", "d"])
    table.set_row(0, ["e", "f"])
    assert table.rows == [["e", "f"], ["c", "d"]]
    with pytest.raises(IndexError):
        table.set_row(5, ["g", "h"])

    table.set_rows([["x", "y"]])
    assert table.rows == [["x", "y"]]


def test_set_header_row_fails_if_too_many_cells() -> None:
    table = Table()
    table.set_row(0, ["a", "b", "c"])
    with pytest.raises(ValueError):
        table.set_header_row(["a", "b", "c", "d"])


def test_set_header_row_fails_if_missing_cells() -> None:
    table = Table()
    table.set_row(0, ["a", "b", "c"])
    with pytest.raises(ValueError):
        table.set_header_row(["a", "b"])


def test_set_row_fails_if_too_many_cells() -> None:
    table = Table()
    table.set_header_row(["a", "b", "c"])
    with pytest.raises(ValueError):
        table.set_row(0, ["a", "b", "c", "d"])


def test_set_row_fails_if_missing_cells() -> None:
    table = Table()
    table.set_header_row(["a", "b", "c"])
    with pytest.raises(ValueError):
        table.set_row(0, ["a", "b"])


def test_add_row_fails_if_too_many_cells() -> None:
    table = Table()
    table.add_row(["a", "b", "c"])
    with pytest.raises(ValueError, match="Expected the row to contain 3 cells"):
        table.add_row(["a", "b", "c", "d"])


def test_add_row_fails_if_missing_cells() -> None:
    table = Table()
    table.add_row(["a", "b", "c"])
    with pytest.raises(ValueError):
        table.add_row(["a", "b"])
