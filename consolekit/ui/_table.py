from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Iterable, List, Optional, Sequence

from . import _borders
from ._borders import GridStyle, TableStyle
from ._cells import CellWrapper
from ._component import Component

if TYPE_CHECKING:
    from .._io import IO

log = logging.getLogger(__name__)


class Table(Component):
    """A table with an optional header row.

    Columns are as wide as their widest cell. When the table doesn't fit the
    terminal, the widest columns are word-wrapped.

    .. code-block:: python

        table = Table(TableStyle.solid_border())
        table.set_header_row(["ISBN", "Title"])
        table.add_row(["99921-58-10-7", "Divine Comedy"])
        table.render(io)

    All rows, including the header row, must have the same number of cells.
    Adding a row with a different number of cells raises a `ValueError`.
    """

    def __init__(self, style: Optional[TableStyle] = None) -> None:
        self.style = style if style is not None else TableStyle.ascii_border()
        self._header_row: List[str] = []
        self._rows: List[List[str]] = []
        self._nb_columns: Optional[int] = None

    def _check_row(self, row: Sequence[str], name: str) -> List[str]:
        if self._nb_columns is None:
            self._nb_columns = len(row)
        elif len(row) != self._nb_columns:
            raise ValueError(
                f"Expected the {name} to contain {self._nb_columns} cells, but got"
                f" {len(row)}."
            )
        return list(row)

    def set_header_row(self, row: Sequence[str]) -> Table:
        self._header_row = self._check_row(row, "header row")
        return self

    @property
    def header_row(self) -> List[str]:
        return list(self._header_row)

    def has_header_row(self) -> bool:
        return len(self._header_row) > 0

    def add_row(self, row: Sequence[str]) -> Table:
        self._rows.append(self._check_row(row, "row"))
        return self

    def add_rows(self, rows: Iterable[Sequence[str]]) -> Table:
        for row in rows:
            self.add_row(row)
        return self

    def set_rows(self, rows: Iterable[Sequence[str]]) -> Table:
        self._rows = []
        return self.add_rows(rows)

    def set_row(self, index: int, row: Sequence[str]) -> Table:
        """Replace the row at `index`. An index one past the last row appends."""
        if index == len(self._rows):
            return self.add_row(row)
        if not -len(self._rows) <= index < len(self._rows):
            raise IndexError(f"The table has no row {index}.")
        self._rows[index] = self._check_row(row, "row")
        return self

    @property
    def rows(self) -> List[List[str]]:
        return [list(row) for row in self._rows]

    def is_empty(self) -> bool:
        return len(self._rows) == 0 and not self.has_header_row()

    def render(self, io: IO, indentation: int = 0) -> None:
        if self.is_empty() or not self._nb_columns:
            return
        style = self.style
        excess_column_width = max(
            _borders.get_format_width(style.header_cell_format),
            _borders.get_format_width(style.cell_format),
        )
        available_width = (
            io.get_terminal_dimensions().width
            - indentation
            - style.border_style.get_width(self._nb_columns)
            - self._nb_columns * excess_column_width
        )

        wrapper = CellWrapper(self._header_row)
        for row in self._rows:
            wrapper.add_cells(row)
        wrapper.fit(available_width, self._nb_columns, io)
        log.debug("fitted table columns to %s", wrapper.column_lengths)

        column_lengths = wrapper.column_lengths
        alignments = style.get_column_alignments(self._nb_columns)
        border_lengths = [length + excess_column_width for length in column_lengths]
        rows = wrapper.wrapped_rows

        _borders.draw_top_border(io, style.border_style, border_lengths, indentation)
        if self.has_header_row():
            _borders.draw_row(
                io,
                style.border_style,
                rows[0],
                column_lengths,
                alignments,
                style.header_cell_format,
                style.header_cell_style,
                style.padding_char,
                indentation,
            )
            _borders.draw_middle_border(
                io, style.border_style, border_lengths, indentation
            )
            rows = rows[1:]
        for row in rows:
            _borders.draw_row(
                io,
                style.border_style,
                row,
                column_lengths,
                alignments,
                style.cell_format,
                style.cell_style,
                style.padding_char,
                indentation,
            )
        _borders.draw_bottom_border(io, style.border_style, border_lengths, indentation)


class Grid(Component):
    """Cells that flow left to right into as many columns as fit the terminal.

    The number of columns is reduced until no word needs to be cut in two, but
    never below `min_nb_columns`.
    """

    def __init__(
        self,
        style: Optional[GridStyle] = None,
        min_nb_columns: int = 4,
        max_nb_columns: int = sys.maxsize,
    ) -> None:
        self.style = style if style is not None else GridStyle.borderless()
        self._cells: List[str] = []
        self._min_nb_columns = min(min_nb_columns, max_nb_columns)
        self._max_nb_columns = max_nb_columns

    def add_cell(self, cell: str) -> Grid:
        self._cells.append(cell)
        return self

    def add_cells(self, cells: Iterable[str]) -> Grid:
        self._cells.extend(cells)
        return self

    def set_cells(self, cells: Iterable[str]) -> Grid:
        self._cells = []
        return self.add_cells(cells)

    @property
    def cells(self) -> List[str]:
        return list(self._cells)

    @property
    def min_nb_columns(self) -> int:
        return self._min_nb_columns

    def set_min_nb_columns(self, min_nb_columns: int) -> Grid:
        self._min_nb_columns = min_nb_columns
        self._max_nb_columns = max(self._max_nb_columns, min_nb_columns)
        return self

    @property
    def max_nb_columns(self) -> int:
        return self._max_nb_columns

    def set_max_nb_columns(self, max_nb_columns: int) -> Grid:
        self._min_nb_columns = min(self._min_nb_columns, max_nb_columns)
        self._max_nb_columns = max_nb_columns
        return self

    def render(self, io: IO, indentation: int = 0) -> None:
        if len(self._cells) == 0:
            return
        style = self.style
        screen_width = io.get_terminal_dimensions().width
        excess_column_width = _borders.get_format_width(style.cell_format)

        wrapper = CellWrapper(self._cells)
        nb_columns = max(
            1,
            min(
                self._max_nb_columns,
                wrapper.get_estimated_nb_columns(screen_width, io),
            ),
        )
        while True:
            available_width = (
                screen_width
                - indentation
                - style.border_style.get_width(nb_columns)
                - nb_columns * excess_column_width
            )
            wrapper.fit(available_width, nb_columns, io)
            nb_columns -= 1
            if not wrapper.has_word_cuts() or nb_columns < max(
                self._min_nb_columns, 1
            ):
                break
        log.debug("fitted grid into %d columns", wrapper.nb_columns)

        column_lengths = wrapper.column_lengths
        alignments = [style.cell_alignment] * len(column_lengths)
        border_lengths = [length + excess_column_width for length in column_lengths]
        rows = wrapper.wrapped_rows

        _borders.draw_top_border(io, style.border_style, border_lengths, indentation)
        for i, row in enumerate(rows):
            _borders.draw_row(
                io,
                style.border_style,
                row,
                column_lengths,
                alignments,
                style.cell_format,
                style.cell_style,
                style.padding_char,
                indentation,
            )
            if i < len(rows) - 1:
                _borders.draw_middle_border(
                    io, style.border_style, border_lengths, indentation
                )
        _borders.draw_bottom_border(io, style.border_style, border_lengths, indentation)
