from __future__ import annotations

import math
from typing import Dict, Iterable, List

from .. import _strings
from .._formatter import Formatter


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class CellWrapper:
    """Distributes cells over a fixed number of columns and wraps them to fit a
    total width.

    Cells are laid out row by row. When the widest cells of all columns together
    don't fit, the width is shared among the "long" columns (those wider than
    their share of the width) in proportion to their current widths, and the cells
    of those columns are word-wrapped. Short columns are never wrapped.
    """

    def __init__(self, cells: Iterable[str] = ()) -> None:
        self._cells: List[str] = []
        self._wrapped_rows: List[List[str]] = []
        self._cell_lengths: List[List[int]] = []
        self._column_lengths: List[int] = []
        self._nb_columns = 0
        self._word_wraps = False
        self._word_cuts = False
        self._max_total_width = 0
        self._total_width = 0
        self.add_cells(cells)

    def add_cell(self, cell: str) -> None:
        self._cells.append(cell.rstrip())

    def add_cells(self, cells: Iterable[str]) -> None:
        for cell in cells:
            self.add_cell(cell)

    @property
    def cells(self) -> List[str]:
        return list(self._cells)

    @property
    def wrapped_rows(self) -> List[List[str]]:
        """The cells of the last :meth:`fit`, one list per row. Wrapped cells contain
        line breaks."""
        return self._wrapped_rows

    @property
    def column_lengths(self) -> List[int]:
        return self._column_lengths

    @property
    def nb_columns(self) -> int:
        return self._nb_columns

    @property
    def total_width(self) -> int:
        return self._total_width

    def has_word_wraps(self) -> bool:
        return self._word_wraps

    def has_word_cuts(self) -> bool:
        """Whether a word had to be split because it was wider than its column."""
        return self._word_cuts

    def get_estimated_nb_columns(
        self, max_total_width: int, formatter: Formatter
    ) -> int:
        """The number of leading cells that fit next to each other in
        `max_total_width`."""
        row_width = 0
        for i, cell in enumerate(self._cells):
            row_width += _strings.get_max_line_length(cell, formatter)
            if row_width > max_total_width:
                return i
        return len(self._cells)

    def fit(self, max_total_width: int, nb_columns: int, formatter: Formatter) -> None:
        self._reset(max_total_width, nb_columns)
        self._init_rows(formatter)
        if self._total_width > max_total_width:
            self._wrap_columns(formatter)

    def _reset(self, max_total_width: int, nb_columns: int) -> None:
        self._wrapped_rows = []
        self._cell_lengths = []
        self._nb_columns = nb_columns
        self._column_lengths = [0] * nb_columns
        self._word_wraps = False
        self._word_cuts = False
        self._max_total_width = max_total_width
        self._total_width = 0

    def _init_rows(self, formatter: Formatter) -> None:
        for i, cell in enumerate(self._cells):
            column = i % self._nb_columns
            if column == 0:
                self._wrapped_rows.append([])
                self._cell_lengths.append([])
            length = _strings.get_max_line_length(cell, formatter)
            self._wrapped_rows[-1].append(cell)
            self._cell_lengths[-1].append(length)
            self._column_lengths[column] = max(self._column_lengths[column], length)

        # Fill up the last row.
        if len(self._wrapped_rows) > 0:
            missing = self._nb_columns - len(self._wrapped_rows[-1])
            self._wrapped_rows[-1].extend([""] * missing)
            self._cell_lengths[-1].extend([0] * missing)
        self._total_width = sum(self._column_lengths)

    def _wrap_columns(self, formatter: Formatter) -> None:
        available_width = self._max_total_width
        long_column_lengths: Dict[int, int] = dict(enumerate(self._column_lengths))

        # Columns narrower than their share of the available width are "short" and
        # keep their width. Repeat until no more short columns are found.
        repeat = True
        while repeat and len(long_column_lengths) > 0:
            threshold = available_width / len(long_column_lengths)
            repeat = False
            for column, length in list(long_column_lengths.items()):
                if length <= threshold:
                    available_width -= length
                    del long_column_lengths[column]
                    repeat = True

        if len(long_column_lengths) == 0:
            return

        actual_width = sum(long_column_lengths.values())
        last_column = max(long_column_lengths)
        for column, length in long_column_lengths.items():
            # Keep the ratios of the column lengths.
            self._column_lengths[column] = _round_half_up(
                length / actual_width * available_width
            )
            if column == last_column:
                # Rounding errors go to the last column.
                self._column_lengths[column] += self._max_total_width - sum(
                    self._column_lengths
                )
            self._wrap_column(column, self._column_lengths[column], formatter)
            self._refresh_column_length(column)
            actual_width = actual_width - length + self._column_lengths[column]

        self._total_width = sum(self._column_lengths)

    def _wrap_column(self, column: int, column_length: int, formatter: Formatter) -> None:
        for i, row in enumerate(self._wrapped_rows):
            cell = row[column]
            if self._cell_lengths[i][column] <= column_length:
                continue
            self._word_wraps = True
            if _strings.get_max_word_length(cell, formatter) > column_length:
                self._word_cuts = True
            wrapped = "\n".join(_strings.wrap_markup(cell, column_length))
            row[column] = wrapped
            self._cell_lengths[i][column] = _strings.get_max_line_length(
                wrapped, formatter
            )

    def _refresh_column_length(self, column: int) -> None:
        self._column_lengths[column] = max(
            (lengths[column] for lengths in self._cell_lengths), default=0
        )
