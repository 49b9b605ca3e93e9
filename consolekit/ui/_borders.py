"""Border and cell styles of tables and grids, and the helpers that draw them."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence, Tuple

import rich.box
from rich.markup import escape
from typing_extensions import Literal, get_args

from .. import _strings
from .._style import Style

if TYPE_CHECKING:
    from .._io import IO

Alignment = Literal["left", "center", "right"]
ALIGNMENTS: Tuple[str, ...] = get_args(Alignment)


def _check_alignment(alignment: str) -> str:
    if alignment not in ALIGNMENTS:
        raise ValueError(
            f"The alignment must be one of {', '.join(ALIGNMENTS)}. Got: {alignment!r}"
        )
    return alignment


def _styled(markup: str, style: Optional[Style]) -> str:
    if style is None:
        return markup
    rich_style = style.to_rich()
    if not rich_style:
        return markup
    return f"[{rich_style}]{markup}[/]"


@dataclasses.dataclass
class BorderStyle:
    """Characters used to draw the borders of a table or grid.

    Horizontal lines are drawn at the top (`line_ht`), between rows (`line_hc`) and
    at the bottom (`line_hb`); vertical lines on the left (`line_vl`), between
    columns (`line_vc`) and on the right (`line_vr`). Lines that consist of empty
    strings only are not drawn at all.
    """

    line_ht: str = "-"
    line_hc: str = "-"
    line_hb: str = "-"
    line_vl: str = "|"
    line_vc: str = "|"
    line_vr: str = "|"
    corner_tl: str = "+"
    corner_tr: str = "+"
    corner_bl: str = "+"
    corner_br: str = "+"
    crossing_c: str = "+"
    crossing_l: str = "+"
    crossing_r: str = "+"
    crossing_t: str = "+"
    crossing_b: str = "+"
    style: Optional[Style] = None

    @classmethod
    def none(cls) -> BorderStyle:
        """No borders; columns are separated by a single space."""
        return cls(
            line_ht="",
            line_hc="",
            line_hb="",
            line_vl="",
            line_vc=" ",
            line_vr="",
            corner_tl="",
            corner_tr="",
            corner_bl="",
            corner_br="",
            crossing_c="",
            crossing_l="",
            crossing_r="",
            crossing_t="",
            crossing_b="",
        )

    @classmethod
    def ascii(cls) -> BorderStyle:
        return cls.from_box(rich.box.ASCII2)

    @classmethod
    def solid(cls) -> BorderStyle:
        return cls.from_box(rich.box.SQUARE)

    @classmethod
    def from_box(cls, box: rich.box.Box) -> BorderStyle:
        """Take the characters from a `rich` box, like `rich.box.ROUNDED`."""
        return cls(
            line_ht=box.top,
            line_hc=box.head_row_horizontal,
            line_hb=box.bottom,
            line_vl=box.mid_left,
            line_vc=box.mid_vertical,
            line_vr=box.mid_right,
            corner_tl=box.top_left,
            corner_tr=box.top_right,
            corner_bl=box.bottom_left,
            corner_br=box.bottom_right,
            crossing_c=box.head_row_cross,
            crossing_l=box.head_row_left,
            crossing_r=box.head_row_right,
            crossing_t=box.top_divider,
            crossing_b=box.bottom_divider,
        )

    def get_width(self, nb_columns: int) -> int:
        """Number of cells taken by the vertical lines of a row."""
        return (
            _strings.get_length(self.line_vl)
            + (nb_columns - 1) * _strings.get_length(self.line_vc)
            + _strings.get_length(self.line_vr)
        )


@dataclasses.dataclass
class TableStyle:
    """How a :class:`~consolekit.ui.Table` is drawn.

    `header_cell_format` and `cell_format` are :meth:`str.format` templates that
    receive the padded cell text, e.g. ``" {} "`` for one space on each side.
    """

    border_style: BorderStyle = dataclasses.field(default_factory=BorderStyle.ascii)
    padding_char: str = " "
    header_cell_format: str = " {} "
    cell_format: str = " {} "
    column_alignments: Dict[int, str] = dataclasses.field(default_factory=dict)
    default_column_alignment: str = "left"
    header_cell_style: Optional[Style] = None
    cell_style: Optional[Style] = None

    @classmethod
    def borderless(cls) -> TableStyle:
        border_style = BorderStyle.none()
        border_style.line_hc = "="
        border_style.crossing_c = " "
        return cls(border_style, header_cell_format="{}", cell_format="{}")

    @classmethod
    def ascii_border(cls) -> TableStyle:
        return cls(BorderStyle.ascii())

    @classmethod
    def solid_border(cls) -> TableStyle:
        return cls(BorderStyle.solid())

    def set_column_alignment(self, column: int, alignment: str) -> TableStyle:
        self.column_alignments[column] = _check_alignment(alignment)
        return self

    def set_default_column_alignment(self, alignment: str) -> TableStyle:
        self.default_column_alignment = _check_alignment(alignment)
        return self

    def get_column_alignment(self, column: int) -> str:
        return self.column_alignments.get(column, self.default_column_alignment)

    def get_column_alignments(self, nb_columns: int) -> List[str]:
        return [self.get_column_alignment(column) for column in range(nb_columns)]


@dataclasses.dataclass
class GridStyle:
    """How a :class:`~consolekit.ui.Grid` is drawn. All cells share one alignment."""

    border_style: BorderStyle = dataclasses.field(default_factory=BorderStyle.none)
    padding_char: str = " "
    cell_format: str = "{}"
    cell_alignment: str = "left"
    cell_style: Optional[Style] = None

    @classmethod
    def borderless(cls) -> GridStyle:
        return cls(BorderStyle.none())

    @classmethod
    def ascii_border(cls) -> GridStyle:
        return cls(BorderStyle.ascii(), cell_format=" {} ")

    @classmethod
    def solid_border(cls) -> GridStyle:
        return cls(BorderStyle.solid(), cell_format=" {} ")

    def set_cell_alignment(self, alignment: str) -> GridStyle:
        self.cell_alignment = _check_alignment(alignment)
        return self


def get_format_width(cell_format: str) -> int:
    """Number of cells a format adds around the cell text."""
    return _strings.get_length(cell_format.format(""))


# Drawing. Every line is written as markup, so the output's formatter decides
# whether border styles are rendered.


def _draw_border(
    io: IO,
    column_lengths: Sequence[int],
    indentation: int,
    line_char: str,
    left_char: str,
    center_char: str,
    right_char: str,
    style: Optional[Style],
) -> None:
    line = left_char + center_char.join(line_char * length for length in column_lengths)
    line = (" " * indentation + line + right_char).rstrip()
    if line:
        io.write(_styled(escape(line), style) + "\n")


def draw_top_border(
    io: IO, style: BorderStyle, column_lengths: Sequence[int], indentation: int = 0
) -> None:
    _draw_border(
        io,
        column_lengths,
        indentation,
        style.line_ht,
        style.corner_tl,
        style.crossing_t,
        style.corner_tr,
        style.style,
    )


def draw_middle_border(
    io: IO, style: BorderStyle, column_lengths: Sequence[int], indentation: int = 0
) -> None:
    _draw_border(
        io,
        column_lengths,
        indentation,
        style.line_hc,
        style.crossing_l,
        style.crossing_c,
        style.crossing_r,
        style.style,
    )


def draw_bottom_border(
    io: IO, style: BorderStyle, column_lengths: Sequence[int], indentation: int = 0
) -> None:
    _draw_border(
        io,
        column_lengths,
        indentation,
        style.line_hb,
        style.corner_bl,
        style.crossing_b,
        style.corner_br,
        style.style,
    )


def _pad(markup: str, missing: int, alignment: str, padding_char: str) -> str:
    if missing <= 0:
        return markup
    if alignment == "right":
        left = missing
    elif alignment == "center":
        left = missing // 2
    else:
        left = 0
    return padding_char * left + markup + padding_char * (missing - left)


def draw_row(
    io: IO,
    style: BorderStyle,
    row: Sequence[str],
    column_lengths: Sequence[int],
    alignments: Sequence[str],
    cell_format: str,
    cell_style: Optional[Style] = None,
    padding_char: str = " ",
    indentation: int = 0,
) -> None:
    """Draw a row of already wrapped cells. Cells may span several lines; the row is
    as high as its highest cell."""
    cell_lines = [cell.split("\n") for cell in row]
    nb_lines = max((len(lines) for lines in cell_lines), default=0)
    # Measuring is done on the visible text, so cells are compared without markup.
    plain = io.remove_format
    vertical_left = _styled(escape(style.line_vl), style.style)
    vertical_center = _styled(escape(style.line_vc), style.style)
    vertical_right = _styled(escape(style.line_vr), style.style)
    padding_char = escape(padding_char)

    for i in range(nb_lines):
        cells = []
        for column, lines in enumerate(cell_lines):
            cell_line = lines[i] if i < len(lines) else ""
            missing = column_lengths[column] - _strings.get_length(plain(cell_line))
            padded = _pad(cell_line, missing, alignments[column], padding_char)
            cells.append(_styled(cell_format.format(padded), cell_style))
        line = " " * indentation + vertical_left + vertical_center.join(cells)
        io.write((line + vertical_right).rstrip() + "\n")
