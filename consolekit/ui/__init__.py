"""The :mod:`consolekit.ui` submodule contains components that render text blocks to
an :class:`~consolekit.IO`: paragraphs, labeled paragraphs with aligned texts,
tables, grids, exception traces, and layouts that nest them in indented blocks.
"""

from ._alignment import LabelAlignment
from ._borders import Alignment, BorderStyle, GridStyle, TableStyle
from ._cells import CellWrapper
from ._component import AlignableComponent, Component
from ._exception import ExceptionTrace
from ._help import AbstractHelp, ParserHelp
from ._layout import BlockLayout, InvalidLayoutState
from ._paragraph import EmptyLine, LabeledParagraph, Paragraph
from ._table import Grid, Table

__all__ = [
    "AbstractHelp",
    "AlignableComponent",
    "Alignment",
    "BlockLayout",
    "BorderStyle",
    "CellWrapper",
    "Component",
    "EmptyLine",
    "ExceptionTrace",
    "Grid",
    "GridStyle",
    "InvalidLayoutState",
    "LabelAlignment",
    "LabeledParagraph",
    "Paragraph",
    "ParserHelp",
    "Table",
    "TableStyle",
]
