from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .. import _strings
from .._formatter import display_width
from ._alignment import LabelAlignment
from ._component import AlignableComponent, Component

if TYPE_CHECKING:
    from .._io import IO


class Paragraph(Component):
    """A paragraph of text, wrapped to the width of the terminal."""

    def __init__(self, text: str) -> None:
        self.text = text

    def render(self, io: IO, indentation: int = 0) -> None:
        line_prefix = " " * indentation
        # Leave one column free at the right edge.
        text_width = io.get_terminal_dimensions().width - 1 - indentation
        lines = _strings.wrap_markup(self.text, text_width)
        text = "\n".join(line_prefix + line if line else line for line in lines)
        io.write(text.rstrip() + "\n")


class EmptyLine(Component):
    def render(self, io: IO, indentation: int = 0) -> None:
        # Indentation is ignored for empty lines.
        io.write("\n")


class LabeledParagraph(AlignableComponent):
    """A paragraph with a label in front of it.

    The text is wrapped and indented so that it never flows under the label.
    Aligned paragraphs that were added to a :class:`~consolekit.ui.BlockLayout`
    start their text at the offset shared by all labels of the layout, while
    unaligned paragraphs start it right after their own label and padding.

    Args:
        label: The label. May contain markup.
        text: The text. May contain markup.
        padding: Number of spaces between the label and the text.
        aligned: Whether the text should be aligned with other paragraphs.
    """

    def __init__(
        self, label: str, text: str, padding: int = 2, aligned: bool = True
    ) -> None:
        self._label = label
        self._padding = padding
        self.text = text
        self._aligned = aligned
        self._alignment: Optional[LabelAlignment] = None

    @property
    def label(self) -> str:
        return self._label

    @property
    def padding(self) -> int:
        return self._padding

    def is_aligned(self) -> bool:
        return self._aligned

    def set_alignment(self, alignment: LabelAlignment) -> None:
        self._alignment = alignment

    def render(self, io: IO, indentation: int = 0) -> None:
        line_prefix = " " * indentation
        label_width = display_width(io.remove_format(self._label))

        text_offset = 0
        if self._aligned and self._alignment is not None:
            text_offset = self._alignment.get_text_offset() - indentation
        text_offset = max(text_offset, label_width + self._padding)

        # One column stays free at the right edge.
        text_width = io.get_terminal_dimensions().width - 1 - text_offset - indentation
        lines = _strings.wrap_markup(self.text, text_width) or [""]

        continuation_prefix = line_prefix + " " * text_offset
        text = "\n".join(
            [lines[0]] + [continuation_prefix + line for line in lines[1:]]
        )
        label = self._label + " " * (text_offset - label_width)
        io.write((line_prefix + label + text).rstrip() + "\n")
