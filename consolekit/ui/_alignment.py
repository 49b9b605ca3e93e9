from __future__ import annotations

from typing import List, Tuple

from .._formatter import Formatter, display_width
from ._component import AlignableComponent


class LabelAlignment:
    """Aligns the texts of labeled paragraphs.

    Paragraphs passed to :meth:`add` have their texts start at a common offset, so
    that labels of different lengths line up. The offset is computed by
    :meth:`align` and read back with :meth:`get_text_offset`.

    The offset only reflects paragraphs that were added before the last call to
    :meth:`align`.
    """

    def __init__(self) -> None:
        self._paragraphs: List[Tuple[AlignableComponent, int]] = []
        self._text_offset = 0

    def add(self, paragraph: AlignableComponent, indentation: int = 0) -> None:
        """Add a paragraph at the given indentation. Paragraphs that aren't aligned
        are ignored."""
        if paragraph.is_aligned():
            self._paragraphs.append((paragraph, indentation))

    def align(self, formatter: Formatter, indentation: int = 0) -> None:
        """Calculate the text offset from the labels of all added paragraphs.

        `indentation` is added on top of the indentation of each paragraph. Markup is
        removed from the labels with `formatter` before they are measured."""
        text_offset = 0
        for paragraph, paragraph_indentation in self._paragraphs:
            label_width = display_width(formatter.remove_format(paragraph.label))
            text_offset = max(
                text_offset, paragraph_indentation + label_width + paragraph.padding
            )
        self._text_offset = text_offset + indentation

    def clear(self) -> None:
        """Forget all added paragraphs. The text offset is kept until the next call
        to :meth:`align`."""
        self._paragraphs = []

    def set_text_offset(self, text_offset: int) -> None:
        self._text_offset = text_offset

    def get_text_offset(self) -> int:
        """The calculated or manually set text offset. 0 before either happened."""
        return self._text_offset

    @property
    def text_offset(self) -> int:
        return self._text_offset
