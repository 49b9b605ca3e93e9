"""Formatters turn console markup into text for an output stream.

Markup is `rich` console markup: ``"[b]Name:[/b] [c1]value[/c1]"``. Tags are resolved
against a :class:`~consolekit.StyleSet`; parsing and escape sequence generation are
delegated to `rich`.
"""

from __future__ import annotations

import abc
from typing import Optional

from rich.cells import cell_len
from rich.console import Console
from rich.text import Text

from . import _strings
from ._style import DefaultStyleSet, Style, StyleSet


class Formatter(abc.ABC):
    @abc.abstractmethod
    def format(self, text: str, style: Optional[Style] = None) -> str:
        """Format a markup string for display."""

    @abc.abstractmethod
    def remove_format(self, text: str) -> str:
        """Remove all markup from a string, returning the text as displayed."""


def display_width(text: str) -> int:
    """Number of terminal cells occupied by already-unformatted text."""
    return cell_len(text)


def _plain_text(markup: str) -> str:
    return Text.from_markup(markup, emoji=False).plain


class AnsiFormatter(Formatter):
    """Renders markup as ANSI escape sequences."""

    def __init__(self, style_set: Optional[StyleSet] = None) -> None:
        self._style_set = style_set if style_set is not None else DefaultStyleSet()
        self._console = Console(
            theme=self._style_set.as_rich_theme(prefix=_strings.TAG_PREFIX),
            force_terminal=True,
            color_system="standard",
            no_color=False,
            emoji=False,
            highlight=False,
        )

    def format(self, text: str, style: Optional[Style] = None) -> str:
        # Tags of the style set take precedence over rich's own style names.
        markup = _strings.add_tag_prefix(text, self._style_set)
        rendered = Text.from_markup(
            markup, style=style.to_rich() if style is not None else "", emoji=False
        )
        with self._console.capture() as out:
            self._console.print(rendered, end="", soft_wrap=True)
        return out.get()

    def remove_format(self, text: str) -> str:
        return _plain_text(text)


class PlainFormatter(Formatter):
    """Strips all markup. Used for streams that don't support ANSI sequences."""

    def format(self, text: str, style: Optional[Style] = None) -> str:
        return _plain_text(text)

    def remove_format(self, text: str) -> str:
        return _plain_text(text)


class NullFormatter(Formatter):
    """Leaves strings untouched, markup included."""

    def format(self, text: str, style: Optional[Style] = None) -> str:
        return text

    def remove_format(self, text: str) -> str:
        return text
