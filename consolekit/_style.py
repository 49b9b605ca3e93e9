"""Styles and style sets.

A :class:`Style` describes how text wrapped in a markup tag is displayed. A
:class:`StyleSet` maps tag names to styles, and is what formatters use to resolve tags
like ``[c1]...[/c1]``.

Styles are built fluently:

.. code-block:: python

    Style.for_tag("error").fg_white().bg_red().bold()
"""

from __future__ import annotations

import dataclasses
from typing import Dict, Iterable, Iterator, Optional, Tuple

import rich.style
import rich.theme
from typing_extensions import Literal, get_args

Color = Literal["black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"]
COLORS: Tuple[str, ...] = get_args(Color)


class UnknownStyleError(KeyError):
    """Raised when looking up a tag that isn't in a style set."""


def _check_color(color: Optional[str]) -> Optional[str]:
    if color is not None and color not in COLORS:
        raise ValueError(
            f'The color must be None or one of {", ".join(COLORS)}. Got: "{color}"'
        )
    return color


@dataclasses.dataclass
class Style:
    tag: Optional[str] = None
    foreground_color: Optional[str] = None
    background_color: Optional[str] = None
    _bold: bool = False
    _underlined: bool = False
    _blinking: bool = False
    _reversed: bool = False
    _concealed: bool = False

    @classmethod
    def for_tag(cls, tag: str) -> Style:
        return cls(tag)

    @classmethod
    def no_tag(cls) -> Style:
        return cls()

    # Foreground.

    def fg(self, color: Optional[str]) -> Style:
        self.foreground_color = _check_color(color)
        return self

    def fg_default(self) -> Style:
        return self.fg(None)

    def fg_black(self) -> Style:
        return self.fg("black")

    def fg_red(self) -> Style:
        return self.fg("red")

    def fg_green(self) -> Style:
        return self.fg("green")

    def fg_yellow(self) -> Style:
        return self.fg("yellow")

    def fg_blue(self) -> Style:
        return self.fg("blue")

    def fg_magenta(self) -> Style:
        return self.fg("magenta")

    def fg_cyan(self) -> Style:
        return self.fg("cyan")

    def fg_white(self) -> Style:
        return self.fg("white")

    # Background.

    def bg(self, color: Optional[str]) -> Style:
        self.background_color = _check_color(color)
        return self

    def bg_default(self) -> Style:
        return self.bg(None)

    def bg_black(self) -> Style:
        return self.bg("black")

    def bg_red(self) -> Style:
        return self.bg("red")

    def bg_green(self) -> Style:
        return self.bg("green")

    def bg_yellow(self) -> Style:
        return self.bg("yellow")

    def bg_blue(self) -> Style:
        return self.bg("blue")

    def bg_magenta(self) -> Style:
        return self.bg("magenta")

    def bg_cyan(self) -> Style:
        return self.bg("cyan")

    def bg_white(self) -> Style:
        return self.bg("white")

    # Attributes.

    def bold(self) -> Style:
        self._bold = True
        return self

    def not_bold(self) -> Style:
        self._bold = False
        return self

    def underlined(self) -> Style:
        self._underlined = True
        return self

    def not_underlined(self) -> Style:
        self._underlined = False
        return self

    def blinking(self) -> Style:
        self._blinking = True
        return self

    def not_blinking(self) -> Style:
        self._blinking = False
        return self

    def reversed(self) -> Style:
        self._reversed = True
        return self

    def not_reversed(self) -> Style:
        self._reversed = False
        return self

    def concealed(self) -> Style:
        self._concealed = True
        return self

    def not_concealed(self) -> Style:
        self._concealed = False
        return self

    def is_bold(self) -> bool:
        return self._bold

    def is_underlined(self) -> bool:
        return self._underlined

    def is_blinking(self) -> bool:
        return self._blinking

    def is_reversed(self) -> bool:
        return self._reversed

    def is_concealed(self) -> bool:
        return self._concealed

    def to_rich(self) -> rich.style.Style:
        """Convert to the equivalent `rich` style. Unset attributes are left as
        `None`, so they are inherited from enclosing styles when nested."""
        return rich.style.Style(
            color=self.foreground_color,
            bgcolor=self.background_color,
            bold=self._bold or None,
            underline=self._underlined or None,
            blink=self._blinking or None,
            reverse=self._reversed or None,
            conceal=self._concealed or None,
        )


class StyleSet:
    """A set of styles, keyed by tag."""

    def __init__(self, styles: Iterable[Style] = ()) -> None:
        self._styles: Dict[str, Style] = {}
        self.replace(styles)

    def add(self, style: Style) -> None:
        if not style.tag:
            raise ValueError("The tag of a style added to the style set must be set.")
        self._styles[style.tag] = style

    def merge(self, styles: Iterable[Style]) -> None:
        for style in styles:
            self.add(style)

    def replace(self, styles: Iterable[Style]) -> None:
        self._styles = {}
        self.merge(styles)

    def remove(self, tag: str) -> None:
        self._styles.pop(tag, None)

    def clear(self) -> None:
        self._styles = {}

    def contains(self, tag: str) -> bool:
        return tag in self._styles

    def is_empty(self) -> bool:
        return len(self._styles) == 0

    def get(self, tag: str) -> Style:
        if tag not in self._styles:
            raise UnknownStyleError(f'The style tag "{tag}" does not exist.')
        return self._styles[tag]

    def to_dict(self) -> Dict[str, Style]:
        return dict(self._styles)

    def as_rich_theme(self, prefix: str = "") -> rich.theme.Theme:
        """Convert to a `rich` theme. `prefix` is prepended to every tag."""
        return rich.theme.Theme(
            {prefix + tag: style.to_rich() for tag, style in self._styles.items()}
        )

    def __contains__(self, tag: object) -> bool:
        return tag in self._styles

    def __iter__(self) -> Iterator[Style]:
        return iter(self._styles.values())

    def __len__(self) -> int:
        return len(self._styles)


class DefaultStyleSet(StyleSet):
    """The styles available in every console application."""

    def __init__(self) -> None:
        super().__init__(
            [
                Style.for_tag("b").bold(),
                Style.for_tag("u").underlined(),
                Style.for_tag("c1").fg_cyan(),
                Style.for_tag("c2").fg_yellow(),
                Style.for_tag("error").fg_white().bg_red(),
                Style.for_tag("warn").fg_black().bg_yellow(),
                Style.for_tag("info").fg_cyan(),
                Style.for_tag("comment").fg_cyan(),
                Style.for_tag("question").fg_black().bg_cyan(),
            ]
        )
