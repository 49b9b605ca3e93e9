"""Utilities and constants for working with strings."""

import functools
import re
from typing import TYPE_CHECKING, Any, Callable, Container, List, Optional

from rich.cells import cell_len
from rich.console import Console
from rich.markup import RE_TAGS
from rich.text import Text

if TYPE_CHECKING:
    from ._formatter import Formatter


class InvalidValueError(ValueError):
    """Raised when a string cannot be converted to the requested type."""


_TRUE_STRINGS = ("true", "1", "yes", "on")
_FALSE_STRINGS = ("", "false", "0", "no", "off")


def _is_null(value: Any) -> bool:
    return value is None or value == "null"


def parse_string(value: Any, nullable: bool = True) -> Optional[str]:
    """Convert a value to a string. `None` and `"null"` map to `None` when
    `nullable` is set; booleans are spelled `"true"` and `"false"`."""
    if nullable and _is_null(value):
        return None
    if value is None:
        return "null"
    if value is True:
        return "true"
    if value is False:
        return "false"
    return str(value)


def parse_boolean(value: Any, nullable: bool = True) -> Optional[bool]:
    if nullable and _is_null(value):
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, (str, int)):
        normalized = str(value).strip().lower()
        if normalized in _TRUE_STRINGS:
            return True
        if normalized in _FALSE_STRINGS:
            return False
    raise InvalidValueError(f'The value "{value}" cannot be parsed as boolean.')


def parse_integer(value: Any, nullable: bool = True) -> Optional[int]:
    if nullable and _is_null(value):
        return None
    if isinstance(value, (bool, int)):
        return int(value)
    try:
        return int(float(value))
    except (TypeError, ValueError) as e:
        raise InvalidValueError(
            f'The value "{value}" cannot be parsed as integer.'
        ) from e


def parse_float(value: Any, nullable: bool = True) -> Optional[float]:
    if nullable and _is_null(value):
        return None
    if isinstance(value, (bool, int, float)):
        return float(value)
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise InvalidValueError(f'The value "{value}" cannot be parsed as float.') from e


def get_length(text: str, formatter: Optional["Formatter"] = None) -> int:
    """Number of terminal cells needed to display `text`. Markup is removed first
    when a formatter is passed in."""
    if formatter is not None:
        text = formatter.remove_format(text)
    return cell_len(text)


def get_max_word_length(text: str, formatter: Optional["Formatter"] = None) -> int:
    if formatter is not None:
        text = formatter.remove_format(text)
    # Tags are already removed, so we don't pass the formatter along.
    return max((get_length(word) for word in re.split(r"\s+", text)), default=0)


def get_max_line_length(text: str, formatter: Optional["Formatter"] = None) -> int:
    if formatter is not None:
        text = formatter.remove_format(text)
    return max((get_length(line) for line in text.split("\n")), default=0)


@functools.lru_cache(maxsize=None)
def _get_ansi_pattern() -> re.Pattern:
    # https://stackoverflow.com/a/14693789
    return re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


def strip_ansi_sequences(x: str) -> str:
    return _get_ansi_pattern().sub("", x)


TAG_PREFIX = "consolekit:"
"""Marks tags that must be looked up as-is. `rich` rewrites tag names that are also
style keywords, so that `[b]` would otherwise always mean `[bold]`."""

# Only plain names are renamed; tags with parameters or several styles are kept.
_TAG_NAME_PATTERN = re.compile(r"[a-z][\w.:-]*\Z")


def rename_tags(markup: str, rename: Callable[[str], Optional[str]]) -> str:
    """Rename the tags of a markup string.

    `rename` is called with the name of every opening and closing tag, and returns
    the new name or `None` to leave the tag alone. Escaped tags, the implicit
    closing tag `[/]` and tags with parameters are never renamed."""

    def replace(match: "re.Match") -> str:
        full, backslashes, body = match.groups()
        if len(backslashes) % 2 == 1:
            return full
        closing = "/" if body.startswith("/") else ""
        name = body[len(closing) :]
        if _TAG_NAME_PATTERN.match(name) is None:
            return full
        new_name = rename(name)
        if new_name is None:
            return full
        return f"{backslashes}[{closing}{new_name}]"

    return RE_TAGS.sub(replace, markup)


def add_tag_prefix(markup: str, tags: Optional[Container[str]] = None) -> str:
    """Prefix tags with :data:`TAG_PREFIX`. When `tags` is given, only tags
    contained in it are prefixed."""
    return rename_tags(
        markup,
        lambda name: TAG_PREFIX + name if tags is None or name in tags else None,
    )


def remove_tag_prefix(markup: str) -> str:
    return rename_tags(
        markup,
        lambda name: name[len(TAG_PREFIX) :] if name.startswith(TAG_PREFIX) else None,
    )


@functools.lru_cache(maxsize=1)
def _wrap_console() -> Console:
    # Only used for its measuring context; nothing is ever printed to it.
    return Console(width=80, emoji=False, highlight=False)


def wrap_markup(markup: str, width: int) -> List[str]:
    """Word-wrap a string containing console markup.

    Line widths are measured on the visible text, so tags don't count towards
    `width`. Each output line is valid markup on its own: tags spanning a line
    break are closed at the end of the line and reopened on the next one.
    Existing line breaks are kept, and trailing whitespace is stripped from every
    line. Words longer than `width` are folded."""
    text = Text.from_markup(add_tag_prefix(markup), emoji=False)
    out: List[str] = []
    for line in text.wrap(_wrap_console(), max(width, 1)):
        line.rstrip()
        out.append(remove_tag_prefix(line.markup))
    return out


def dedent_description(text: str) -> str:
    """Collapse a docstring-style description into a single paragraph per blank
    line separated block."""
    blocks = re.split(r"\n\s*\n", text.strip())
    return "\n\n".join(" ".join(block.split()) for block in blocks)
