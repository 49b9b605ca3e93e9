"""Terminal dimension queries."""

import dataclasses
import logging
import shutil

from ._settings import options

log = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Rectangle:
    """Width and height of an area on the terminal, in cells."""

    width: int
    height: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", int(self.width))
        object.__setattr__(self, "height", int(self.height))


def default_dimensions() -> Rectangle:
    return Rectangle(options["default_width"], options["default_height"])


def get_terminal_dimensions() -> Rectangle:
    """Query the size of the attached terminal.

    `COLUMNS` and `LINES` take precedence over the detected size. Zero values, which
    some pseudo terminals report, are replaced with the configured defaults."""
    fallback = default_dimensions()
    size = shutil.get_terminal_size((fallback.width, fallback.height))
    width = size.columns or fallback.width
    height = size.lines or fallback.height
    log.debug("terminal dimensions: %dx%d", width, height)
    return Rectangle(width, height)
