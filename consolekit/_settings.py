"""Global settings for consolekit.

Defaults can be overridden with environment variables, which are read once at import
time. Values can also be changed at runtime by mutating :data:`options`.
"""

import os
from typing import Any, Callable

from typing_extensions import Literal, TypedDict

from . import _strings


class OptionsDict(TypedDict):
    """Options for consolekit.

    Attributes:
        ansi: Whether console IO should emit ANSI escape sequences. "auto" checks
            whether the output stream is a terminal.
        default_width: Terminal width used when the real width can't be detected.
        default_height: Terminal height used when the real height can't be detected.
        check_interval: Seconds between liveness checks of launched processes.
    """

    ansi: Literal["auto", "always", "never"]
    default_width: int
    default_height: int
    check_interval: float


def _parse_ansi_mode(value: str) -> str:
    mode = value.strip().lower()
    if mode not in ("auto", "always", "never"):
        # Accept boolean spellings as well: PYTHON_CONSOLEKIT_ANSI=0, =yes, ...
        mode = "always" if _strings.parse_boolean(mode, nullable=False) else "never"
    return mode


def read_option(str_name: str, parse: Callable[[str], Any], default: Any) -> Any:
    if str_name in os.environ:
        return parse(os.environ[str_name])
    return default


options: OptionsDict = {
    "ansi": read_option("PYTHON_CONSOLEKIT_ANSI", _parse_ansi_mode, "auto"),
    "default_width": read_option(
        "PYTHON_CONSOLEKIT_WIDTH",
        lambda x: _strings.parse_integer(x, nullable=False),
        80,
    ),
    "default_height": read_option(
        "PYTHON_CONSOLEKIT_HEIGHT",
        lambda x: _strings.parse_integer(x, nullable=False),
        20,
    ),
    "check_interval": read_option(
        "PYTHON_CONSOLEKIT_CHECK_INTERVAL",
        lambda x: _strings.parse_float(x, nullable=False),
        0.1,
    ),
}
