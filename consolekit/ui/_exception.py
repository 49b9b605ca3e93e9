from __future__ import annotations

import os
import traceback
from typing import TYPE_CHECKING, List, Optional, Set

from rich.markup import escape

from .. import _strings
from ._component import Component

if TYPE_CHECKING:
    from .._io import IO


def _qualified_name(exception: BaseException) -> str:
    cls = type(exception)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def _cause(exception: BaseException) -> Optional[BaseException]:
    if exception.__cause__ is not None:
        return exception.__cause__
    if exception.__suppress_context__:
        return None
    return exception.__context__


class ExceptionTrace(Component):
    """Renders an exception on the error output.

    Normally only the message is shown, as ``fatal: <message>``. At verbose
    verbosity, the exception type and message are shown in a box, followed by the
    stack trace with the frame that raised the exception first. At very verbose
    verbosity, the exceptions that caused it are rendered as well.
    """

    def __init__(self, exception: BaseException) -> None:
        self.exception = exception

    def render(self, io: IO, indentation: int = 0) -> None:
        if not io.is_verbose():
            io.error_line(f"fatal: {escape(str(self.exception))}")
            return

        self._render_exception(io, self.exception)
        if not io.is_very_verbose():
            return

        seen: Set[int] = {id(self.exception)}
        cause = _cause(self.exception)
        while cause is not None and id(cause) not in seen:
            seen.add(id(cause))
            io.error_line("Caused by:")
            self._render_exception(io, cause)
            cause = _cause(cause)

    def _render_exception(self, io: IO, exception: BaseException) -> None:
        self._render_box(io, exception)
        self._render_trace(io, exception)

    def _render_box(self, io: IO, exception: BaseException) -> None:
        screen_width = io.get_terminal_dimensions().width - 1
        lines: List[str] = [escape(f"[{_qualified_name(exception)}]")]
        lines.extend(_strings.wrap_markup(escape(str(exception)), screen_width - 4))
        box_width = max(_strings.get_length(line, io) for line in lines)

        empty_line = "[error]" + " " * (box_width + 4) + "[/error]"
        io.error("\n\n")
        io.error_line(empty_line)
        for line in lines:
            padding = " " * max(0, box_width - _strings.get_length(line, io))
            io.error_line(f"[error]  {line}{padding}  [/error]")
        io.error_line(empty_line)
        io.error("\n\n")

    def _render_trace(self, io: IO, exception: BaseException) -> None:
        cwd = os.getcwd() + os.sep
        io.error_line("[b]Exception trace:[/b]")
        frames = traceback.extract_tb(exception.__traceback__)
        # The frame that raised the exception comes first.
        for frame in reversed(frames):
            location = frame.filename
            if location.startswith(cwd):
                location = location[len(cwd) :]
            line_number = frame.lineno if frame.lineno is not None else "n/a"
            io.error(
                f"  [u]{escape(frame.name)}[/u]()\n"
                f"    [c1]{escape(location)}:{line_number}[/c1]\n"
            )
        io.error("\n\n")
