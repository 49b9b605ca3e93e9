"""Console input and output.

:class:`IO` bundles an input, an output and an error output, and is what UI
components render to. Each output applies verbosity filtering and formatting before
handing strings to its stream.
"""

from __future__ import annotations

import enum
from typing import Optional

from ._dimensions import Rectangle, default_dimensions, get_terminal_dimensions
from ._formatter import AnsiFormatter, Formatter, PlainFormatter
from ._settings import options
from ._streams import (
    BufferedOutputStream,
    ErrorOutputStream,
    InputStream,
    OutputStream,
    StandardInputStream,
    StandardOutputStream,
    StringInputStream,
)
from ._style import Style


class Verbosity(enum.IntEnum):
    NORMAL = 0
    VERBOSE = 1
    VERY_VERBOSE = 2
    DEBUG = 4


def _strip_trailing_newlines(text: str) -> str:
    return text.rstrip("\r\n")


class Input:
    """Reads from an input stream. Reads return their default when the input is
    not interactive."""

    def __init__(self, stream: InputStream) -> None:
        self.stream = stream
        self._interactive = True

    def read(self, length: int, default: Optional[str] = None) -> Optional[str]:
        if not self._interactive:
            return default
        return self.stream.read(length)

    def read_line(
        self, default: Optional[str] = None, length: Optional[int] = None
    ) -> Optional[str]:
        if not self._interactive:
            return default
        return self.stream.read_line(length)

    def set_interactive(self, interactive: bool) -> None:
        self._interactive = bool(interactive)

    def is_interactive(self) -> bool:
        return self._interactive

    def close(self) -> None:
        self.stream.close()

    def is_closed(self) -> bool:
        return self.stream.is_closed()


class Output(Formatter):
    """Writes formatted strings to an output stream.

    Markup produced for an :class:`AnsiFormatter` is only rendered when the stream
    supports ANSI sequences (or the `ansi` option is set to "always"); otherwise it's
    removed. Other formatters are always applied."""

    def __init__(
        self, stream: OutputStream, formatter: Optional[Formatter] = None
    ) -> None:
        self.stream = stream
        self._formatter: Formatter = (
            formatter if formatter is not None else PlainFormatter()
        )
        self._verbosity = Verbosity.NORMAL
        self._quiet = False

    def write(self, text: str, flags: Optional[int] = None) -> None:
        if self._may_write(flags):
            self.stream.write(self._format_for_stream(text))

    def write_line(self, text: str, flags: Optional[int] = None) -> None:
        if self._may_write(flags):
            text = _strip_trailing_newlines(text)
            self.stream.write(self._format_for_stream(text) + "\n")

    def write_raw(self, text: str, flags: Optional[int] = None) -> None:
        if self._may_write(flags):
            self.stream.write(text)

    def write_line_raw(self, text: str, flags: Optional[int] = None) -> None:
        if self._may_write(flags):
            self.stream.write(_strip_trailing_newlines(text) + "\n")

    def flush(self) -> None:
        self.stream.flush()

    def close(self) -> None:
        self.stream.close()

    def is_closed(self) -> bool:
        return self.stream.is_closed()

    def supports_ansi(self) -> bool:
        return self.stream.supports_ansi()

    def set_formatter(self, formatter: Formatter) -> None:
        self._formatter = formatter

    def get_formatter(self) -> Formatter:
        return self._formatter

    def format(self, text: str, style: Optional[Style] = None) -> str:
        return self._formatter.format(text, style)

    def remove_format(self, text: str) -> str:
        return self._formatter.remove_format(text)

    def set_verbosity(self, verbosity: int) -> None:
        if verbosity not in tuple(Verbosity):
            raise ValueError(
                "The verbosity must be one of Verbosity.NORMAL, Verbosity.VERBOSE,"
                f" Verbosity.VERY_VERBOSE and Verbosity.DEBUG. Got: {verbosity!r}"
            )
        self._verbosity = Verbosity(verbosity)

    def get_verbosity(self) -> Verbosity:
        return self._verbosity

    def is_verbose(self) -> bool:
        return self._verbosity >= Verbosity.VERBOSE

    def is_very_verbose(self) -> bool:
        return self._verbosity >= Verbosity.VERY_VERBOSE

    def is_debug(self) -> bool:
        return self._verbosity == Verbosity.DEBUG

    def set_quiet(self, quiet: bool) -> None:
        self._quiet = bool(quiet)

    def is_quiet(self) -> bool:
        return self._quiet

    def _format_for_stream(self, text: str) -> str:
        if self._decorate():
            return self._formatter.format(text)
        return self._formatter.remove_format(text)

    def _decorate(self) -> bool:
        if not isinstance(self._formatter, AnsiFormatter):
            return True
        mode = options["ansi"]
        if mode == "auto":
            return self.stream.supports_ansi()
        return mode == "always"

    def _may_write(self, flags: Optional[int]) -> bool:
        if self._quiet:
            return False
        if not flags:
            return True
        # The lowest verbosity among the flags decides.
        for level in (Verbosity.VERBOSE, Verbosity.VERY_VERBOSE, Verbosity.DEBUG):
            if flags & level:
                return self._verbosity >= level
        return True


class IO(Formatter):
    """The input, output and error output of a console application."""

    def __init__(
        self,
        input: Input,
        output: Output,
        error_output: Output,
        dimensions: Optional[Rectangle] = None,
    ) -> None:
        self.input = input
        self.output = output
        self.error_output = error_output
        self._terminal_dimensions = dimensions

    # Reading.

    def read(self, length: int, default: Optional[str] = None) -> Optional[str]:
        return self.input.read(length, default)

    def read_line(
        self, default: Optional[str] = None, length: Optional[int] = None
    ) -> Optional[str]:
        return self.input.read_line(default, length)

    # Writing.

    def write(self, text: str, flags: Optional[int] = None) -> None:
        self.output.write(text, flags)

    def write_line(self, text: str, flags: Optional[int] = None) -> None:
        self.output.write_line(text, flags)

    def write_raw(self, text: str, flags: Optional[int] = None) -> None:
        self.output.write_raw(text, flags)

    def write_line_raw(self, text: str, flags: Optional[int] = None) -> None:
        self.output.write_line_raw(text, flags)

    def error(self, text: str, flags: Optional[int] = None) -> None:
        self.error_output.write(text, flags)

    def error_line(self, text: str, flags: Optional[int] = None) -> None:
        self.error_output.write_line(text, flags)

    def error_raw(self, text: str, flags: Optional[int] = None) -> None:
        self.error_output.write_raw(text, flags)

    def error_line_raw(self, text: str, flags: Optional[int] = None) -> None:
        self.error_output.write_line_raw(text, flags)

    def flush(self) -> None:
        self.output.flush()
        self.error_output.flush()

    def close(self) -> None:
        self.input.close()
        self.output.close()
        self.error_output.close()

    # Modes.

    def set_interactive(self, interactive: bool) -> None:
        self.input.set_interactive(interactive)

    def is_interactive(self) -> bool:
        return self.input.is_interactive()

    def set_verbosity(self, verbosity: int) -> None:
        self.output.set_verbosity(verbosity)
        self.error_output.set_verbosity(verbosity)

    def get_verbosity(self) -> Verbosity:
        return self.output.get_verbosity()

    def is_verbose(self) -> bool:
        return self.output.is_verbose()

    def is_very_verbose(self) -> bool:
        return self.output.is_very_verbose()

    def is_debug(self) -> bool:
        return self.output.is_debug()

    def set_quiet(self, quiet: bool) -> None:
        self.output.set_quiet(quiet)
        self.error_output.set_quiet(quiet)

    def is_quiet(self) -> bool:
        return self.output.is_quiet()

    # Dimensions.

    def set_terminal_dimensions(self, dimensions: Rectangle) -> None:
        self._terminal_dimensions = dimensions

    def get_terminal_dimensions(self) -> Rectangle:
        if self._terminal_dimensions is None:
            self._terminal_dimensions = self._get_default_terminal_dimensions()
        return self._terminal_dimensions

    def _get_default_terminal_dimensions(self) -> Rectangle:
        return default_dimensions()

    # Formatting.

    def set_formatter(self, formatter: Formatter) -> None:
        self.output.set_formatter(formatter)
        self.error_output.set_formatter(formatter)

    def get_formatter(self) -> Formatter:
        return self.output.get_formatter()

    def format(self, text: str, style: Optional[Style] = None) -> str:
        return self.output.format(text, style)

    def remove_format(self, text: str) -> str:
        return self.output.remove_format(text)


class BufferedIO(IO):
    """An IO that reads from and writes to memory."""

    def __init__(
        self,
        input_data: str = "",
        formatter: Optional[Formatter] = None,
        dimensions: Optional[Rectangle] = None,
    ) -> None:
        self._input_stream = StringInputStream(input_data)
        self._output_stream = BufferedOutputStream()
        self._error_stream = BufferedOutputStream()
        super().__init__(
            Input(self._input_stream),
            Output(self._output_stream, formatter),
            Output(self._error_stream, formatter),
            dimensions,
        )

    def set_input(self, data: str) -> None:
        self._input_stream.set(data)

    def append_input(self, data: str) -> None:
        self._input_stream.append(data)

    def clear_input(self) -> None:
        self._input_stream.clear()

    def fetch_output(self) -> str:
        return self._output_stream.fetch()

    def clear_output(self) -> None:
        self._output_stream.clear()

    def fetch_errors(self) -> str:
        return self._error_stream.fetch()

    def clear_errors(self) -> None:
        self._error_stream.clear()


class ConsoleIO(IO):
    """An IO connected to the standard streams of the process."""

    def __init__(
        self,
        input: Optional[Input] = None,
        output: Optional[Output] = None,
        error_output: Optional[Output] = None,
        formatter: Optional[Formatter] = None,
        dimensions: Optional[Rectangle] = None,
    ) -> None:
        input = input if input is not None else Input(StandardInputStream())
        output = output if output is not None else Output(StandardOutputStream())
        error_output = (
            error_output if error_output is not None else Output(ErrorOutputStream())
        )
        if formatter is None:
            formatter = _default_formatter(output)
        output.set_formatter(formatter)
        error_output.set_formatter(formatter)
        super().__init__(input, output, error_output, dimensions)

    def _get_default_terminal_dimensions(self) -> Rectangle:
        return get_terminal_dimensions()


def _default_formatter(output: Output) -> Formatter:
    mode = options["ansi"]
    if mode == "always" or (mode == "auto" and output.supports_ansi()):
        return AnsiFormatter()
    return PlainFormatter()
