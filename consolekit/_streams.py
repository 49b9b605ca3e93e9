"""Input and output streams.

Streams are the lowest layer of console IO: they move raw strings in and out of
files, pipes or memory, and know nothing about formatting or verbosity. Every stream
raises :class:`IOFailure` once it has been closed.
"""

from __future__ import annotations

import abc
import io
import os
import sys
from typing import IO as TextFile
from typing import Optional


class IOFailure(OSError):
    """Raised when reading from or writing to a stream fails."""


class InputStream(abc.ABC):
    @abc.abstractmethod
    def read(self, length: int) -> Optional[str]:
        """Read up to `length` characters. Returns `None` at the end of the stream."""

    @abc.abstractmethod
    def read_line(self, length: Optional[int] = None) -> Optional[str]:
        """Read a line, including the trailing newline. `length` limits the
        number of characters read. Returns `None` at the end of the stream."""

    @abc.abstractmethod
    def close(self) -> None: ...

    @abc.abstractmethod
    def is_closed(self) -> bool: ...


class OutputStream(abc.ABC):
    @abc.abstractmethod
    def write(self, text: str) -> None: ...

    @abc.abstractmethod
    def flush(self) -> None: ...

    @abc.abstractmethod
    def supports_ansi(self) -> bool:
        """Whether the stream is connected to something that understands ANSI
        escape sequences."""

    @abc.abstractmethod
    def close(self) -> None: ...

    @abc.abstractmethod
    def is_closed(self) -> bool: ...


# Input streams.


class StreamInputStream(InputStream):
    """Reads from a text file object."""

    def __init__(self, stream: TextFile[str]) -> None:
        self._stream: Optional[TextFile[str]] = stream

    def _get_stream(self) -> TextFile[str]:
        if self._stream is None:
            raise IOFailure("Cannot read from a closed input.")
        return self._stream

    def read(self, length: int) -> Optional[str]:
        try:
            data = self._get_stream().read(length)
        except (OSError, ValueError) as e:
            raise IOFailure("Could not read stream.") from e
        return data or None

    def read_line(self, length: Optional[int] = None) -> Optional[str]:
        stream = self._get_stream()
        if length == 0:
            return ""
        try:
            data = stream.readline() if length is None else stream.readline(length)
        except (OSError, ValueError) as e:
            raise IOFailure("Could not read stream.") from e
        return data or None

    def close(self) -> None:
        if self._stream is not None:
            self._stream.close()
            self._stream = None

    def is_closed(self) -> bool:
        return self._stream is None


class StringInputStream(StreamInputStream):
    """Reads from an in-memory string, which can be changed between reads."""

    def __init__(self, text: str = "") -> None:
        self._buffer = io.StringIO()
        super().__init__(self._buffer)
        self.set(text)

    def clear(self) -> None:
        self._buffer.seek(0)
        self._buffer.truncate(0)

    def set(self, text: str) -> None:
        self.clear()
        self._buffer.write(text)
        self._buffer.seek(0)

    def append(self, text: str) -> None:
        position = self._buffer.tell()
        self._buffer.seek(0, io.SEEK_END)
        self._buffer.write(text)
        self._buffer.seek(position)


class StandardInputStream(StreamInputStream):
    def __init__(self) -> None:
        super().__init__(sys.stdin)

    def close(self) -> None:
        # Never close the interpreter's stdin; just detach from it.
        self._stream = None


class NullInputStream(InputStream):
    """An input stream that is always at its end."""

    def __init__(self) -> None:
        self._closed = False

    def read(self, length: int) -> Optional[str]:
        if self._closed:
            raise IOFailure("Cannot read from a closed input.")
        return None

    def read_line(self, length: Optional[int] = None) -> Optional[str]:
        return self.read(0)

    def close(self) -> None:
        self._closed = True

    def is_closed(self) -> bool:
        return self._closed


# Output streams.


class StreamOutputStream(OutputStream):
    """Writes to a text file object."""

    def __init__(self, stream: TextFile[str]) -> None:
        self._stream: Optional[TextFile[str]] = stream

    def _get_stream(self) -> TextFile[str]:
        if self._stream is None:
            raise IOFailure("Cannot write to a closed output.")
        return self._stream

    def write(self, text: str) -> None:
        try:
            self._get_stream().write(text)
        except (OSError, ValueError) as e:
            raise IOFailure("Could not write stream.") from e

    def flush(self) -> None:
        try:
            self._get_stream().flush()
        except (OSError, ValueError) as e:
            raise IOFailure("Could not flush stream.") from e

    def supports_ansi(self) -> bool:
        stream = self._get_stream()
        if os.name == "nt":
            return "ANSICON" in os.environ or os.environ.get("ConEmuANSI") == "ON"
        isatty = getattr(stream, "isatty", None)
        return isatty is not None and isatty()

    def close(self) -> None:
        if self._stream is not None:
            self._stream.close()
            self._stream = None

    def is_closed(self) -> bool:
        return self._stream is None


class StandardOutputStream(StreamOutputStream):
    def __init__(self) -> None:
        super().__init__(sys.stdout)

    def close(self) -> None:
        # Flush, but leave the interpreter's stdout open.
        if self._stream is not None:
            self.flush()
            self._stream = None


class ErrorOutputStream(StreamOutputStream):
    def __init__(self) -> None:
        super().__init__(sys.stderr)

    def close(self) -> None:
        if self._stream is not None:
            self.flush()
            self._stream = None


class BufferedOutputStream(OutputStream):
    """Collects everything written in memory. Useful for tests."""

    def __init__(self) -> None:
        self._buffer = ""
        self._closed = False

    def fetch(self) -> str:
        return self._buffer

    def clear(self) -> None:
        self._buffer = ""

    def write(self, text: str) -> None:
        if self._closed:
            raise IOFailure("Cannot write to a closed output.")
        self._buffer += text

    def flush(self) -> None:
        if self._closed:
            raise IOFailure("Cannot flush a closed output.")

    def supports_ansi(self) -> bool:
        return False

    def close(self) -> None:
        self._closed = True

    def is_closed(self) -> bool:
        return self._closed


class NullOutputStream(OutputStream):
    """Discards everything written to it."""

    def write(self, text: str) -> None:
        pass

    def flush(self) -> None:
        pass

    def supports_ansi(self) -> bool:
        return False

    def close(self) -> None:
        pass

    def is_closed(self) -> bool:
        return False
