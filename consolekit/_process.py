"""Launching processes that share the console of the current process."""

import contextlib
import logging
import signal
import subprocess
import time
from typing import Iterator, Optional, Sequence, Union

from ._settings import options

log = logging.getLogger(__name__)

_TERMINATION_SIGNALS = tuple(
    getattr(signal, name) for name in ("SIGINT", "SIGTERM") if hasattr(signal, name)
)


@contextlib.contextmanager
def _ignore_termination_signals() -> Iterator[None]:
    """Ignore SIGINT and SIGTERM, then restore the previous handlers. Not
    thread-safe: signal handlers can only be changed from the main thread."""
    previous = {}
    for signum in _TERMINATION_SIGNALS:
        previous[signum] = signal.signal(signum, signal.SIG_IGN)
    log.debug("ignoring termination signals while the process runs")
    try:
        yield
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler if handler is not None else signal.SIG_DFL)


class ProcessLauncher:
    """Runs a command in the foreground, attached to the standard streams of the
    current process, and waits until it exits."""

    def __init__(self, check_interval: Optional[float] = None) -> None:
        self._running = False
        self._check_interval = (
            check_interval if check_interval is not None else options["check_interval"]
        )

    def is_running(self) -> bool:
        return self._running

    def set_check_interval(self, check_interval: float) -> None:
        """Seconds to wait between checks whether the process has exited."""
        self._check_interval = check_interval

    def get_check_interval(self) -> float:
        return self._check_interval

    def launch_process(
        self, command: Union[str, Sequence[str]], killable: bool = True
    ) -> int:
        """Run `command` and return its exit code.

        A string command is run through the shell. If `killable` is false, SIGINT and
        SIGTERM are ignored while the process runs, so that, for example, Ctrl+C only
        reaches the child process."""
        if killable:
            return self._run(command)
        with _ignore_termination_signals():
            return self._run(command)

    def _run(self, command: Union[str, Sequence[str]]) -> int:
        log.debug("launching process: %s", command)
        self._running = True
        try:
            process = subprocess.Popen(command, shell=isinstance(command, str))
            while process.poll() is None:
                time.sleep(self._check_interval)
        finally:
            self._running = False
        log.debug("process exited with code %d", process.returncode)
        return process.returncode
