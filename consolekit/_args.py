"""Raw console arguments and name suggestions."""

from __future__ import annotations

import abc
import difflib
import shlex
import sys
from typing import Callable, Hashable, Iterable, List, Optional, Sequence, Tuple


class RawArgs(abc.ABC):
    """Unparsed console arguments, split into tokens."""

    @property
    @abc.abstractmethod
    def tokens(self) -> List[str]: ...

    def has_token(self, token: str) -> bool:
        return token in self.tokens

    def to_string(self) -> str:
        return shlex.join(self.tokens)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.tokens!r})"


class ArgvArgs(RawArgs):
    """Arguments from an argv list. The first entry, the program name, is dropped.

    `sys.argv` is used when `argv` is `None`."""

    def __init__(self, argv: Optional[Sequence[str]] = None) -> None:
        if argv is None:
            argv = sys.argv
        self.script_name = argv[0] if len(argv) > 0 else None
        self._tokens = list(argv[1:])

    @property
    def tokens(self) -> List[str]:
        return self._tokens


class StringArgs(RawArgs):
    """Arguments from a command line string, split with shell quoting rules.

    .. code-block:: python

        StringArgs('add --title "A B"').tokens == ["add", "--title", "A B"]
    """

    def __init__(self, text: str) -> None:
        self._tokens = shlex.split(text)

    @property
    def tokens(self) -> List[str]:
        return self._tokens


SIMILARITY_THRESHOLD = 0.7


def _similarity(name: str, candidate: str) -> float:
    if len(name) > 0 and name in candidate:
        return 0.9
    return difflib.SequenceMatcher(a=name, b=candidate).ratio()


def find_similar_names(
    name: str,
    names: Iterable[str],
    identity: Optional[Callable[[str], Hashable]] = None,
) -> List[str]:
    """Suggest names similar to a (probably mistyped) `name`, best match first.

    `identity` maps names to the object they refer to; when several names refer to
    the same object (aliases of one command, for instance), only the best scoring
    of them is suggested."""
    scored: List[Tuple[float, str]] = []
    for candidate in names:
        score = _similarity(name, candidate)
        if score >= SIMILARITY_THRESHOLD:
            scored.append((score, candidate))

    # Sort scores greatest to least; ties are broken alphabetically.
    scored.sort(key=lambda x: (-x[0], x[1]))

    out: List[str] = []
    seen = set()
    for _, candidate in scored:
        key = identity(candidate) if identity is not None else candidate
        if key in seen:
            continue
        seen.add(key)
        out.append(candidate)
    return out
