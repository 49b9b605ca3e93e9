from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .._io import IO
    from ._alignment import LabelAlignment


class Component(abc.ABC):
    """A UI component that can be rendered on the IO."""

    @abc.abstractmethod
    def render(self, io: IO, indentation: int = 0) -> None:
        """Render the component, indented by `indentation` spaces."""


class AlignableComponent(Component):
    """A component whose text can be aligned with the text of its siblings.

    Layouts hand each alignable child the :class:`LabelAlignment` of the block it
    belongs to; the child reads the shared text offset when it is rendered."""

    @property
    @abc.abstractmethod
    def label(self) -> str: ...

    @property
    @abc.abstractmethod
    def padding(self) -> int: ...

    @abc.abstractmethod
    def is_aligned(self) -> bool: ...

    @abc.abstractmethod
    def set_alignment(self, alignment: LabelAlignment) -> None: ...
