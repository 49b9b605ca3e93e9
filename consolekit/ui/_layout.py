from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Tuple

from ._alignment import LabelAlignment
from ._component import AlignableComponent, Component

if TYPE_CHECKING:
    from .._io import IO

log = logging.getLogger(__name__)

INDENTATION_STEP = 2


class InvalidLayoutState(Exception):
    """Raised when a layout is used in a way that would produce broken output, like
    ending a block that was never started."""


class BlockLayout(Component):
    """Renders components in indented blocks.

    A layout goes through two phases. While accumulating, components are added with
    :meth:`add`, and :meth:`begin_block` / :meth:`end_block` control how far they
    are indented. :meth:`render` then drains the layout: all pending components are
    written to the IO and the layout is left empty, ready to accumulate again.

    Labeled paragraphs added to the same layout share a text offset, so their texts
    line up. Nested layouts align their own paragraphs independently.
    The offset is computed per render: paragraphs that were already rendered no
    longer widen it, so each render aligns only the components added since the
    previous one.

    .. code-block:: python

        layout = BlockLayout()
        layout.add(Paragraph("[b]OPTIONS[/b]"))
        layout.begin_block()
        layout.add(LabeledParagraph("--verbose", "Print more output."))
        layout.add(LabeledParagraph("-q", "Print nothing."))
        layout.end_block()
        layout.render(io)
    """

    def __init__(self) -> None:
        self._current_indentation = 0
        self._components: List[Tuple[Component, int]] = []
        self._alignment = LabelAlignment()

    def add(self, component: Component) -> BlockLayout:
        """Add a component at the current indentation. Returns the layout to allow
        chaining."""
        self._components.append((component, self._current_indentation))
        if isinstance(component, AlignableComponent):
            self._alignment.add(component, self._current_indentation)
            component.set_alignment(self._alignment)
        return self

    def begin_block(self) -> BlockLayout:
        """Start an indented block."""
        self._current_indentation += INDENTATION_STEP
        return self

    def end_block(self) -> BlockLayout:
        """End the current indented block.

        Raises:
            InvalidLayoutState: If no block is open.
        """
        if self._current_indentation < INDENTATION_STEP:
            raise InvalidLayoutState(
                "end_block() called without a matching begin_block()."
            )
        self._current_indentation -= INDENTATION_STEP
        return self

    @property
    def current_indentation(self) -> int:
        return self._current_indentation

    def is_empty(self) -> bool:
        return len(self._components) == 0

    def render(self, io: IO, indentation: int = 0) -> None:
        """Render and remove all pending components.

        The layout is emptied even when rendering a component fails."""
        log.debug("rendering %d components", len(self._components))
        components = self._components
        self._components = []
        try:
            self._alignment.align(io, indentation)
            for component, component_indentation in components:
                component.render(io, component_indentation + indentation)
        finally:
            self._alignment.clear()
