"""Help pages rendered with block layouts.

Parsing itself is left to `argparse`; this module only reads the actions registered
on a parser and lays them out. Like any argparse help formatter, that means touching
a few private argparse attributes.
"""

from __future__ import annotations

import abc
import argparse
import json
from typing import TYPE_CHECKING, Any, List, Optional, Sequence, Tuple

from rich.markup import escape

from .. import _strings
from ._layout import BlockLayout
from ._component import Component
from ._paragraph import EmptyLine, LabeledParagraph, Paragraph

if TYPE_CHECKING:
    from .._io import IO


def format_value(value: Any) -> str:
    """Format a default value for display."""
    try:
        return json.dumps(value, ensure_ascii=False)
    except TypeError:
        return str(value)


class AbstractHelp(Component):
    """Base class for help pages. Subclasses fill a layout in :meth:`render_help`."""

    def render(self, io: IO, indentation: int = 0) -> None:
        layout = BlockLayout()
        self.render_help(layout)
        layout.render(io, indentation)

    @abc.abstractmethod
    def render_help(self, layout: BlockLayout) -> None: ...

    def render_section(
        self, layout: BlockLayout, title: str, components: Sequence[Component]
    ) -> None:
        layout.add(Paragraph(f"[b]{title}[/b]"))
        layout.begin_block()
        for component in components:
            layout.add(component)
        layout.end_block()
        layout.add(EmptyLine())


def _is_positional(action: argparse.Action) -> bool:
    return len(action.option_strings) == 0


def _takes_value(action: argparse.Action) -> bool:
    return action.nargs != 0


def _is_multi_valued(action: argparse.Action) -> bool:
    return action.nargs in ("*", "+", argparse.REMAINDER) or isinstance(
        action, argparse._AppendAction
    )


def _has_default(action: argparse.Action) -> bool:
    default = action.default
    if default is None or default is argparse.SUPPRESS:
        return False
    if isinstance(default, (list, tuple)) and len(default) == 0:
        return False
    return True


def _value_name(action: argparse.Action) -> str:
    if isinstance(action.metavar, str):
        return action.metavar
    if isinstance(action.metavar, tuple) and len(action.metavar) > 0:
        return " ".join(action.metavar)
    return action.dest if _is_positional(action) else action.dest.upper()


def _preferred_names(action: argparse.Action) -> Tuple[str, Optional[str]]:
    long_names = [o for o in action.option_strings if o.startswith("--")]
    short_names = [o for o in action.option_strings if not o.startswith("--")]
    if len(long_names) > 0:
        return long_names[0], short_names[0] if len(short_names) > 0 else None
    return short_names[0], None


class ParserHelp(AbstractHelp):
    """Help page for an :class:`argparse.ArgumentParser`.

    Shows a usage synopsis, the positional arguments, the options and, if the parser
    has subparsers, the available commands."""

    def __init__(
        self, parser: argparse.ArgumentParser, name: Optional[str] = None
    ) -> None:
        self.parser = parser
        self.name = name if name is not None else parser.prog

    def _visible_actions(self) -> List[argparse.Action]:
        return [
            action
            for action in self.parser._actions
            if action.help is not argparse.SUPPRESS
        ]

    def render_help(self, layout: BlockLayout) -> None:
        actions = self._visible_actions()
        arguments = [
            a
            for a in actions
            if _is_positional(a) and not isinstance(a, argparse._SubParsersAction)
        ]
        options = [a for a in actions if not _is_positional(a)]
        subparsers = [a for a in actions if isinstance(a, argparse._SubParsersAction)]

        if self.parser.description:
            layout.add(
                Paragraph(escape(_strings.dedent_description(self.parser.description)))
            )
            layout.add(EmptyLine())

        layout.add(Paragraph("[b]USAGE[/b]"))
        layout.begin_block()
        self.render_synopsis(layout, actions)
        layout.end_block()
        layout.add(EmptyLine())

        if len(arguments) > 0:
            self.render_section(
                layout, "ARGUMENTS", [self.render_argument(a) for a in arguments]
            )
        if len(options) > 0:
            self.render_section(
                layout, "OPTIONS", [self.render_option(a) for a in options]
            )
        for subparsers_action in subparsers:
            self.render_section(
                layout, "COMMANDS", self.render_commands(subparsers_action)
            )

        if self.parser.epilog:
            layout.add(Paragraph(escape(self.parser.epilog)))

    def render_synopsis(
        self, layout: BlockLayout, actions: Sequence[argparse.Action]
    ) -> None:
        argument_parts: List[str] = []
        for action in actions:
            if isinstance(action, argparse._SubParsersAction):
                argument_parts.append("<command>")
            elif _is_positional(action):
                value_name = _value_name(action)
                multi_valued = _is_multi_valued(action)
                first = f"<{value_name}1>" if multi_valued else f"<{value_name}>"
                if action.nargs in ("?", "*"):
                    first = f"[{first}]"
                argument_parts.append(first)
                if multi_valued:
                    argument_parts.append(f"... [<{value_name}N>]")
            else:
                name, _ = _preferred_names(action)
                if _takes_value(action):
                    part = f"[{name} <{_value_name(action)}>]"
                else:
                    part = f"[{name}]"
                argument_parts.append(part)

        layout.add(
            LabeledParagraph(
                f"[u]{escape(self.name)}[/u]",
                escape(" ".join(argument_parts)),
                padding=1,
                aligned=False,
            )
        )

    def render_argument(self, action: argparse.Action) -> LabeledParagraph:
        description = escape(action.help or "")
        if _has_default(action):
            description += f" [b](default: {escape(format_value(action.default))})[/b]"
        return LabeledParagraph(
            f"[c1]<{escape(_value_name(action))}>[/c1]", description.strip()
        )

    def render_option(self, action: argparse.Action) -> LabeledParagraph:
        preferred, alternative = _preferred_names(action)
        label = f"[c1]{escape(preferred)}[/c1]"
        if alternative is not None:
            label += f" ({escape(alternative)})"

        description = escape(action.help or "")
        if _takes_value(action) and _has_default(action):
            description += f" [b](default: {escape(format_value(action.default))})[/b]"
        if _is_multi_valued(action):
            description += " [b](multiple values allowed)[/b]"
        return LabeledParagraph(label, description.strip())

    def render_commands(
        self, action: argparse._SubParsersAction
    ) -> List[LabeledParagraph]:
        help_from_name = {
            choice_action.dest: choice_action.help or ""
            for choice_action in action._choices_actions
        }
        out: List[LabeledParagraph] = []
        seen: List[argparse.ArgumentParser] = []
        for name, subparser in action.choices.items():
            # Aliases map to the same parser; only list each command once.
            if any(subparser is s for s in seen):
                continue
            seen.append(subparser)
            out.append(
                LabeledParagraph(
                    f"[c1]{escape(name)}[/c1]", escape(help_from_name.get(name, ""))
                )
            )
        return out
