"""Minimal command dispatch on top of `argparse`.

An :class:`Application` maps command names to handlers. The first token of the
arguments selects the command; the remaining tokens are parsed by an
:class:`argparse.ArgumentParser` that the command configures itself.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import warnings
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from rich.markup import escape

from ._args import ArgvArgs, RawArgs, find_similar_names
from ._io import IO, ConsoleIO
from .ui import BlockLayout, EmptyLine, LabeledParagraph, Paragraph, ParserHelp

log = logging.getLogger(__name__)

Handler = Callable[[argparse.Namespace, IO], Optional[int]]


class CommandNotFoundError(Exception):
    """Raised when no command is registered under a name."""

    def __init__(self, name: str, suggestions: Tuple[str, ...] = ()) -> None:
        self.name = name
        self.suggestions = suggestions
        message = f'The command "{name}" is not defined.'
        if len(suggestions) > 0:
            message += f" Did you mean one of these? {', '.join(suggestions)}"
        super().__init__(message)


@dataclasses.dataclass(frozen=True)
class Command:
    """A named command.

    Args:
        name: Name used to invoke the command.
        handler: Called with the parsed arguments and the IO. Returns the exit
            code; `None` is treated as 0.
        description: One line summary, shown in help output.
        aliases: Alternative names.
        configure: Called with the command's parser to add arguments to it.
    """

    name: str
    handler: Handler
    description: str = ""
    aliases: Tuple[str, ...] = ()
    configure: Optional[Callable[[argparse.ArgumentParser], None]] = None

    def make_parser(self, prog: str) -> argparse.ArgumentParser:
        parser = _NoExitArgumentParser(
            prog=f"{prog} {self.name}",
            description=self.description or None,
            add_help=False,
        )
        parser.add_argument(
            "-h", "--help", action="store_true", help="Show this help message."
        )
        if self.configure is not None:
            self.configure(parser)
        return parser


class _ArgumentError(Exception):
    pass


class _NoExitArgumentParser(argparse.ArgumentParser):
    # argparse prints and exits on errors; we want to render them ourselves.
    def error(self, message: str):  # type: ignore
        raise _ArgumentError(message)


def _wants_help(tokens: Sequence[str]) -> bool:
    for token in tokens:
        if token == "--":
            return False
        if token in ("-h", "--help"):
            return True
    return False


class Application:
    """A console application made of commands.

    .. code-block:: python

        app = Application("todo", version="1.0.0")
        app.add_command(Command("add", add_item, "Add an item.", configure=...))
        sys.exit(app.run())
    """

    def __init__(
        self, name: str, version: Optional[str] = None, description: str = ""
    ) -> None:
        self.name = name
        self.version = version
        self.description = description
        self._commands: Dict[str, Command] = {}
        self._command_from_alias: Dict[str, Command] = {}

    def add_command(self, command: Command) -> Application:
        if command.name in self._commands:
            warnings.warn(
                f'Command "{command.name}" is defined more than once; the last'
                " definition is used."
            )
        self._commands[command.name] = command
        for alias in command.aliases:
            self._command_from_alias[alias] = command
        return self

    @property
    def commands(self) -> List[Command]:
        return list(self._commands.values())

    def get_command(self, name: str) -> Command:
        if name in self._commands:
            return self._commands[name]
        if name in self._command_from_alias:
            return self._command_from_alias[name]
        all_names = list(self._commands) + list(self._command_from_alias)
        raise CommandNotFoundError(
            name,
            tuple(
                find_similar_names(
                    name, all_names, identity=lambda n: self.get_command(n).name
                )
            ),
        )

    def run(
        self,
        args: Union[RawArgs, Sequence[str], None] = None,
        io: Optional[IO] = None,
    ) -> int:
        """Dispatch `args` to a command and return its exit code."""
        if args is None:
            args = ArgvArgs()
        tokens = args.tokens if isinstance(args, RawArgs) else list(args)
        if io is None:
            io = ConsoleIO()

        if len(tokens) == 0 or tokens[0] in ("-h", "--help"):
            self.render_help(io)
            return 0
        if tokens[0] == "--version":
            io.write_line(f"{self.name} version {self.version or 'UNKNOWN'}")
            return 0
        if tokens[0] == "help":
            if len(tokens) == 1:
                self.render_help(io)
                return 0
            tokens = [tokens[1], "--help"]

        try:
            command = self.get_command(tokens[0])
        except CommandNotFoundError as e:
            io.error_line(f"[error]fatal:[/error] {escape(str(e))}")
            return 1

        log.debug("dispatching %s to command %s", tokens[1:], command.name)
        parser = command.make_parser(self.name)
        # Checked before parsing, so that missing required arguments don't hide the
        # help page.
        if _wants_help(tokens[1:]):
            ParserHelp(parser).render(io)
            return 0
        try:
            namespace = parser.parse_args(tokens[1:])
        except _ArgumentError as e:
            io.error_line(f"[error]fatal:[/error] {escape(str(e))}")
            return 1

        exit_code = command.handler(namespace, io)
        return 0 if exit_code is None else exit_code

    def render_help(self, io: IO) -> None:
        layout = BlockLayout()
        title = escape(self.name)
        if self.version is not None:
            title += f" version [c1]{escape(self.version)}[/c1]"
        layout.add(Paragraph(title))
        layout.add(EmptyLine())
        if self.description:
            layout.add(Paragraph(escape(self.description)))
            layout.add(EmptyLine())

        layout.add(Paragraph("[b]USAGE[/b]"))
        layout.begin_block()
        layout.add(
            LabeledParagraph(
                f"[u]{escape(self.name)}[/u]",
                "<command> [<arg1>] ... [<argN>]",
                padding=1,
                aligned=False,
            )
        )
        layout.end_block()
        layout.add(EmptyLine())

        if len(self._commands) > 0:
            layout.add(Paragraph("[b]AVAILABLE COMMANDS[/b]"))
            layout.begin_block()
            for command in sorted(self._commands.values(), key=lambda c: c.name):
                layout.add(
                    LabeledParagraph(
                        f"[c1]{escape(command.name)}[/c1]", escape(command.description)
                    )
                )
            layout.end_block()
            layout.add(EmptyLine())

        layout.add(
            Paragraph(
                f"See '{escape(self.name)} help <command>' for more information on a"
                " specific command."
            )
        )
        layout.render(io)
