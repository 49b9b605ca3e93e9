import argparse
import pathlib

from consolekit import BufferedIO
from consolekit.ui import (
    AbstractHelp,
    BlockLayout,
    LabeledParagraph,
    Paragraph,
    ParserHelp,
)
from consolekit.ui._help import format_value


def _row(label: str, text: str, offset: int) -> str:
    return f"{label:<{offset}}{text}\n"


def test_parser_help(io: BufferedIO) -> None:
    parser = argparse.ArgumentParser(
        prog="pkg", description="Package manager.", epilog="Have fun.", add_help=False
    )
    parser.add_argument("files", nargs="*", help="Files.")
    parser.add_argument("-v", "--verbose", action="store_true", help="More output.")
    parser.add_argument("--tag", action="append", default=[], help="Tags.")
    parser.add_argument("--name", default="x", help="Name.")

    ParserHelp(parser).render(io)

    assert io.fetch_output() == (
        "Package manager.\n"
        "\n"
        "USAGE\n"
        "  pkg [<files1>] ... [<filesN>] [--verbose] [--tag <TAG>] [--name <NAME>]\n"
        "\n"
        "ARGUMENTS\n"
        + _row("  <files>", "Files.", 18)
        + "\n"
        "OPTIONS\n"
        + _row("  --verbose (-v)", "More output.", 18)
        + _row("  --tag", "Tags. (multiple values allowed)", 18)
        + _row("  --name", 'Name. (default: "x")', 18)
        + "\n"
        "Have fun.\n"
    )


def test_parser_help_with_subcommands(io: BufferedIO) -> None:
    parser = argparse.ArgumentParser(prog="git", add_help=False)
    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("commit", help="Record changes.", aliases=["ci"])
    subparsers.add_parser("push", help="Update remote.")

    ParserHelp(parser).render(io)

    assert io.fetch_output() == (
        "USAGE\n"
        "  git <command>\n"
        "\n"
        "COMMANDS\n"
        "  commit  Record changes.\n"
        "  push    Update remote.\n"
        "\n"
    )


def test_synopsis_of_positional_arguments(io: BufferedIO) -> None:
    parser = argparse.ArgumentParser(prog="cp", add_help=False)
    parser.add_argument("src", nargs="+")
    parser.add_argument("dst", nargs="?", metavar="target")

    layout = BlockLayout()
    page = ParserHelp(parser, name="copy")
    page.render_synopsis(layout, parser._actions)
    layout.render(io)

    assert io.fetch_output() == "copy <src1> ... [<srcN>] [<target>]\n"


def test_suppressed_arguments_are_hidden(io: BufferedIO) -> None:
    parser = argparse.ArgumentParser(prog="tool", add_help=False)
    parser.add_argument("--secret", help=argparse.SUPPRESS)
    parser.add_argument("--public", help="Visible.")

    ParserHelp(parser).render(io)

    output = io.fetch_output()
    assert "--public" in output
    assert "--secret" not in output


def test_help_text_is_not_interpreted_as_markup(io: BufferedIO) -> None:
    parser = argparse.ArgumentParser(prog="tool", add_help=False)
    parser.add_argument("--style", help="Either [b] or [u].")

    ParserHelp(parser).render(io)

    assert "Either [b] or [u]." in io.fetch_output()


def test_help_can_be_indented(io: BufferedIO) -> None:
    parser = argparse.ArgumentParser(prog="tool", add_help=False)
    ParserHelp(parser).render(io, 4)
    assert io.fetch_output() == "    USAGE\n      tool\n\n"


def test_custom_help_page(io: BufferedIO) -> None:
    class ExampleHelp(AbstractHelp):
        def render_help(self, layout: BlockLayout) -> None:
            layout.add(Paragraph("Example"))
            self.render_section(
                layout,
                "ENTRIES",
                [LabeledParagraph("a", "first"), LabeledParagraph("bcd", "second")],
            )

    ExampleHelp().render(io)
    assert io.fetch_output() == (
        "Example\nENTRIES\n  a    first\n  bcd  second\n\n"
    )


def test_format_value() -> None:
    assert format_value(3) == "3"
    assert format_value("x") == '"x"'
    assert format_value([1, 2]) == "[1, 2]"
    assert format_value(None) == "null"
    assert format_value(pathlib.PurePosixPath("/tmp")) == "/tmp"


def test_synopsis_of_options_separates_values_with_a_space(io: BufferedIO) -> None:
    parser = argparse.ArgumentParser(prog="ls", add_help=False)
    parser.add_argument("--sort", help="Sort order.")

    layout = BlockLayout()
    ParserHelp(parser).render_synopsis(layout, parser._actions)
    layout.render(io)

    output = io.fetch_output()
    assert output == "ls [--sort <SORT>]\n"
    assert output.isascii()
