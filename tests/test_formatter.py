from consolekit import (
    AnsiFormatter,
    NullFormatter,
    PlainFormatter,
    Style,
    StyleSet,
    display_width,
)


def test_plain_formatter_removes_tags() -> None:
    formatter = PlainFormatter()
    assert formatter.format("[b]Name:[/b] [c1]value[/c1]") == "Name: value"
    assert formatter.remove_format("[error]fatal:[/error] oops") == "fatal: oops"


def test_escaped_brackets_are_kept() -> None:
    assert PlainFormatter().format(r"\[b] is literal") == "[b] is literal"


def test_null_formatter_keeps_markup() -> None:
    formatter = NullFormatter()
    assert formatter.format("[b]x[/b]") == "[b]x[/b]"
    assert formatter.remove_format("[b]x[/b]") == "[b]x[/b]"


def test_ansi_formatter_bold() -> None:
    assert AnsiFormatter().format("[b]x[/b]") == "\x1b[1mx\x1b[0m"


def test_ansi_formatter_colors() -> None:
    formatter = AnsiFormatter()
    assert formatter.format("[c1]x[/c1]") == "\x1b[36mx\x1b[0m"
    assert formatter.format("[error]x[/error]") == "\x1b[37;41mx\x1b[0m"


def test_ansi_formatter_plain_text_is_untouched() -> None:
    assert AnsiFormatter().format("no markup here") == "no markup here"


def test_ansi_formatter_with_style_argument() -> None:
    formatter = AnsiFormatter()
    assert formatter.format("x", Style.no_tag().fg_red()) == "\x1b[31mx\x1b[0m"


def test_ansi_formatter_with_custom_style_set() -> None:
    formatter = AnsiFormatter(StyleSet([Style.for_tag("hot").fg_red()]))
    assert formatter.format("[hot]x[/hot]") == "\x1b[31mx\x1b[0m"
    assert formatter.remove_format("[hot]x[/hot]") == "x"


def test_display_width() -> None:
    assert display_width("abc") == 3
    assert display_width("") == 0
    # East asian wide characters take two cells.
    assert display_width("日本") == 4


def test_ansi_formatter_style_set_overrides_rich_style_names() -> None:
    formatter = AnsiFormatter(
        StyleSet([Style.for_tag("b").fg_red(), Style.for_tag("u").fg_green()])
    )
    assert formatter.format("[b]t[/b]") == "\x1b[31mt\x1b[0m"
    assert formatter.format("[u]t[/u]") == "\x1b[32mt\x1b[0m"


def test_ansi_formatter_keeps_rich_styles_outside_the_style_set() -> None:
    formatter = AnsiFormatter(StyleSet([Style.for_tag("hot").fg_red()]))
    assert formatter.format("[b]t[/b]") == "\x1b[1mt\x1b[0m"
    assert formatter.format("[green]t[/green]") == "\x1b[32mt\x1b[0m"
    assert formatter.format(r"\[hot] is literal") == "[hot] is literal"
