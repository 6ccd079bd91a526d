"""Tests for the Rich console factory."""

from webgettext.output.console import GETTEXT_THEME, create_console, get_output


def test_renders_into_buffer() -> None:
    console = create_console()
    console.print("[wg.ok]OK[/]: done")
    assert get_output(console) == "OK: done\n"


def test_long_lines_are_not_wrapped() -> None:
    console = create_console(width=20)
    console.print("x" * 50)
    assert get_output(console) == "x" * 50 + "\n"


def test_theme_styles() -> None:
    assert {"wg.ok", "wg.error", "wg.op", "wg.key"} <= set(GETTEXT_THEME.styles)
