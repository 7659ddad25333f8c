"""Tests for the Rich console factory."""

from folio.output.console import create_console, get_output, style_for_status


class TestConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console(no_color=True)
        console.print("hello")
        assert get_output(console) == "hello\n"

    def test_width(self) -> None:
        assert create_console(width=80).width == 80
        assert create_console().width == 120

    def test_status_styles(self) -> None:
        assert style_for_status("in-progress") == "folio.status.in-progress"
        assert style_for_status("unknown") == ""
