"""Unit tests for the presentation adapter."""

import io

import pytest
from rich.console import Console

from starshell.ui import DEFAULT_COLOR, get_renderer, resolve_color


class TestResolveColor:
    @pytest.mark.parametrize(
        "spec, expected",
        [
            ("red", "red"),
            ("Cyan", "cyan"),
            (" BLUE ", "blue"),
            ("#FF8800", "#ff8800"),
            ("ff8800", "#ff8800"),
            ("#abc", "#aabbcc"),
        ],
    )
    def test_known_specs(self, spec, expected):
        assert resolve_color(spec) == expected

    @pytest.mark.parametrize("spec", ["", "chartreuse", "#12345", "#zzzzzz", None])
    def test_unknown_specs_fall_back(self, spec):
        assert resolve_color(spec) == DEFAULT_COLOR


class TestRenderer:
    def test_prints_colored_text(self):
        buffer = io.StringIO()
        target = Console(file=buffer, force_terminal=True, color_system="truecolor")

        get_renderer("#ff0000", target).print("alert")

        output = buffer.getvalue()
        assert "alert" in output
        assert "\x1b[" in output

    def test_markup_is_not_interpreted(self):
        buffer = io.StringIO()
        target = Console(file=buffer, color_system=None)

        get_renderer("green", target).print("[bold]literal[/bold]")

        assert buffer.getvalue() == "[bold]literal[/bold]\n"

    def test_same_spec_same_style(self):
        assert get_renderer("red").style == get_renderer("RED").style
