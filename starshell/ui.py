"""Shared UI helpers for console output."""

import re
from typing import Optional

from rich.console import Console
from rich.style import Style
from rich.text import Text

# Shared console instance so prompts, logs and command output coordinate correctly.
console = Console(highlight=False)

NAMED_COLORS = frozenset(
    ["black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"]
)
DEFAULT_COLOR = "white"

_HEX_COLOR = re.compile(r"^#?([0-9a-fA-F]{6}|[0-9a-fA-F]{3})$")


def resolve_color(color_spec: str) -> str:
    """Map a symbolic color name or hex triplet to a rich color string.

    Unknown names fall back to white.
    """
    spec = (color_spec or "").strip()
    if spec.lower() in NAMED_COLORS:
        return spec.lower()

    match = _HEX_COLOR.match(spec)
    if match:
        digits = match.group(1).lower()
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        return f"#{digits}"

    return DEFAULT_COLOR


class Renderer:
    """Prints text in a single color."""

    def __init__(self, color: str, target: Optional[Console] = None):
        self.color = color
        self.style = Style(color=color)
        self._console = target

    @property
    def console(self) -> Console:
        return self._console if self._console is not None else console

    def text(self, message: str) -> Text:
        return Text(message, style=self.style)

    def print(self, message: str, end: str = "\n") -> None:
        self.console.print(self.text(message), end=end, soft_wrap=True)

    def __repr__(self) -> str:
        return f"Renderer({self.color!r})"


def get_renderer(color_spec: str, target: Optional[Console] = None) -> Renderer:
    """Return a renderer for a color spec."""
    return Renderer(resolve_color(color_spec), target)
