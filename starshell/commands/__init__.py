"""Built-in command implementations."""

from .cd import CDCommand
from .help import HelpCommand
from .ip import IPCommand
from .ls import LSCommand
from .now import NowCommand
from .pkg import PkgCommand
from .verfetch import VerfetchCommand
from .wget import WgetCommand

__all__ = [
    "CDCommand",
    "HelpCommand",
    "IPCommand",
    "LSCommand",
    "NowCommand",
    "PkgCommand",
    "VerfetchCommand",
    "WgetCommand",
]
