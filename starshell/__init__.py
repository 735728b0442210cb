"""Star Shell - an interactive command-line shell with built-in commands.

Lines typed at the prompt are resolved against a small table of built-ins
(ls, cd, wget, verfetch, ip, pkg, help, exit). Anything else is handed to
the host operating system's shell, run from the session's current directory.

Prompt, startup commands and colors come from config.json and themes/*.json
next to where the shell is started.
"""

__version__ = "0.9"
IS_BETA = True
BUILD_INFO = "beta 1"

from .command_proxy import CommandProxy, CommandResult, ShellContext
from .config import ShellConfig, Theme, load_configuration
from .installer import PackageInstaller
from .session import SessionState

__all__ = [
    "CommandProxy",
    "CommandResult",
    "ShellContext",
    "ShellConfig",
    "Theme",
    "load_configuration",
    "PackageInstaller",
    "SessionState",
]
