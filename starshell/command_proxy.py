"""Command proxy that routes input lines to built-ins or the host shell."""

import subprocess
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

from loguru import logger
from rich.console import Console

from .config import DOWNLOADS_DIR_NAME, ShellConfig, Theme
from .session import SessionState
from .ui import Renderer, get_renderer


class ResultKind(str, Enum):
    """Which theme color a result is rendered with."""

    TEXT = "text"
    OUTPUT = "output"
    ERROR = "error"


@dataclass
class CommandResult:
    """Message produced by a command, rendered by the proxy."""

    message: str
    kind: ResultKind = ResultKind.OUTPUT

    @classmethod
    def text(cls, message: str) -> "CommandResult":
        return cls(message, ResultKind.TEXT)

    @classmethod
    def output(cls, message: str) -> "CommandResult":
        return cls(message, ResultKind.OUTPUT)

    @classmethod
    def error(cls, message: str) -> "CommandResult":
        return cls(message, ResultKind.ERROR)


@dataclass
class ShellContext:
    """Everything a command handler may read or mutate."""

    config: ShellConfig
    theme: Theme
    session: SessionState
    home: Path = field(default_factory=Path.cwd)

    @property
    def downloads_dir(self) -> Path:
        return self.home / DOWNLOADS_DIR_NAME


@dataclass
class ParsedCommand:
    """Transient parse result of one input line."""

    name: str
    args: List[str]


def parse_command_line(line: str) -> ParsedCommand:
    """Split a line on whitespace; a blank line yields an empty name."""
    parts = line.split()
    if not parts:
        return ParsedCommand(name="", args=[])
    return ParsedCommand(name=parts[0], args=parts[1:])


class Command(ABC):
    """Abstract base class for all built-in commands."""

    usage: str = ""

    @abstractmethod
    def execute(self, args: List[str], context: ShellContext) -> CommandResult:
        """Execute the command with given arguments."""
        pass

    @abstractmethod
    def get_help(self) -> str:
        """Get help text for this command."""
        pass

    def validate_args(self, args: List[str]) -> bool:
        """Validate command arguments. Override if needed."""
        return True


class CommandProxy:
    """Resolves each input line to a built-in or a host-shell passthrough."""

    def __init__(self, context: ShellContext, console: Optional[Console] = None):
        self.context = context
        self.console = console
        self.commands = self._register_commands()

    def renderer(self, kind: ResultKind) -> Renderer:
        theme = self.context.theme
        color = {
            ResultKind.TEXT: theme.text_color,
            ResultKind.OUTPUT: theme.output_color,
            ResultKind.ERROR: theme.error_color,
        }[kind]
        return get_renderer(color, self.console)

    def resolve(self, name: str) -> Optional[Command]:
        """Case-insensitive lookup in the built-in table."""
        return self.commands.get(name.lower())

    def execute(self, line: str) -> Optional[CommandResult]:
        """Run one input line and return its result without rendering it."""
        parsed = parse_command_line(line)

        if not parsed.name:
            return None

        handler = self.resolve(parsed.name)
        if handler is None:
            logger.debug("No built-in named {!r}, passing through", parsed.name)
            return self.passthrough(line)

        if not handler.validate_args(parsed.args):
            return CommandResult.error(f"Usage: {handler.usage}")

        try:
            return handler.execute(parsed.args, self.context)
        except Exception as e:
            logger.opt(exception=e).debug("Built-in {} raised", parsed.name)
            return CommandResult.error(f"Command execution error: {e}")

    def dispatch(self, line: str) -> Optional[CommandResult]:
        """Run one input line and render its result."""
        result = self.execute(line)
        if result is not None:
            self.render(result)
        return result

    def render(self, result: CommandResult) -> None:
        message = result.message.rstrip("\n")
        if message:
            self.renderer(result.kind).print(message)

    def passthrough(self, line: str) -> CommandResult:
        """Execute the unmodified line in the host shell from the session directory."""
        cwd = self.context.session.cwd
        logger.debug("Passthrough {!r} in {}", line, cwd)

        try:
            result = subprocess.run(
                line,
                shell=True,
                cwd=str(cwd),
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
            )
        except OSError as e:
            return CommandResult.error(f"Error: Invalid command! {e}")

        output = result.stdout or ""
        if result.returncode != 0:
            logger.debug("Passthrough exited with {}", result.returncode)
            message = f"Error: Invalid command! exit status {result.returncode}"
            if output.strip():
                message = f"{output.rstrip()}\n{message}"
            return CommandResult.error(message)

        return CommandResult.output(output)

    def _register_commands(self) -> Dict[str, Command]:
        """Register all available built-ins."""
        from .commands import (
            CDCommand,
            HelpCommand,
            IPCommand,
            LSCommand,
            NowCommand,
            PkgCommand,
            VerfetchCommand,
            WgetCommand,
        )

        commands: Dict[str, Command] = {
            "exit": ExitCommand(),
            "wget": WgetCommand(),
            "ls": LSCommand(),
            "cd": CDCommand(),
            "verfetch": VerfetchCommand(),
            "ip": IPCommand(),
            "pkg": PkgCommand(),
            "now": NowCommand(),
        }
        commands["help"] = HelpCommand(self)
        return commands

    def get_available_commands(self) -> List[str]:
        """Get list of available command names."""
        return sorted(self.commands.keys())

    def get_command_help(self, command: str) -> Optional[str]:
        """Get help for a specific command."""
        handler = self.resolve(command)
        if handler is not None:
            return handler.get_help()
        return None


class ExitCommand(Command):
    """Command to exit the shell."""

    usage = "exit"

    def execute(self, args: List[str], context: ShellContext) -> CommandResult:
        sys.exit(0)

    def get_help(self) -> str:
        return "Exit the shell."
