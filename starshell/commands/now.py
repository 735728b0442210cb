"""Now command implementation."""

from datetime import datetime
from typing import List

from ..command_proxy import Command, CommandResult, ShellContext


class NowCommand(Command):
    """Print the current local time."""

    usage = "now"

    def execute(self, args: List[str], context: ShellContext) -> CommandResult:
        return CommandResult.text(f"Current time: {datetime.now():%H:%M:%S}")

    def get_help(self) -> str:
        return "Print the current time."
