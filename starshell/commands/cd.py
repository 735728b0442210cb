"""CD command implementation for changing the session directory."""

from typing import List

from ..command_proxy import Command, CommandResult, ShellContext


class CDCommand(Command):
    """Change the session's current directory."""

    usage = "cd <dir>"

    def validate_args(self, args: List[str]) -> bool:
        return len(args) == 1

    def execute(self, args: List[str], context: ShellContext) -> CommandResult:
        try:
            new_dir = context.session.change_directory(args[0])
        except OSError as e:
            return CommandResult.error(f"Failed to change directory: {e}")
        return CommandResult.output(f"Changed directory to {new_dir}")

    def get_help(self) -> str:
        return """Change directory:
  cd <dir>             - Relative paths resolve against the current directory

Examples:
  cd ..
  cd ~/projects"""
