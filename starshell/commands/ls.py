"""LS command implementation for listing the session directory."""

import os
from typing import List

from ..command_proxy import Command, CommandResult, ShellContext


class LSCommand(Command):
    """List directory entries without shelling out."""

    usage = "ls [path]"

    def execute(self, args: List[str], context: ShellContext) -> CommandResult:
        """List the session directory, or a path relative to it."""
        # Flags are accepted for familiarity but have no effect.
        paths = [arg for arg in args if not arg.startswith("-")]
        if len(paths) > 1:
            return CommandResult.error("ls accepts at most one path")

        target = context.session.resolve(paths[0]) if paths else context.session.cwd

        try:
            names = sorted(entry.name for entry in os.scandir(target))
        except OSError as e:
            return CommandResult.error(f"Error: {e}")

        return CommandResult.text("\n".join(names))

    def get_help(self) -> str:
        """Get help text for the ls command."""
        return """List directory contents:
  ls                   - List the current directory
  ls <path>            - List a directory relative to the current one

Examples:
  ls
  ls ..
  ls downloads"""
