"""Help command implementation for showing available commands."""

from typing import TYPE_CHECKING, List

from ..command_proxy import Command, CommandResult, ShellContext

if TYPE_CHECKING:
    from ..command_proxy import CommandProxy

GENERAL_HELP = """Available commands:
  help [command]           - Show this help message, or help for one command
  exit                     - Exit the shell
  ls [path]                - List files in the current directory
  cd <dir>                 - Change directory
  wget <url>               - Download a file from the web
  verfetch                 - Fetch system version information
  ip                       - Print the main IP address
  now                      - Print the current time
  pkg install <user/repo>  - Install a package from GitHub

Anything else runs in the host shell from the current directory."""


class HelpCommand(Command):
    """Command to show help information."""

    usage = "help [command]"

    def __init__(self, proxy: "CommandProxy"):
        self.proxy = proxy

    def execute(self, args: List[str], context: ShellContext) -> CommandResult:
        """Show help information."""
        if args:
            return self._show_command_help(args[0])
        return CommandResult.text(GENERAL_HELP)

    def _show_command_help(self, command_name: str) -> CommandResult:
        command_help = self.proxy.get_command_help(command_name)
        if command_help is None:
            available = ", ".join(self.proxy.get_available_commands())
            return CommandResult.text(
                f"Unknown command: {command_name}\nAvailable commands: {available}"
            )
        return CommandResult.text(f"Help for {command_name.lower()}:\n\n{command_help}")

    def get_help(self) -> str:
        """Get help text for the help command."""
        return """Show help information:
  help                 - Show general help and all commands
  help <command>       - Show help for a specific command

Examples:
  help
  help pkg"""
