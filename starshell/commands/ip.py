"""IP command implementation for reporting the primary local address."""

import socket
from typing import List

from ..command_proxy import Command, CommandResult, ShellContext

PROBE_ADDRESS = ("8.8.8.8", 80)


def get_local_ip() -> str:
    """Address the OS would use to reach the internet.

    Connecting a UDP socket sends nothing; it only selects a route.
    """
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.connect(PROBE_ADDRESS)
        return sock.getsockname()[0]


class IPCommand(Command):
    """Print the main IP address."""

    usage = "ip"

    def execute(self, args: List[str], context: ShellContext) -> CommandResult:
        try:
            address = get_local_ip()
        except OSError as e:
            return CommandResult.error(f"Oops: {e}")
        return CommandResult.output(f"IP address: {address}")

    def get_help(self) -> str:
        return "Print the local IP address used for outbound traffic."
