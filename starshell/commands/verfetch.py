"""Verfetch command implementation for the system information report."""

from typing import List

from .. import sysinfo
from ..command_proxy import Command, CommandResult, ShellContext


class VerfetchCommand(Command):
    """Render a fixed system report, tolerating failed probes."""

    usage = "verfetch"

    def execute(self, args: List[str], context: ShellContext) -> CommandResult:
        disk_root = context.session.cwd.anchor or "/"
        report = sysinfo.collect_report(disk_root)
        width = max(len(label) for label, _ in report)
        lines = [f"{label + ':':<{width + 1}} {value}" for label, value in report]
        return CommandResult.text("\n".join(lines))

    def get_help(self) -> str:
        return "Show OS, kernel, CPU, memory and disk information."
