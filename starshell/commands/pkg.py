"""Pkg command implementation for installing GitHub release artifacts."""

import asyncio
from typing import List

from ..command_proxy import Command, CommandResult, ShellContext
from ..installer import InstallError, PackageInstaller, parse_repository


class PkgCommand(Command):
    """Download the latest release archive of a GitHub repository."""

    usage = "pkg install <user/repo>"

    def execute(self, args: List[str], context: ShellContext) -> CommandResult:
        if len(args) != 2:
            return CommandResult.error(
                "pkg command requires two arguments: install user/repo"
            )
        if args[0].lower() != "install":
            return CommandResult.error(f"Unknown pkg command: {args[0]}")

        repository = parse_repository(args[1])
        if repository is None:
            return CommandResult.error(
                "Invalid repository format. It should be user/repo"
            )

        installer = PackageInstaller(context.downloads_dir)
        try:
            result = asyncio.run(installer.install(*repository))
        except InstallError as e:
            return CommandResult.error(f"Failed to install: {e}")

        if result.cached:
            return CommandResult.output(
                f"{result.asset.name} already present at {result.path}\n"
                "Package installation complete"
            )
        return CommandResult.output(
            f"Downloaded {result.asset.name} to {result.path}\n"
            "Package installation complete"
        )

    def get_help(self) -> str:
        return """Install a package from GitHub:
  pkg install <user/repo>  - Download the latest .tar.gz or .zip release asset

The archive is saved in downloads/ and is not unpacked. An asset that is
already downloaded is not fetched again."""
