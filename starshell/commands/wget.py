"""Wget command implementation for downloading a URL into the current directory."""

import asyncio
import posixpath
from typing import List, Optional
from urllib.parse import unquote, urlparse

from ..command_proxy import Command, CommandResult, ShellContext
from ..net import download_file


def filename_from_url(url: str) -> Optional[str]:
    """Final path segment of a URL, or None if it has none."""
    path = unquote(urlparse(url).path).rstrip("/")
    name = posixpath.basename(path)
    if not name or name in (".", ".."):
        return None
    return name


class WgetCommand(Command):
    """Download a remote file."""

    usage = "wget <url>"

    def execute(self, args: List[str], context: ShellContext) -> CommandResult:
        if not context.config.wget_enabled:
            return CommandResult.error("wget command is disabled")
        if len(args) != 1:
            return CommandResult.error("wget command requires a URL")

        url = args[0]
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            return CommandResult.error(f"Unsupported URL: {url}")

        name = filename_from_url(url)
        if name is None:
            return CommandResult.error(f"Cannot determine a file name from {url}")

        destination = context.session.cwd / name
        try:
            size = asyncio.run(download_file(url, destination))
        except Exception as e:
            return CommandResult.error(f"Error: {e}")

        return CommandResult.text(f"Download completed! Saved {size} bytes to {destination}")

    def get_help(self) -> str:
        return """Download a file from the web:
  wget <url>           - Save the URL's last path segment in the current directory

Can be disabled with "wgetEnabled": false in config.json."""
