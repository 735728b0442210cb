"""HTTP collaborators: streaming downloads and GitHub release lookups."""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import aiohttp

GITHUB_API_URL = "https://api.github.com"
CHUNK_SIZE = 64 * 1024


async def download_file(
    url: str,
    destination: Path,
    session: Optional[aiohttp.ClientSession] = None,
) -> int:
    """Stream ``url`` into ``destination`` and return the number of bytes written.

    Non-2xx responses raise ``aiohttp.ClientResponseError`` before the file is
    opened. A failure mid-transfer leaves the partial file in place.
    """
    if session is None:
        async with aiohttp.ClientSession() as owned:
            return await download_file(url, destination, owned)

    written = 0
    async with session.get(url) as response:
        response.raise_for_status()
        with open(destination, "wb") as f:
            async for chunk in response.content.iter_chunked(CHUNK_SIZE):
                f.write(chunk)
                written += len(chunk)
    return written


class GitHubReleaseClient:
    """Minimal client for the GitHub releases API."""

    def __init__(self, api_url: str = GITHUB_API_URL, token: Optional[str] = None):
        self.api_url = api_url.rstrip("/")
        self.token = token if token is not None else os.environ.get("GITHUB_TOKEN")

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": "starshell",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def latest_release(self, owner: str, repo: str) -> Dict[str, Any]:
        """Fetch the latest published release of ``owner/repo``."""
        url = f"{self.api_url}/repos/{owner}/{repo}/releases/latest"
        async with aiohttp.ClientSession(headers=self._headers()) as session:
            async with session.get(url) as response:
                response.raise_for_status()
                return await response.json()

    async def latest_release_assets(self, owner: str, repo: str) -> List[Dict[str, Any]]:
        release = await self.latest_release(owner, repo)
        return list(release.get("assets") or [])

    async def download(self, url: str, destination: Path) -> int:
        async with aiohttp.ClientSession(headers={"User-Agent": "starshell"}) as session:
            return await download_file(url, destination, session)
