"""Package installer: caches the latest GitHub release artifact locally."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional

from loguru import logger

from .net import GitHubReleaseClient

ARCHIVE_SUFFIXES = (".tar.gz", ".zip")


class InstallError(Exception):
    """Base class for package installation failures."""

    pass


class LookupFailed(InstallError):
    """The latest release could not be retrieved."""

    pass


class TransferFailed(InstallError):
    """The selected asset could not be downloaded or written."""

    pass


class NoMatchingAsset(InstallError):
    """The latest release has no .tar.gz or .zip asset."""

    pass


@dataclass(frozen=True)
class ReleaseAsset:
    """A downloadable artifact attached to a release."""

    name: str
    download_url: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ReleaseAsset":
        return cls(
            name=str(data.get("name") or ""),
            download_url=str(data.get("browser_download_url") or ""),
        )


@dataclass(frozen=True)
class InstallResult:
    """Outcome of a successful install."""

    asset: ReleaseAsset
    path: Path
    cached: bool


def select_asset(assets: Iterable[ReleaseAsset]) -> Optional[ReleaseAsset]:
    """Return the first asset, in listed order, with an archive suffix."""
    for asset in assets:
        if asset.name.endswith(ARCHIVE_SUFFIXES):
            return asset
    return None


def parse_repository(spec: str):
    """Split ``user/repo`` into its two non-empty parts, or return None."""
    parts = spec.split("/")
    if len(parts) != 2 or not all(parts):
        return None
    return parts[0], parts[1]


class PackageInstaller:
    """Downloads release artifacts into a fixed downloads directory."""

    def __init__(self, downloads_dir: Path, client: Optional[GitHubReleaseClient] = None):
        self.downloads_dir = Path(downloads_dir)
        self.client = client if client is not None else GitHubReleaseClient()

    def destination_for(self, asset: ReleaseAsset) -> Path:
        return self.downloads_dir / Path(asset.name).name

    async def install(self, owner: str, repo: str) -> InstallResult:
        """Fetch the latest release of ``owner/repo`` into the downloads cache.

        An artifact already present at its destination is not downloaded
        again, so installs are at-most-once per asset name.
        """
        try:
            raw_assets = await self.client.latest_release_assets(owner, repo)
        except Exception as e:
            raise LookupFailed(f"Failed to get latest release: {e}") from e

        asset = select_asset(ReleaseAsset.from_dict(a) for a in raw_assets)
        if asset is None:
            raise NoMatchingAsset(
                f"No .tar.gz or .zip asset in the latest release of {owner}/{repo}"
            )

        destination = self.destination_for(asset)
        if destination.exists():
            logger.debug("{} already exists, skipping download", destination)
            return InstallResult(asset=asset, path=destination, cached=True)

        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            size = await self.client.download(asset.download_url, destination)
        except Exception as e:
            raise TransferFailed(f"Failed to download asset: {e}") from e

        logger.debug("Downloaded {} ({} bytes) to {}", asset.name, size, destination)
        return InstallResult(asset=asset, path=destination, cached=False)
