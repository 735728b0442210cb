"""Test configuration for pytest."""

import io
import shutil
import tempfile
from pathlib import Path

import pytest
from rich.console import Console

from starshell.command_proxy import CommandProxy, ShellContext
from starshell.config import DEFAULT_THEMES, ShellConfig
from starshell.session import SessionState


class FakeReleaseClient:
    """Release client double that records lookups and transfers."""

    def __init__(self, asset_names, payload=b"archive-bytes"):
        self.asset_names = list(asset_names)
        self.payload = payload
        self.lookups = []
        self.downloads = []
        self.lookup_error = None
        self.download_error = None

    async def latest_release_assets(self, owner, repo):
        self.lookups.append((owner, repo))
        if self.lookup_error is not None:
            raise self.lookup_error
        return [
            {"name": name, "browser_download_url": f"https://example.test/{name}"}
            for name in self.asset_names
        ]

    async def download(self, url, destination):
        self.downloads.append((url, destination))
        if self.download_error is not None:
            raise self.download_error
        destination.write_bytes(self.payload)
        return len(self.payload)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp()).resolve()
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def sample_config():
    """Create a sample configuration for testing."""
    return ShellConfig(prompt=">", initial_commands=[], theme="dark", wget_enabled=True)


@pytest.fixture
def sample_theme():
    return DEFAULT_THEMES["dark"]


@pytest.fixture
def session(temp_dir):
    work = temp_dir / "work"
    work.mkdir()
    return SessionState(cwd=work)


@pytest.fixture
def context(sample_config, sample_theme, session, temp_dir):
    return ShellContext(
        config=sample_config, theme=sample_theme, session=session, home=temp_dir
    )


@pytest.fixture
def record_console():
    """Console writing into a buffer instead of the terminal."""
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def proxy(context, record_console):
    return CommandProxy(context, console=record_console)


@pytest.fixture
def release_client():
    """Factory for fake release clients."""
    return FakeReleaseClient


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Keep STARSHELL_* variables from the developer's shell out of tests."""
    import os

    for key in list(os.environ):
        if key.startswith("STARSHELL_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    yield
