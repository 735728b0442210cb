"""Session state shared by command handlers."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union


@dataclass
class SessionState:
    """Current working directory of the shell session.

    The shell never changes the process working directory. Every handler that
    needs directory context reads ``cwd`` from here, and only
    ``change_directory`` writes it.
    """

    cwd: Path = field(default_factory=Path.cwd)

    def resolve(self, path: Union[str, Path]) -> Path:
        """Resolve a user-supplied path against the session directory."""
        candidate = Path(os.path.expanduser(str(path)))
        if not candidate.is_absolute():
            candidate = self.cwd / candidate
        return candidate

    def change_directory(self, target: Union[str, Path]) -> Path:
        """Validate and commit a new current directory.

        Raises FileNotFoundError, NotADirectoryError or PermissionError and
        leaves the session unchanged when ``target`` is not a reachable
        directory.
        """
        candidate = self.resolve(target)

        if not candidate.exists():
            raise FileNotFoundError(f"No such directory: {target}")
        if not candidate.is_dir():
            raise NotADirectoryError(f"Not a directory: {target}")
        if not os.access(candidate, os.X_OK):
            raise PermissionError(f"Permission denied: {target}")

        self.cwd = candidate.resolve()
        return self.cwd

    @classmethod
    def from_process(cls, start_dir: Optional[Path] = None) -> "SessionState":
        return cls(cwd=Path(start_dir).resolve() if start_dir else Path.cwd())
