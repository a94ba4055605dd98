"""History log abstraction - earliest recorded change for a path."""

import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional


class HistoryLogError(RuntimeError):
    """Raised when the history log cannot be queried at all."""


class HistoryLog(ABC):
    """
    Abstract interface over a version-control history.

    The upload date resolver depends on this abstraction so tests can use an
    in-memory fake instead of a real repository.
    """

    @abstractmethod
    def earliest_change(self, path: str) -> Optional[str]:
        """
        Return the timestamp of the earliest change touching a path.

        Args:
            path: Path relative to the repository root (file or folder).

        Returns:
            ISO-8601 timestamp string, or None if the path has no history.

        Raises:
            HistoryLogError: If the log could not be queried.
        """
        pass


class GitHistoryLog(HistoryLog):
    """Reads author dates from ``git log`` in the work's repository."""

    def __init__(self, repo_root: Path, git_executable: str = "git"):
        self.repo_root = Path(repo_root)
        self.git_executable = git_executable

    def earliest_change(self, path: str) -> Optional[str]:
        command = [self.git_executable, "log", "--reverse", "--format=%aI", "--", path]
        try:
            result = subprocess.run(
                command,
                cwd=self.repo_root,
                capture_output=True,
                text=True,
                encoding="utf-8",
                check=True,
            )
        except (OSError, subprocess.CalledProcessError) as e:
            raise HistoryLogError(f"git log failed for {path}: {e}") from e

        for line in result.stdout.splitlines():
            line = line.strip()
            if line:
                return line
        return None
