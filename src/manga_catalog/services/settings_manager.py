"""Settings Manager - Handles file names and tool paths for a catalog run."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_CONFIG_FILE = "manga-config.json"
DEFAULT_CATALOG_FILE = "manga.json"
DEFAULT_GIT_EXECUTABLE = "git"


class SettingsManager:
    """
    Manages settings for a catalog run.

    Reads overrides from a .env file in the work root; anything not set
    falls back to the conventional file names.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to the work root holding chapter folders and .env.
                         If None, the current working directory is used.
        """
        if project_root is None:
            project_root = Path.cwd()

        self._project_root = Path(project_root)
        load_dotenv(dotenv_path=self._project_root / ".env")

    @property
    def project_root(self) -> Path:
        return self._project_root

    def get_config_path(self) -> Path:
        """Path to the work configuration document."""
        return self._project_root / self._get("MANGA_CONFIG_FILE", DEFAULT_CONFIG_FILE)

    def get_catalog_path(self) -> Path:
        """Path to the persisted catalog document."""
        return self._project_root / self._get("MANGA_CATALOG_FILE", DEFAULT_CATALOG_FILE)

    def get_git_executable(self) -> str:
        return self._get("MANGA_GIT_EXECUTABLE", DEFAULT_GIT_EXECUTABLE)

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        load_dotenv(dotenv_path=self._project_root / ".env", override=True)

    @staticmethod
    def _get(name: str, default: str) -> str:
        value = os.getenv(name)
        return value.strip() if value and value.strip() else default
