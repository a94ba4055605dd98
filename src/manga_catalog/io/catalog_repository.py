"""Data access layer for the work configuration and the persisted catalog."""

import json
import os
import tempfile
from pathlib import Path
from typing import Optional

from manga_catalog.core import Catalog, WorkConfig


class ConfigurationError(RuntimeError):
    """The configuration document is missing or cannot be parsed."""


class CatalogWriteError(RuntimeError):
    """The new catalog could not be written."""


class CatalogRepository:
    """Loads and persists the documents a catalog run works on.

    Configuration and catalog writes follow the failing-fast philosophy and
    raise; reading the previous catalog degrades to None, since a run can
    always start from scratch.
    """

    def __init__(self, config_path: Path, catalog_path: Path) -> None:
        self.config_path = Path(config_path)
        self.catalog_path = Path(catalog_path)

    def load_config(self) -> WorkConfig:
        """Load the work configuration.

        Returns:
            WorkConfig: The parsed configuration.

        Raises:
            ConfigurationError: If the file is missing or not valid configuration.
        """
        try:
            data = json.loads(self.config_path.read_text(encoding="utf-8"))
            return WorkConfig.from_dict(data)
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"Error reading {self.config_path.name}: {e}") from e

    def load_previous(self) -> Optional[Catalog]:
        """Load the catalog written by the previous run.

        Returns:
            The previous Catalog, or None if there is none (first run) or it
            has no work section.
        """
        if not self.catalog_path.exists():
            return None

        try:
            data = json.loads(self.catalog_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            print(f"Warning: Could not read {self.catalog_path.name}: {e}")
            return None

        try:
            return Catalog.from_dict(data)
        except ValueError as e:
            print(f"Warning: Ignoring previous {self.catalog_path.name}: {e}")
            return None

    def save(self, catalog: Catalog) -> Path:
        """Replace the persisted catalog with a new one.

        The document is written to a temporary file next to the target and
        moved into place, so the old catalog survives a failed write.

        Returns:
            Path: The catalog path.

        Raises:
            CatalogWriteError: If serialization or the write fails.
        """
        fd = None
        tmp_name = None
        try:
            text = json.dumps(catalog.to_dict(), indent=2, ensure_ascii=False)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.catalog_path.name}.",
                suffix=".tmp",
                dir=self.catalog_path.parent,
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                fd = None
                f.write(text)
            os.replace(tmp_name, self.catalog_path)
            tmp_name = None
        except (OSError, TypeError, ValueError) as e:
            raise CatalogWriteError(f"Error saving {self.catalog_path.name}: {e}") from e
        finally:
            if fd is not None:
                os.close(fd)
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)

        return self.catalog_path
