"""
Storage manager for foldertree.

Handles loading and saving of snapshot files and the config.json file in the
.foldertree/ directory.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from foldertree.constants import CONFIG_FILE_NAME, DEFAULT_CONFIG_DIR
from foldertree.exceptions import ConfigurationError, StorageError
from foldertree.models.base import WorkItem
from foldertree.models.files import ConfigFile, SnapshotFile

logger = logging.getLogger("foldertree.storage")


class StorageManager:
    """
    Manages persistence of snapshots and config to JSON files.

    Handles atomic writes to prevent data corruption.
    """

    def __init__(self, config_dir: Optional[Path] = None) -> None:
        """
        Initialize the StorageManager.

        Args:
            config_dir: Path to the .foldertree/ directory. Defaults to
                .foldertree/ in the current directory. Created on first save.
        """
        self.config_dir = config_dir if config_dir else Path(DEFAULT_CONFIG_DIR)

    def _atomic_write(self, file_path: Path, data: Any) -> None:
        """Write data to a JSON file atomically to prevent corruption.

        Args:
            file_path: Path to the file to write.
            data: JSON-serializable data to write.

        Raises:
            StorageError: If writing to file fails.
        """
        file_path.parent.mkdir(parents=True, exist_ok=True)
        temp_fd, temp_path = tempfile.mkstemp(
            dir=file_path.parent, prefix=".tmp_foldertree_", suffix=".json"
        )

        try:
            with os.fdopen(temp_fd, "w", encoding="utf-8") as temp_file:
                json.dump(data, temp_file, indent=2, ensure_ascii=False)
            os.replace(temp_path, file_path)
        except Exception as e:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise StorageError(f"Failed to write to {file_path}: {e}")

    def _read_json(self, file_path: Path) -> Any:
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            raise StorageError(f"Failed to read {file_path}: {e}")

    # =========================================================================
    # Snapshots
    # =========================================================================

    def load_snapshot(self, file_path: Path) -> SnapshotFile:
        """Load a snapshot file.

        A bare JSON list of items is accepted as well as the
        {"items": [...]} object form.

        Args:
            file_path: Path to the snapshot JSON file.

        Returns:
            SnapshotFile, empty if the file doesn't exist.

        Raises:
            StorageError: If the file is not valid JSON or not a snapshot.
        """
        if not file_path.exists():
            logger.debug("Snapshot %s not found, using empty snapshot", file_path)
            return SnapshotFile()

        data = self._read_json(file_path)
        if isinstance(data, list):
            data = {"items": data}
        try:
            return SnapshotFile.model_validate(data)
        except ValidationError as e:
            raise StorageError(f"Invalid snapshot {file_path}: {e}")

    def save_snapshot(self, file_path: Path, items: List[WorkItem]) -> None:
        """Save items to a snapshot file."""
        snapshot = SnapshotFile(items=items)
        self._atomic_write(file_path, snapshot.model_dump(mode="json"))
        logger.debug("Saved %d items to %s", len(items), file_path)

    # =========================================================================
    # Config File
    # =========================================================================

    @property
    def config_path(self) -> Path:
        return self.config_dir / CONFIG_FILE_NAME

    def load_config(self) -> ConfigFile:
        """Load config.json and return as ConfigFile model.

        Raises:
            ConfigurationError: If config.json is not valid JSON or has
                invalid settings.
        """
        if not self.config_path.exists():
            return ConfigFile()

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return ConfigFile.model_validate(data)
        except (json.JSONDecodeError, OSError, ValidationError) as e:
            raise ConfigurationError(f"Failed to load {CONFIG_FILE_NAME}: {e}")

    def save_config(self, data: ConfigFile) -> None:
        """Save ConfigFile model to config.json."""
        self._atomic_write(self.config_path, data.model_dump(mode="json"))

    def update_config(self, key: str, value: Any) -> ConfigFile:
        """Set one config value, validating the result before saving.

        Raises:
            ConfigurationError: If the key is unknown or the value is invalid.
        """
        if key not in ConfigFile.model_fields:
            raise ConfigurationError(f"Unknown config key '{key}'.")
        current: Dict[str, Any] = self.load_config().model_dump()
        current[key] = value
        try:
            updated = ConfigFile.model_validate(current)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid value for '{key}': {e}")
        self.save_config(updated)
        return updated
