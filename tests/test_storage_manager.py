"""
Tests for StorageManager.

Tests cover:
- Snapshot loading (object and bare list forms, missing files, bad data)
- Snapshot saving with the root sentinel and folder rows
- Config loading, saving and updating
"""

import json

import pytest

from foldertree.exceptions import ConfigurationError, StorageError
from foldertree.managers.storage_manager import StorageManager
from foldertree.models.base import FolderNode, ItemType, WorkItem
from foldertree.models.files import ConfigFile


class TestSnapshots:
    """Snapshot file handling."""

    def test_load_object_form(self, config_dir, snapshot_file, sample_items):
        snapshot = StorageManager(config_dir).load_snapshot(snapshot_file)

        assert snapshot.items == sample_items

    def test_load_list_form(self, config_dir, temp_dir):
        path = temp_dir / "list.json"
        path.write_text(json.dumps([{"id": 1, "parent": 0, "item_type": "issue"}]))

        snapshot = StorageManager(config_dir).load_snapshot(path)

        assert snapshot.items == [WorkItem(id=1)]

    def test_missing_file_is_empty(self, config_dir, temp_dir):
        snapshot = StorageManager(config_dir).load_snapshot(temp_dir / "missing.json")

        assert snapshot.items == []

    def test_invalid_json(self, config_dir, temp_dir):
        path = temp_dir / "bad.json"
        path.write_text("{not json")

        with pytest.raises(StorageError):
            StorageManager(config_dir).load_snapshot(path)

    def test_invalid_shape(self, config_dir, temp_dir):
        path = temp_dir / "bad.json"
        path.write_text(json.dumps({"items": [{"parent": 0}]}))

        with pytest.raises(StorageError):
            StorageManager(config_dir).load_snapshot(path)

    def test_save_writes_sentinel_and_folders(self, config_dir, temp_dir):
        path = temp_dir / "out" / "built.json"
        items = [
            WorkItem(id="m-1", text="a/b", item_type=ItemType.MILESTONE, parent="f-a"),
            FolderNode.for_path(["a"], None),
        ]

        StorageManager(config_dir).save_snapshot(path, items)
        data = json.loads(path.read_text(encoding="utf-8"))

        assert [row["parent"] for row in data["items"]] == ["f-a", 0]
        assert data["items"][1]["item_type"] == "folder"
        assert not list(path.parent.glob(".tmp_foldertree_*"))

    def test_save_then_load(self, config_dir, temp_dir, sample_items):
        path = temp_dir / "copy.json"
        storage = StorageManager(config_dir)

        storage.save_snapshot(path, sample_items)

        assert storage.load_snapshot(path).items == sample_items

    def test_unicode_is_kept_readable(self, config_dir, temp_dir, sample_items):
        path = temp_dir / "copy.json"

        StorageManager(config_dir).save_snapshot(path, sample_items)

        assert "小活動範本" in path.read_text(encoding="utf-8")


class TestConfig:
    """config.json handling."""

    def test_missing_config_uses_defaults(self, config_dir):
        assert StorageManager(config_dir).load_config() == ConfigFile()

    def test_save_and_load(self, config_dir):
        storage = StorageManager(config_dir)

        storage.save_config(ConfigFile(path_separator=">"))

        assert storage.load_config().path_separator == ">"
        assert storage.config_path == config_dir / "config.json"

    def test_update_config(self, config_dir):
        storage = StorageManager(config_dir)

        updated = storage.update_config("tree_indent", "4")

        assert updated.tree_indent == 4
        assert storage.load_config().tree_indent == 4

    def test_update_unknown_key(self, config_dir):
        with pytest.raises(ConfigurationError, match="Unknown config key"):
            StorageManager(config_dir).update_config("colour", "red")

    def test_update_invalid_value(self, config_dir):
        with pytest.raises(ConfigurationError):
            StorageManager(config_dir).update_config("path_separator", "")

    def test_corrupt_config(self, config_dir):
        config_dir.mkdir(parents=True)
        (config_dir / "config.json").write_text("[1, 2")

        with pytest.raises(ConfigurationError):
            StorageManager(config_dir).load_config()
