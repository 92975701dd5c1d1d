"""
FolderTreeCore - entry point for building and stripping folder trees.

Wires settings, storage and the two tree transforms together.
"""

from pathlib import Path
from typing import Iterable, List, Optional

from foldertree.managers import StorageManager, TreeBuilder, TreeStripper
from foldertree.models.base import WorkItem
from foldertree.models.files import BuildResult, TreeSettings


class FolderTreeCore:
    """
    Core class for folder tree operations.

    Orchestrates:
    - TreeBuilder: Overlay folders on a flat snapshot
    - TreeStripper: Remove folders and restore flat parents
    - StorageManager: Snapshot and config persistence
    """

    def __init__(
        self,
        config_dir: Optional[Path] = None,
        settings: Optional[TreeSettings] = None,
    ) -> None:
        """
        Initialize FolderTreeCore.

        Args:
            config_dir: Path to .foldertree/ directory. Defaults to .foldertree/
                in the current directory.
            settings: Explicit settings. When omitted they are read from
                config.json in config_dir, or the defaults if there is none.

        Raises:
            ConfigurationError: If settings are omitted and config.json is
                unreadable or invalid.
        """
        self.storage = StorageManager(config_dir)
        if settings is None:
            settings = TreeSettings.from_config(self.storage.load_config())
        self.settings = settings
        self.builder = TreeBuilder(settings)
        self.stripper = TreeStripper()

    @staticmethod
    def milestones(items: Iterable[WorkItem]) -> List[WorkItem]:
        """Milestone subset of a snapshot."""
        return [item for item in items if item.is_milestone]

    def build(
        self, items: List[WorkItem], milestones: Optional[Iterable[WorkItem]] = None
    ) -> BuildResult:
        """Build the folder tree.

        Args:
            items: Flat snapshot items.
            milestones: Milestones of the same snapshot. Derived from items
                when omitted.
        """
        if milestones is None:
            milestones = self.milestones(items)
        return self.builder.build(items, milestones)

    def strip(self, items: List[WorkItem]) -> List[WorkItem]:
        """Strip folders from an item list."""
        return self.stripper.strip(items)

    def rebuild(self, items: List[WorkItem]) -> BuildResult:
        """Build a fresh folder tree for a list that may already hold folders.

        Folders from an earlier build are stripped first, so building the
        output of a build again gives the same tree.
        """
        return self.build(self.strip(items))

    def toggle(self, items: List[WorkItem], show_folders: bool) -> List[WorkItem]:
        """Apply the folder display toggle to a list that may hold folders.

        Folders from an earlier build are always stripped first, so the
        result never carries folders from a previous snapshot.

        Args:
            items: Current item list, with or without folders.
            show_folders: Whether the result should include the folder tree.

        Returns:
            Items with a fresh folder tree, or the flat list.
        """
        if not show_folders:
            return self.strip(items)
        return self.rebuild(items).combined()

    def build_file(self, source: Path, target: Path) -> BuildResult:
        """Build the folder tree for a snapshot file and save it."""
        snapshot = self.storage.load_snapshot(source)
        result = self.rebuild(snapshot.items)
        self.storage.save_snapshot(target, result.combined())
        return result

    def strip_file(self, source: Path, target: Path) -> List[WorkItem]:
        """Strip folders from a snapshot file and save it."""
        snapshot = self.storage.load_snapshot(source)
        flat = self.strip(snapshot.items)
        self.storage.save_snapshot(target, flat)
        return flat
