"""
Managers for foldertree.

This package contains focused manager classes:
- FolderNodeFactory: Deduplicated folder creation within one build
- TreeBuilder: Overlay the folder hierarchy on a flat snapshot
- TreeStripper: Remove folders and restore flat parents
- StorageManager: Snapshot and config persistence
- sorting: Milestones-first sibling ordering
"""

from foldertree.managers.folder_factory import FolderNodeFactory
from foldertree.managers.sorting import (
    compare_by_display_order,
    compare_milestones,
    sort_siblings,
)
from foldertree.managers.storage_manager import StorageManager
from foldertree.managers.tree_builder import TreeBuilder, build_folder_tree
from foldertree.managers.tree_stripper import TreeStripper, strip_folder_nodes
from foldertree.exceptions import StorageError

__all__ = [
    "FolderNodeFactory",
    "TreeBuilder",
    "TreeStripper",
    "StorageManager",
    "StorageError",
    "build_folder_tree",
    "strip_folder_nodes",
    "compare_milestones",
    "compare_by_display_order",
    "sort_siblings",
]
