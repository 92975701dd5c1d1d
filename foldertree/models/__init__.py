"""
Data models for foldertree.

Import models explicitly from their modules to avoid circular imports:
    from foldertree.models.base import WorkItem, FolderNode, ItemType
    from foldertree.models.files import SnapshotFile, ConfigFile, TreeSettings, BuildResult
"""

from .base import FolderNode, ItemType, WorkItem
from .files import BuildResult, ConfigFile, SnapshotFile, TreeSettings

__all__ = [
    "BuildResult",
    "ConfigFile",
    "FolderNode",
    "ItemType",
    "SnapshotFile",
    "TreeSettings",
    "WorkItem",
]
