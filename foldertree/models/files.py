"""
File models for foldertree.

Models representing the structure of snapshot and config JSON files.
"""

from typing import List

from pydantic import BaseModel, Field, field_validator

from foldertree.constants import (
    DEFAULT_FOLDER_ID_PREFIX,
    DEFAULT_FOLDER_LABEL_PREFIX,
    DEFAULT_PATH_SEPARATOR,
    DEFAULT_TREE_INDENT,
    SCHEMA_VERSION,
)

from .base import FolderNode, WorkItem


class TreeSettings(BaseModel):
    """Label and id conventions used by the tree transforms."""

    folder_label_prefix: str = DEFAULT_FOLDER_LABEL_PREFIX
    path_separator: str = DEFAULT_PATH_SEPARATOR
    folder_id_prefix: str = DEFAULT_FOLDER_ID_PREFIX

    @field_validator("folder_label_prefix", "path_separator", "folder_id_prefix")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Setting must not be empty")
        return v

    @classmethod
    def from_config(cls, config: "ConfigFile") -> "TreeSettings":
        """Take the tree conventions out of a loaded config file."""
        return cls(**config.model_dump(include=set(cls.model_fields)))


class ConfigFile(TreeSettings):
    """Model for config.json file."""

    schema_version: str = SCHEMA_VERSION
    tree_indent: int = DEFAULT_TREE_INDENT


class SnapshotFile(BaseModel):
    """Model for a snapshot file.

    Flat list of items with parent references. Folder rows may be present
    when the snapshot was written after a build.
    """

    schema_version: str = SCHEMA_VERSION
    items: List[WorkItem] = Field(default_factory=list)

    @property
    def milestones(self) -> List[WorkItem]:
        """Milestone subset of the snapshot's items."""
        return [item for item in self.items if item.is_milestone]

    @property
    def folders(self) -> List[WorkItem]:
        """Folder rows present in the snapshot."""
        return [item for item in self.items if item.is_folder]


class BuildResult(BaseModel):
    """Items with updated parents plus the folders created for them."""

    items: List[WorkItem] = Field(default_factory=list)
    folder_nodes: List[FolderNode] = Field(default_factory=list)

    def combined(self) -> List[WorkItem]:
        """Items followed by folder nodes, the shape TreeStripper accepts."""
        return [*self.items, *self.folder_nodes]
