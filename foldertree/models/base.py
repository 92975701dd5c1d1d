"""
Base item models for foldertree.

Every row in a snapshot is a WorkItem. FolderNode is the synthetic variant
created by TreeBuilder to hold the virtual folder hierarchy.
"""

from datetime import datetime
from enum import Enum
from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field, field_serializer, field_validator

from foldertree.constants import (
    DEFAULT_FOLDER_ID_PREFIX,
    DEFAULT_PATH_SEPARATOR,
    ROOT_SENTINEL,
)
from foldertree.utils import create_folder_task_id

ItemId = Union[int, str]


class ItemType(str, Enum):
    """Classification of a snapshot row."""

    ISSUE = "issue"
    SUBTASK = "subtask"
    MILESTONE = "milestone"
    SUMMARY = "summary"
    FOLDER = "folder"


# Only issues carry folder labels; sub-tasks and summaries ignore them.
PATH_ELIGIBLE_TYPES = frozenset({ItemType.ISSUE})


class WorkItem(BaseModel):
    """
    A single work item from a synced snapshot.

    Fields:
    - id: Item identifier (integer for issues, "m-{iid}" for milestones,
      "f-{path}" for folders)
    - parent: Parent identifier, or None at the top level. The wire value 0
      loads as None and None dumps back as 0.
    - text: Display text (the milestone title for milestones)
    - labels: Comma-separated label string
    - item_type: ItemType classification
    - milestone_iid / milestone_title: The milestone the item is bound to
    - display_order: Manual ordering among siblings
    - start / end: Scheduled range, used for milestone ordering

    Items are treated as immutable by the tree transforms; use with_parent()
    to get a re-parented copy.
    """

    id: ItemId
    parent: Optional[ItemId] = None
    text: str = ""
    labels: str = ""
    item_type: ItemType = ItemType.ISSUE
    milestone_iid: Optional[int] = None
    milestone_title: Optional[str] = None
    display_order: Optional[Union[int, float]] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None

    @field_validator("parent", mode="before")
    @classmethod
    def validate_parent(cls, v: Any) -> Any:
        """Map the wire root sentinel to None."""
        if v == ROOT_SENTINEL or v == str(ROOT_SENTINEL) or v == "":
            return None
        return v

    @field_validator("labels", mode="before")
    @classmethod
    def validate_labels(cls, v: Any) -> Any:
        """Accept a missing label string or a list of labels."""
        if v is None:
            return ""
        if isinstance(v, (list, tuple)):
            return ", ".join(str(label) for label in v)
        return v

    @field_serializer("parent")
    def serialize_parent(self, parent: Optional[ItemId]) -> ItemId:
        return ROOT_SENTINEL if parent is None else parent

    @property
    def is_milestone(self) -> bool:
        return self.item_type == ItemType.MILESTONE

    @property
    def is_folder(self) -> bool:
        return self.item_type == ItemType.FOLDER

    @property
    def is_issue(self) -> bool:
        return self.item_type == ItemType.ISSUE

    @property
    def is_path_eligible(self) -> bool:
        """Whether the item's labels are consulted for a folder path."""
        return self.item_type in PATH_ELIGIBLE_TYPES

    @property
    def is_structural(self) -> bool:
        """Milestones and folders are structure, not editable work."""
        return self.is_milestone or self.is_folder

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def with_parent(self, parent: Optional[ItemId]) -> "WorkItem":
        """Return a copy of this item under a different parent.

        Args:
            parent: New parent id, or None for the top level.

        Returns:
            A new item of the same class; this item is left untouched.
        """
        return self.model_copy(update={"parent": parent})


class FolderNode(WorkItem):
    """Synthetic grouping node for one folder path.

    Folders have no scheduled range and no labels. The id is a pure function
    of the path, so two nodes with the same id always describe the same
    folder.
    """

    item_type: ItemType = ItemType.FOLDER
    path: List[str] = Field(default_factory=list)

    @field_validator("item_type")
    @classmethod
    def validate_item_type(cls, v: ItemType) -> ItemType:
        if v != ItemType.FOLDER:
            raise ValueError("FolderNode item_type must be 'folder'")
        return v

    @field_validator("start", "end")
    @classmethod
    def validate_no_range(cls, v: Optional[datetime]) -> None:
        if v is not None:
            raise ValueError("FolderNode cannot carry a start or end date")
        return None

    @classmethod
    def for_path(
        cls,
        path: List[str],
        parent: Optional[ItemId],
        folder_id_prefix: str = DEFAULT_FOLDER_ID_PREFIX,
        separator: str = DEFAULT_PATH_SEPARATOR,
    ) -> "FolderNode":
        """Construct the folder node for a path.

        Args:
            path: Non-empty list of path segments.
            parent: Parent id of the new folder (None for the top level).
            folder_id_prefix: Marker placed in front of the joined path.
            separator: Separator used to join the path.

        Returns:
            New FolderNode named after the last segment.
        """
        if not path:
            raise ValueError("Folder path must not be empty")
        return cls(
            id=create_folder_task_id(path, folder_id_prefix, separator),
            parent=parent,
            text=path[-1],
            path=list(path),
        )
