"""
FolderNodeFactory for deduplicated folder creation.

One factory lives for the duration of a single build. Folders are keyed by
their path-derived id, so a path requested twice yields the same node.
"""

from typing import Dict, List, Optional

from foldertree.models.base import FolderNode, ItemId
from foldertree.models.files import TreeSettings
from foldertree.utils import create_folder_task_id


class FolderNodeFactory:
    """
    Creates and deduplicates FolderNodes within one build.

    Usage:
        factory = FolderNodeFactory()
        parent = factory.materialize(["groupA", "groupB"], None)
        # parent == "f-groupA/groupB"
        factory.nodes  # [folder groupA, folder groupA/groupB]
    """

    def __init__(self, settings: Optional[TreeSettings] = None) -> None:
        """
        Initialize FolderNodeFactory.

        Args:
            settings: Id and separator conventions. Defaults to TreeSettings().
        """
        self.settings = settings or TreeSettings()
        self._nodes: Dict[str, FolderNode] = {}

    def folder_id(self, path: List[str]) -> str:
        """Get the id a folder for this path has."""
        return create_folder_task_id(
            path, self.settings.folder_id_prefix, self.settings.path_separator
        )

    def get_or_create(self, path: List[str], parent: Optional[ItemId]) -> FolderNode:
        """Get the folder for a path, creating it under parent if new.

        An existing folder keeps the parent it was first created with.

        Args:
            path: Full path of the folder.
            parent: Parent id used only when the folder is created.

        Returns:
            The single FolderNode for this path.
        """
        folder_id = self.folder_id(path)
        node = self._nodes.get(folder_id)
        if node is None:
            node = FolderNode.for_path(
                path,
                parent,
                folder_id_prefix=self.settings.folder_id_prefix,
                separator=self.settings.path_separator,
            )
            self._nodes[folder_id] = node
        return node

    def materialize(
        self,
        segments: List[str],
        parent: Optional[ItemId],
        base_path: Optional[List[str]] = None,
    ) -> Optional[ItemId]:
        """Create a chain of folders, each nested under the previous one.

        Args:
            segments: Segments to create folders for, outermost first.
            parent: Parent id of the first folder in the chain.
            base_path: Path already covered by the parent, prepended to each
                folder's path so ids stay unique per full path.

        Returns:
            Id of the deepest folder, or parent when segments is empty.
        """
        current_path = list(base_path or [])
        current_parent = parent
        for segment in segments:
            current_path.append(segment)
            current_parent = self.get_or_create(current_path, current_parent).id
        return current_parent

    def __contains__(self, folder_id: object) -> bool:
        return folder_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def nodes(self) -> List[FolderNode]:
        """Folders created so far, in creation order."""
        return list(self._nodes.values())
