"""
TreeStripper, the inverse of TreeBuilder.

Restoration logic for items whose parent is a folder:
- Milestones: back to the top level (only titles with a path move them)
- Issues: back under their bound milestone ("m-{iid}"), or the top level
- Anything else: the top level
- Folders: removed entirely
"""

import logging
from typing import List, Optional, Set

from foldertree.managers.sorting import sort_siblings
from foldertree.models.base import ItemId, WorkItem
from foldertree.utils import create_milestone_task_id

logger = logging.getLogger("foldertree.stripper")


class TreeStripper:
    """
    Removes folder nodes and restores the flat parent structure.

    Usage:
        stripper = TreeStripper()
        flat = stripper.strip(built_items)
    """

    def _original_parent(self, item: WorkItem) -> Optional[ItemId]:
        """Parent an item had before TreeBuilder moved it under a folder."""
        if item.is_milestone:
            return None
        if item.is_path_eligible and item.milestone_iid:
            return create_milestone_task_id(item.milestone_iid)
        return None

    def strip(self, items: List[WorkItem]) -> List[WorkItem]:
        """
        Strip folder nodes from an item list.

        When the list holds no folders it is returned as is. Otherwise the
        folders are dropped, affected parents are restored and siblings are
        regrouped so milestones come first under each parent.

        Args:
            items: Item list, typically TreeBuilder output with folders.

        Returns:
            Flat item list without folders.
        """
        folder_ids: Set[ItemId] = {item.id for item in items if item.is_folder}
        if not folder_ids:
            logger.debug("No folders to strip from %d items", len(items))
            return items

        restored: List[WorkItem] = []
        moved = 0
        for item in items:
            if item.is_folder:
                continue
            if item.parent in folder_ids:
                item = item.with_parent(self._original_parent(item))
                moved += 1
            restored.append(item)

        logger.debug(
            "Stripped %d folders, restored %d parents", len(folder_ids), moved
        )
        return sort_siblings(restored)


def strip_folder_nodes(items: List[WorkItem]) -> List[WorkItem]:
    """Strip folder nodes with a one-off TreeStripper."""
    return TreeStripper().strip(items)
