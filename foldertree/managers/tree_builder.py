"""
TreeBuilder for the virtual folder hierarchy.

Overlays folders on a flat item list using two sources of paths:
- Milestone titles containing the path separator ("小活動範本/生日")
- Scoped folder labels on issues ("folder::小活動範本/生日/taskgroup")

Examples:
    Milestone "小活動範本/生日" + folder::小活動範本/生日/taskgroup
    → folder "小活動範本" > milestone "生日" > folder "taskgroup" > issue

    No milestone + folder::groupA/groupB
    → folder "groupA" > folder "groupB" > issue
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from foldertree.managers.folder_factory import FolderNodeFactory
from foldertree.models.base import ItemId, WorkItem
from foldertree.models.files import BuildResult, TreeSettings
from foldertree.utils import decompose_milestone_title, parse_folder_label, split_path

logger = logging.getLogger("foldertree.builder")


class TreeBuilder:
    """
    Builds the folder hierarchy for one snapshot.

    Each call to build() starts from an empty folder map; nothing is kept
    between calls, so building the same snapshot twice gives equal results.

    Usage:
        builder = TreeBuilder()
        result = builder.build(items, milestones)
        rows = result.combined()  # items followed by folder nodes
    """

    def __init__(self, settings: Optional[TreeSettings] = None) -> None:
        """
        Initialize TreeBuilder.

        Args:
            settings: Label and id conventions. Defaults to TreeSettings().
        """
        self.settings = settings or TreeSettings()

    def _milestone_title_index(self, milestones: Iterable[WorkItem]) -> Dict[str, ItemId]:
        """Map full milestone titles to milestone ids."""
        index: Dict[str, ItemId] = {}
        for milestone in milestones:
            if milestone.is_milestone and milestone.text:
                index[milestone.text] = milestone.id
        return index

    def _place_milestones(
        self, milestones: Iterable[WorkItem], factory: FolderNodeFactory
    ) -> Dict[ItemId, ItemId]:
        """Create folders for milestone titles that contain a path.

        Returns:
            Map of milestone id to the id of the folder it moves under.
        """
        reparent: Dict[ItemId, ItemId] = {}
        for milestone in milestones:
            if not milestone.is_milestone:
                continue
            decomposed = decompose_milestone_title(
                milestone.text, self.settings.path_separator
            )
            if decomposed is None:
                continue
            folder_path, _leaf = decomposed
            reparent[milestone.id] = factory.materialize(folder_path, None)
        return reparent

    def _longest_milestone_match(
        self, segments: List[str], title_index: Dict[str, ItemId]
    ) -> Optional[Tuple[int, ItemId]]:
        """Find the longest path prefix that is a milestone title.

        Every prefix length is tried; a longer match replaces a shorter one.

        Returns:
            (matched segment count, milestone id), or None.
        """
        best: Optional[Tuple[int, ItemId]] = None
        separator = self.settings.path_separator
        for length in range(1, len(segments) + 1):
            milestone_id = title_index.get(separator.join(segments[:length]))
            if milestone_id is not None:
                best = (length, milestone_id)
        return best

    def _conflicts_with_milestone(self, item: WorkItem, segments: List[str]) -> bool:
        """Check whether the folder path leaves the item's own milestone.

        The path must start with every segment of the bound milestone's
        title. Comparison is against the full title as written.
        """
        title = item.milestone_title
        if not title:
            return False
        separator = self.settings.path_separator
        title_length = len(split_path(title, separator))
        return separator.join(segments[:title_length]) != title

    def _place_item(
        self,
        item: WorkItem,
        title_index: Dict[str, ItemId],
        factory: FolderNodeFactory,
    ) -> WorkItem:
        """Re-parent one labelled item, or return it unchanged."""
        segments = parse_folder_label(
            item.labels,
            self.settings.folder_label_prefix,
            self.settings.path_separator,
        )
        if segments is None:
            return item

        if self._conflicts_with_milestone(item, segments):
            logger.debug(
                "Ignoring folder label on %r: path %r is outside milestone %r",
                item.id,
                self.settings.path_separator.join(segments),
                item.milestone_title,
            )
            return item

        match = self._longest_milestone_match(segments, title_index)
        if match is not None:
            start, parent = match
        else:
            start, parent = 0, None

        new_parent = factory.materialize(segments[start:], parent, segments[:start])
        if new_parent == item.parent:
            return item
        return item.with_parent(new_parent)

    def build(
        self, items: List[WorkItem], milestones: Iterable[WorkItem]
    ) -> BuildResult:
        """
        Build the folder tree for a snapshot.

        Phase A moves milestones with a path in their title under folders.
        Phase B moves labelled issues under the deepest folder (or milestone)
        on their path. Items that are not moved are returned as the same
        objects.

        Args:
            items: All items of the snapshot (milestones and work items).
            milestones: The milestone items of the same snapshot.

        Returns:
            BuildResult with the updated items and the folders created.
        """
        milestones = list(milestones)
        factory = FolderNodeFactory(self.settings)
        title_index = self._milestone_title_index(milestones)
        milestone_parents = self._place_milestones(milestones, factory)

        result: List[WorkItem] = []
        moved = 0
        for item in items:
            if item.is_milestone:
                new_parent = milestone_parents.get(item.id)
                placed = item if new_parent is None else item.with_parent(new_parent)
            elif item.is_folder or not item.is_path_eligible:
                placed = item
            else:
                placed = self._place_item(item, title_index, factory)
            if placed is not item:
                moved += 1
            result.append(placed)

        logger.debug(
            "Built folder tree: %d folders, %d of %d items re-parented",
            len(factory),
            moved,
            len(result),
        )
        return BuildResult(items=result, folder_nodes=factory.nodes)


def build_folder_tree(
    items: List[WorkItem],
    milestones: Iterable[WorkItem],
    settings: Optional[TreeSettings] = None,
) -> BuildResult:
    """Build the folder tree with a one-off TreeBuilder."""
    return TreeBuilder(settings).build(items, milestones)
