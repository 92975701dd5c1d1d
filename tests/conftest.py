"""
Test fixtures for the foldertree test suite.

Provides:
- Temporary directory fixtures (isolated from the working directory)
- Mock data builders for creating snapshot items
- Sample snapshots covering milestones, labelled issues and sub-tasks
"""

import json
import shutil
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Generator, List, Optional, Union

import pytest

from foldertree.models.base import ItemType, WorkItem
from foldertree.utils import create_milestone_task_id


# =============================================================================
# Temporary Directory Fixtures
# =============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test isolation."""
    temp_path = Path(tempfile.mkdtemp(prefix="foldertree_test_"))
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def config_dir(temp_dir: Path) -> Path:
    """Path to a (not yet created) .foldertree/ directory."""
    return temp_dir / ".foldertree"


# =============================================================================
# Mock Data Builders
# =============================================================================


class MockDataBuilder:
    """Helper class for building snapshot items for testing."""

    @staticmethod
    def create_milestone(
        iid: int,
        title: str,
        end: Optional[datetime] = None,
        start: Optional[datetime] = None,
    ) -> WorkItem:
        """Create a top-level milestone with id "m-{iid}"."""
        return WorkItem(
            id=create_milestone_task_id(iid),
            parent=0,
            text=title,
            item_type=ItemType.MILESTONE,
            start=start,
            end=end,
        )

    @staticmethod
    def create_issue(
        id: int,
        text: str = "Issue",
        labels: str = "",
        milestone: Optional[WorkItem] = None,
        display_order: Optional[Union[int, float]] = None,
    ) -> WorkItem:
        """Create an issue, under its milestone when one is given."""
        kwargs = {}
        if milestone is not None:
            kwargs = {
                "parent": milestone.id,
                "milestone_iid": int(str(milestone.id)[2:]),
                "milestone_title": milestone.text,
            }
        return WorkItem(
            id=id,
            text=text,
            labels=labels,
            item_type=ItemType.ISSUE,
            display_order=display_order,
            **kwargs,
        )

    @staticmethod
    def create_subtask(
        id: int, parent: Union[int, str], text: str = "Sub-task", labels: str = ""
    ) -> WorkItem:
        """Create a sub-task under an issue."""
        return WorkItem(
            id=id, parent=parent, text=text, labels=labels, item_type=ItemType.SUBTASK
        )


@pytest.fixture
def mock_data() -> MockDataBuilder:
    """Provide mock data builder for test item creation."""
    return MockDataBuilder()


# =============================================================================
# Snapshot Fixtures
# =============================================================================


@pytest.fixture
def sample_items(mock_data: MockDataBuilder) -> List[WorkItem]:
    """A flat snapshot in synced order.

    Structure before building:
        m-58 "小活動範本/生日"
        ├── #1 folder::小活動範本/生日/taskgroup
        │   └── #4 sub-task (folder::ignored)
        └── #2 folder::other/place (conflict)
        m-7 "Release"
        #3 folder::groupA/groupB
        #5 no labels
    """
    birthday = mock_data.create_milestone(58, "小活動範本/生日", end=datetime(2024, 6, 1))
    release = mock_data.create_milestone(7, "Release", end=datetime(2024, 9, 1))
    return [
        birthday,
        release,
        mock_data.create_issue(
            1, "Cake", "bug, folder::小活動範本/生日/taskgroup", birthday, display_order=1
        ),
        mock_data.create_issue(2, "Balloons", "folder::other/place", birthday, display_order=2),
        mock_data.create_issue(3, "Grouped", "folder::groupA/groupB", display_order=3),
        mock_data.create_subtask(4, 1, labels="folder::ignored"),
        mock_data.create_issue(5, "Plain", display_order=5),
    ]


@pytest.fixture
def snapshot_file(temp_dir: Path, sample_items: List[WorkItem]) -> Path:
    """Write sample_items to a snapshot JSON file."""
    path = temp_dir / "snapshot.json"
    data = {"items": [item.model_dump(mode="json") for item in sample_items]}
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path
