"""
Tests for utility functions in foldertree.utils module.
"""

import pytest

from foldertree.utils import (
    create_folder_task_id,
    create_milestone_task_id,
    decompose_milestone_title,
    extract_milestone_iid,
    folder_path_from_id,
    is_folder_task_id,
    is_legacy_milestone_id,
    is_milestone_task_id,
    migrate_legacy_milestone_id,
    milestone_display_name,
    parse_folder_label,
    split_path,
)


class TestParseFolderLabel:
    """Tests for the parse_folder_label function."""

    def test_parse_among_other_labels(self):
        result = parse_folder_label("bug, folder::小活動範本/生日/taskgroup, urgent")
        assert result == ["小活動範本", "生日", "taskgroup"]

    def test_parse_single_segment(self):
        assert parse_folder_label("folder::groupA") == ["groupA"]

    def test_parse_drops_empty_segments(self):
        assert parse_folder_label("folder::/a//b/") == ["a", "b"]

    def test_parse_trims_labels(self):
        assert parse_folder_label("  folder::a/b  ,x") == ["a", "b"]

    def test_first_folder_label_wins(self):
        assert parse_folder_label("folder::one, folder::two") == ["one"]

    def test_segments_keep_inner_spaces(self):
        assert parse_folder_label("folder::Team A/Sprint 1") == ["Team A", "Sprint 1"]

    @pytest.mark.parametrize(
        "labels",
        [None, "", "bug, urgent", "folder::", "folder::///", "Folder::a", "xfolder::a"],
    )
    def test_no_path(self, labels):
        assert parse_folder_label(labels) is None

    def test_custom_prefix_and_separator(self):
        assert parse_folder_label("path::a>b", prefix="path::", separator=">") == ["a", "b"]


class TestDecomposeMilestoneTitle:
    """Tests for decompose_milestone_title and milestone_display_name."""

    def test_two_segments(self):
        assert decompose_milestone_title("小活動範本/生日") == (["小活動範本"], "生日")

    def test_many_segments(self):
        assert decompose_milestone_title("a/b/c") == (["a", "b"], "c")

    @pytest.mark.parametrize("title", [None, "", "Release", "/Release", "Release/", "//"])
    def test_not_restructured(self, title):
        assert decompose_milestone_title(title) is None

    def test_display_name(self):
        assert milestone_display_name("小活動範本/生日") == "生日"
        assert milestone_display_name("Release") == "Release"
        assert milestone_display_name(None) == ""


class TestSplitPath:
    def test_split(self):
        assert split_path("a//b/") == ["a", "b"]

    def test_empty(self):
        assert split_path("") == []
        assert split_path(None) == []


class TestMilestoneIds:
    """Tests for milestone id helpers."""

    def test_create(self):
        assert create_milestone_task_id(1) == "m-1"
        assert create_milestone_task_id("42") == "m-42"
        assert create_milestone_task_id(0) == "m-0"

    def test_is_milestone_task_id(self):
        assert is_milestone_task_id("m-1")
        assert is_milestone_task_id("m-0")
        for value in [1, "1", "issue-1", "m", "m-", "M-1", "milestone-1", "", None]:
            assert not is_milestone_task_id(value)

    def test_extract(self):
        assert extract_milestone_iid("m-42") == 42
        assert extract_milestone_iid("m-99999") == 99999
        for value in ["1", "M-1", "m-abc", "m-", 1, None]:
            assert extract_milestone_iid(value) is None

    def test_migrate_legacy(self):
        assert migrate_legacy_milestone_id(10001) == "m-1"
        assert migrate_legacy_milestone_id("10042") == "m-42"
        assert migrate_legacy_milestone_id(10000) == "m-0"

    def test_migrate_leaves_other_ids(self):
        assert migrate_legacy_milestone_id(1) == 1
        assert migrate_legacy_milestone_id("9999") == "9999"
        assert migrate_legacy_milestone_id("m-1") == "m-1"

    def test_is_legacy(self):
        assert is_legacy_milestone_id(10001)
        assert is_legacy_milestone_id("10001")
        assert not is_legacy_milestone_id(9999)
        assert not is_legacy_milestone_id("m-1")
        assert not is_legacy_milestone_id(True)


class TestFolderIds:
    """Tests for folder id helpers."""

    def test_create(self):
        assert create_folder_task_id(["小活動範本", "taskgroup"]) == "f-小活動範本/taskgroup"

    def test_is_folder_task_id(self):
        assert is_folder_task_id("f-a")
        assert not is_folder_task_id("m-1")
        assert not is_folder_task_id(1)

    def test_path_from_id(self):
        assert folder_path_from_id("f-a/b") == ["a", "b"]
        assert folder_path_from_id("m-1") is None
        assert folder_path_from_id("f-") is None
