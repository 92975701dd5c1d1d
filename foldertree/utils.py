"""
Utility functions for foldertree.

Parsing of folder labels and milestone titles, plus helpers for the
milestone ("m-{iid}") and folder ("f-{path}") id formats.
"""

import re
from typing import List, Optional, Tuple, Union

from foldertree.constants import (
    DEFAULT_FOLDER_ID_PREFIX,
    DEFAULT_FOLDER_LABEL_PREFIX,
    DEFAULT_LABEL_SEPARATOR,
    DEFAULT_PATH_SEPARATOR,
    LEGACY_MILESTONE_ID_OFFSET,
    MILESTONE_ID_PREFIX,
)

_MILESTONE_ID_RE = re.compile(rf"^{re.escape(MILESTONE_ID_PREFIX)}(\d+)$")
_NUMERIC_RE = re.compile(r"^\d+$")


def split_path(text: Optional[str], separator: str = DEFAULT_PATH_SEPARATOR) -> List[str]:
    """
    Split a path string into its non-empty segments.

    Args:
        text: Path string, e.g. "groupA//groupB/".
        separator: Path separator.

    Returns:
        List of segments with empty ones dropped, e.g. ["groupA", "groupB"].
    """
    if not text:
        return []
    return [segment for segment in text.split(separator) if segment]


def parse_folder_label(
    labels: Optional[str],
    prefix: str = DEFAULT_FOLDER_LABEL_PREFIX,
    separator: str = DEFAULT_PATH_SEPARATOR,
) -> Optional[List[str]]:
    """
    Parse the folder path from a comma-separated label string.

    The first label starting with the prefix wins; any later folder labels
    are ignored.

    Args:
        labels: Label string, e.g. "bug, folder::groupA/groupB, urgent".
        prefix: Scoped label prefix marking the folder label.
        separator: Path separator inside the label value.

    Returns:
        List of path segments, or None if there is no usable folder label.

    Examples:
        >>> parse_folder_label("bug, folder::小活動範本/生日/taskgroup")
        ['小活動範本', '生日', 'taskgroup']
        >>> parse_folder_label("folder::/") is None
        True
    """
    if not labels:
        return None

    for label in labels.split(DEFAULT_LABEL_SEPARATOR):
        label = label.strip()
        if label.startswith(prefix):
            segments = split_path(label[len(prefix):], separator)
            return segments or None
    return None


def decompose_milestone_title(
    title: Optional[str], separator: str = DEFAULT_PATH_SEPARATOR
) -> Optional[Tuple[List[str], str]]:
    """
    Split a milestone title into a folder path and a leaf name.

    Args:
        title: Milestone title, e.g. "小活動範本/生日".
        separator: Path separator.

    Returns:
        (folder_path, leaf_name), or None when the title has one segment or
        fewer and the milestone stays where it is.
    """
    segments = split_path(title, separator)
    if len(segments) <= 1:
        return None
    return segments[:-1], segments[-1]


def milestone_display_name(title: Optional[str], separator: str = DEFAULT_PATH_SEPARATOR) -> str:
    """Name a milestone is shown under once placed inside its folders."""
    decomposed = decompose_milestone_title(title, separator)
    if decomposed is None:
        return title or ""
    return decomposed[1]


# =============================================================================
# Milestone ids
# =============================================================================


def create_milestone_task_id(iid: Union[int, str]) -> str:
    """Create the milestone task id for a milestone iid ("m-{iid}")."""
    return f"{MILESTONE_ID_PREFIX}{iid}"


def is_milestone_task_id(value: Union[int, str, None]) -> bool:
    """Check whether a value is a milestone task id."""
    return isinstance(value, str) and _MILESTONE_ID_RE.match(value) is not None


def extract_milestone_iid(value: Union[int, str, None]) -> Optional[int]:
    """Extract the iid from a milestone task id, or None if it isn't one."""
    if not isinstance(value, str):
        return None
    match = _MILESTONE_ID_RE.match(value)
    return int(match.group(1)) if match else None


def _legacy_number(value: Union[int, str, None]) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        number = value
    elif isinstance(value, str) and _NUMERIC_RE.match(value):
        number = int(value)
    else:
        return None
    return number if number >= LEGACY_MILESTONE_ID_OFFSET else None


def is_legacy_milestone_id(value: Union[int, str, None]) -> bool:
    """Check whether a value is an old numeric milestone id (10000 + iid)."""
    return _legacy_number(value) is not None


def migrate_legacy_milestone_id(value: Union[int, str]) -> Union[int, str]:
    """
    Convert an old numeric milestone id to the "m-{iid}" format.

    Values below the legacy offset and ids already in the new format are
    returned unchanged.

    Examples:
        >>> migrate_legacy_milestone_id(10042)
        'm-42'
        >>> migrate_legacy_milestone_id(42)
        42
    """
    number = _legacy_number(value)
    if number is None:
        return value
    return create_milestone_task_id(number - LEGACY_MILESTONE_ID_OFFSET)


# =============================================================================
# Folder ids
# =============================================================================


def create_folder_task_id(
    path: List[str],
    prefix: str = DEFAULT_FOLDER_ID_PREFIX,
    separator: str = DEFAULT_PATH_SEPARATOR,
) -> str:
    """
    Create a deterministic folder id from path segments.

    Examples:
        >>> create_folder_task_id(["小活動範本", "taskgroup"])
        'f-小活動範本/taskgroup'
    """
    return f"{prefix}{separator.join(path)}"


def is_folder_task_id(value: Union[int, str, None], prefix: str = DEFAULT_FOLDER_ID_PREFIX) -> bool:
    """Check whether a value is a folder id."""
    return isinstance(value, str) and value.startswith(prefix)


def folder_path_from_id(
    value: Union[int, str, None],
    prefix: str = DEFAULT_FOLDER_ID_PREFIX,
    separator: str = DEFAULT_PATH_SEPARATOR,
) -> Optional[List[str]]:
    """Recover the path segments from a folder id, or None if it isn't one."""
    if not is_folder_task_id(value, prefix):
        return None
    return split_path(value[len(prefix):], separator) or None
