"""
Sibling ordering for snapshot items.

Milestones are ordered by date, everything else by manual display order.
Within one parent, milestones always come before other items.
"""

from datetime import datetime, timezone
from functools import cmp_to_key
from typing import Dict, List, Optional

from foldertree.models.base import ItemId, WorkItem


def _compare_optional(a, b) -> Optional[int]:
    """Compare two optional values, present values first.

    Returns None when both are missing so the caller falls through to the
    next key.
    """
    if a is not None and b is not None:
        return (a > b) - (a < b)
    if a is not None:
        return -1
    if b is not None:
        return 1
    return None


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive datetimes as UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def compare_milestones(a: WorkItem, b: WorkItem) -> int:
    """Compare milestones by end date, then start date, then title."""
    result = _compare_optional(_as_utc(a.end), _as_utc(b.end))
    if result is not None:
        return result
    result = _compare_optional(_as_utc(a.start), _as_utc(b.start))
    if result is not None:
        return result
    text_a, text_b = a.text or "", b.text or ""
    return (text_a > text_b) - (text_a < text_b)


def _numeric_id(value: ItemId) -> Optional[float]:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def compare_by_display_order(a: WorkItem, b: WorkItem) -> int:
    """Compare items by display order, then by numeric id.

    Non-numeric ids compare equal, leaving their relative order to the
    stable sort.
    """
    result = _compare_optional(a.display_order, b.display_order)
    if result is not None:
        return result
    id_a, id_b = _numeric_id(a.id), _numeric_id(b.id)
    if id_a is None or id_b is None:
        return 0
    return (id_a > id_b) - (id_a < id_b)


def sort_siblings(items: List[WorkItem]) -> List[WorkItem]:
    """Group items by parent and order each group milestones-first.

    Groups are emitted in the order their parent is first seen. Within a
    group, milestones are sorted with compare_milestones and the remaining
    items with compare_by_display_order.

    Args:
        items: Flat list of items.

    Returns:
        New list with the same items, regrouped.
    """
    groups: Dict[Optional[ItemId], List[WorkItem]] = {}
    for item in items:
        groups.setdefault(item.parent, []).append(item)

    ordered: List[WorkItem] = []
    for group in groups.values():
        milestones = [item for item in group if item.is_milestone]
        others = [item for item in group if not item.is_milestone]
        milestones.sort(key=cmp_to_key(compare_milestones))
        others.sort(key=cmp_to_key(compare_by_display_order))
        ordered.extend(milestones)
        ordered.extend(others)
    return ordered
