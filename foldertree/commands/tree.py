"""
Tree command.

Displays the hierarchy of a snapshot as an indented outline.
"""
from pathlib import Path
from typing import Dict, List, Optional

import click

from foldertree.constants import DEFAULT_PATH_SEPARATOR, DEFAULT_TREE_INDENT
from foldertree.core import FolderTreeCore
from foldertree.exceptions import FolderTreeError
from foldertree.managers.sorting import sort_siblings
from foldertree.models.base import ItemId, WorkItem
from foldertree.utils import milestone_display_name


def _label(item: WorkItem, separator: str) -> str:
    if item.is_folder:
        return f"[{item.text}]"
    if item.is_milestone:
        # Milestones at the top level keep their full title
        name = item.text if item.is_root else milestone_display_name(item.text, separator)
        return f"◆ {name}"
    return f"#{item.id} {item.text}"


def render_tree(
    items: List[WorkItem],
    indent: int = DEFAULT_TREE_INDENT,
    separator: str = DEFAULT_PATH_SEPARATOR,
) -> List[str]:
    """Render items as indented lines, milestones first under each parent.

    Items whose parent is not in the list are shown at the top level.
    """
    ordered = sort_siblings(items)
    known = {item.id for item in ordered}
    children: Dict[Optional[ItemId], List[WorkItem]] = {}
    for item in ordered:
        parent = item.parent if item.parent in known else None
        children.setdefault(parent, []).append(item)

    lines: List[str] = []
    visited = set()

    def _walk(parent: Optional[ItemId], depth: int) -> None:
        for child in children.get(parent, []):
            if child.id in visited:
                continue
            visited.add(child.id)
            lines.append(" " * (indent * depth) + _label(child, separator))
            _walk(child.id, depth + 1)

    _walk(None, 0)
    return lines


@click.command()
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--folders/--no-folders",
    default=True,
    help="Show the folder tree (default) or the flat milestone hierarchy.",
)
@click.pass_context
def tree(ctx, snapshot, folders):
    """Show the hierarchy of a SNAPSHOT file."""
    try:
        core = FolderTreeCore(config_dir=ctx.obj.get("config_dir"))
        items = core.storage.load_snapshot(snapshot).items
        config = core.storage.load_config()
    except FolderTreeError as e:
        raise click.ClickException(str(e))

    items = core.toggle(items, show_folders=folders)
    if not items:
        click.echo("Snapshot is empty.")
        return
    for line in render_tree(items, config.tree_indent, core.settings.path_separator):
        click.echo(line)
