"""
Build and strip commands.

Both read a snapshot file and write the transformed item list, either to a
file or as JSON on stdout.
"""
import json
from pathlib import Path

import click

from foldertree.core import FolderTreeCore
from foldertree.exceptions import FolderTreeError
from foldertree.models.files import SnapshotFile


def _echo_items(items):
    snapshot = SnapshotFile(items=items)
    click.echo(json.dumps(snapshot.model_dump(mode="json"), indent=2, ensure_ascii=False))


@click.command()
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the result to this file instead of stdout.",
)
@click.pass_context
def build(ctx, snapshot, output):
    """Build the folder tree for a SNAPSHOT file.

    Folder nodes are appended after the snapshot's items.
    """
    try:
        core = FolderTreeCore(config_dir=ctx.obj.get("config_dir"))
        if output:
            result = core.build_file(snapshot, output)
            click.echo(
                f"Built {len(result.folder_nodes)} folders for "
                f"{len(result.items)} items into {output}."
            )
            return
        items = core.storage.load_snapshot(snapshot).items
        _echo_items(core.rebuild(items).combined())
    except FolderTreeError as e:
        raise click.ClickException(str(e))


@click.command()
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the result to this file instead of stdout.",
)
@click.pass_context
def strip(ctx, snapshot, output):
    """Remove folder nodes from a SNAPSHOT file and restore parents."""
    try:
        core = FolderTreeCore(config_dir=ctx.obj.get("config_dir"))
        if output:
            items = core.strip_file(snapshot, output)
            click.echo(f"Stripped folders, {len(items)} items written to {output}.")
            return
        _echo_items(core.strip(core.storage.load_snapshot(snapshot).items))
    except FolderTreeError as e:
        raise click.ClickException(str(e))
