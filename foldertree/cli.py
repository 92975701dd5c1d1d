"""
Command-line interface for foldertree.

Builds and strips virtual folder trees on snapshot JSON files.
"""
import logging
from pathlib import Path

import click

from foldertree.commands.config import config
from foldertree.commands.transform import build, strip
from foldertree.commands.tree import tree


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log tree construction details.")
@click.option(
    "--config-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding config.json (default: .foldertree/).",
)
@click.pass_context
def cli(ctx, verbose, config_dir):
    """Overlay folder hierarchies from folder:: labels and milestone titles."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["config_dir"] = config_dir


cli.add_command(build)
cli.add_command(strip)
cli.add_command(tree)
cli.add_command(config)


if __name__ == '__main__':
    cli()
