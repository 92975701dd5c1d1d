"""
Config command group.

Commands for viewing and editing config.json.
"""
import click

from foldertree.exceptions import FolderTreeError
from foldertree.managers.storage_manager import StorageManager


def _storage(ctx) -> StorageManager:
    return StorageManager(ctx.obj.get("config_dir"))


@click.group()
def config():
    """View and edit configuration.

    Configuration is stored in .foldertree/config.json.
    """
    pass


@config.command(name="show")
@click.pass_context
def show_config(ctx):
    """Show current configuration."""
    storage = _storage(ctx)
    try:
        current = storage.load_config()
    except FolderTreeError as e:
        raise click.ClickException(str(e))
    click.echo(f"Configuration ({storage.config_path}):")
    for key, value in current.model_dump(mode="json").items():
        click.echo(f"  {key}: {value}")


@config.command(name="get")
@click.argument("key")
@click.pass_context
def get_config(ctx, key):
    """Get a configuration value."""
    try:
        current = _storage(ctx).load_config().model_dump(mode="json")
    except FolderTreeError as e:
        raise click.ClickException(str(e))
    if key not in current:
        raise click.ClickException(f"Unknown config key '{key}'.")
    click.echo(current[key])


@config.command(name="set")
@click.argument("key")
@click.argument("value")
@click.pass_context
def set_config(ctx, key, value):
    """Set a configuration value."""
    try:
        _storage(ctx).update_config(key, value)
    except FolderTreeError as e:
        raise click.ClickException(str(e))
    click.echo(f"Set {key} = {value}")
