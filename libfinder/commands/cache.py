import click
import os
import sys
from ..cache import CacheStore, CACHE_FILE
from ..cli_logger import logger

@click.group()
@click.pass_context
def cache(ctx):
    """View or edit the detection cache (LibFinderCache.toml)."""
    pass

@cache.command()
@click.option("--all", "show_all", is_flag=True, help="Also show advanced (hidden) options.")
@click.pass_context
def view(ctx, show_all):
    """List cached option values."""
    store = CacheStore.load(ctx.obj["path"])
    if not store.values:
        logger.info("The cache is empty. Run 'libfinder detect' first.")
        return
    for name in sorted(store.values):
        if store.is_advanced(name) and not show_all:
            continue
        marker = "  [advanced]" if store.is_advanced(name) else ""
        click.echo(f"{name}={store.values[name]}{marker}")

@cache.command()
@click.argument('name')
@click.pass_context
def get(ctx, name):
    """Get a cached option value."""
    store = CacheStore.load(ctx.obj["path"])
    value = store.get_value(name)
    if value is None:
        logger.error(f"Error: '{name}' is not in the cache")
        return
    click.echo(value)

@cache.command()
@click.argument('name')
@click.argument('value')
@click.pass_context
def set(ctx, name, value):
    """Set a cached option value, e.g. to point at a non-standard install."""
    store = CacheStore.load(ctx.obj["path"])
    store.set_value(name, value)
    if store.save():
        logger.info(f"Set '{name}' to '{value}'")

@cache.command()
@click.argument('name')
@click.pass_context
def unset(ctx, name):
    """Remove an option from the cache so it is detected again."""
    store = CacheStore.load(ctx.obj["path"])
    if not store.unset(name):
        logger.error(f"Error: '{name}' is not in the cache")
        return
    if store.save():
        logger.info(f"Unset '{name}'")

@cache.command()
@click.pass_context
def clean(ctx):
    """Delete the cache and force full re-detection."""
    store = CacheStore.load(ctx.obj["path"])
    try:
        if store.clean():
            logger.success(f"Removed {os.path.join(ctx.obj['path'], CACHE_FILE)}")
        else:
            logger.info("No cache to remove.")
    except OSError as e:
        logger.error(f"Error removing cache file: {e}")
        logger.info("Please check file permissions.")
        logger.exception(*sys.exc_info())
