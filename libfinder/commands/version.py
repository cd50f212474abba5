import click
import importlib.metadata
from ..cli_logger import logger

@click.command()
def version():
    """Print the version of libfinder."""
    try:
        ver = importlib.metadata.version("libfinder")
        logger.info(f"libfinder version {ver}")
    except importlib.metadata.PackageNotFoundError:
        logger.error("Error: Could not determine the version of libfinder. Is it installed correctly?")
