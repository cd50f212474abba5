import functools
import click
import sys
from .cli_logger import logger
from .errors import RequiredPackageNotFound, LibFinderError

def handle_exceptions(func):
    """A decorator to handle common exceptions for CLI commands."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except RequiredPackageNotFound as e:
            # aborts the configuration run
            logger.error(e.outcome.message)
            sys.exit(1)
        except click.Abort:
            logger.warning("\nCommand aborted by user.")
        except FileNotFoundError as e:
            logger.error(f"Error: File not found - {e}")
            logger.exception(*sys.exc_info())
        except LibFinderError as e:
            logger.error(f"Error: {e}")
            sys.exit(1)
        except click.ClickException:
            raise
        except Exception as e:
            logger.error(f"\nAn unexpected error occurred: {e}")
            logger.exception(*sys.exc_info())
            sys.exit(1)
    return wrapper
