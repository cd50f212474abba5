import os
import re

from .cli_logger import logger


def _define_pattern(define_name):
    return re.compile(
        r'#[ \t]*define[ \t]*' + re.escape(define_name) + r'[ \t]*"([^"\n]*)"'
    )


def extract_version(context, header, define_name, quiet=None):
    """
    Extracts a version #define from a header below the package's include dir.

    Usage: extract_version(ctx, "foobar/version.h", "FOOBAR_VERSION_STR")

    Does nothing if the context already has a version or no include directory
    was found. A missing header or define only warns (unless quiet), so a
    module may try several define names in turn. When the define appears more
    than once, the last occurrence wins. Returns the version stored
    on the context, or None.
    """
    include_dir = context.include_dir()
    if context.version or not include_dir:
        return None
    if quiet is None:
        quiet = context.quiet

    filename = os.path.join(include_dir, header)
    if not os.path.exists(filename):
        if not quiet:
            logger.warning(f"Author warning: Unable to find {filename}")
        return None

    with open(filename, "r", encoding="utf-8", errors="ignore") as f:
        content = f.read()

    matches = _define_pattern(define_name).findall(content)
    if not matches:
        if not quiet:
            logger.warning(f'Author warning: Unable to find #define {define_name} "<version>" from {filename}')
        return None

    context.version = matches[-1]
    return context.version
