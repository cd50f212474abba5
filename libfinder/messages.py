"""Diagnostic templates for packages that fail detection.

One template per FailureReason; choose_reason() holds the precedence rule so
it can be tested apart from the wording.
"""

import os

from .models import FailureReason

DEFAULT_PROJECT_NAME = "this project"

CACHE_HINT = (
    "You may use 'libfinder detect -D NAME=VALUE' or 'libfinder cache set' to modify the values. "
    "Run 'libfinder cache clean' (or delete the cache file) to discard all values and force full "
    "re-detection if necessary.\n"
)

_TEMPLATES = {
    FailureReason.NOT_FOUND: "We were unable to find package {prefix}.",
    FailureReason.MISSING_HEADERS: (
        "We could not find development headers for {prefix}. "
        "Do you have the necessary dev package installed?"
    ),
    FailureReason.SOME_FILES: (
        "We only found some files of {prefix}, not all of them. The installation may be "
        "incomplete or in a non-standard location, or maybe we just didn't look in the right place."
    ),
}


def choose_reason(version_unsuitable, missing_headers, some_files):
    """First match wins: version_unsuitable > missing_headers > some_files > not_found."""
    if version_unsuitable:
        return FailureReason.VERSION_UNSUITABLE
    if missing_headers:
        return FailureReason.MISSING_HEADERS
    if some_files:
        return FailureReason.SOME_FILES
    return FailureReason.NOT_FOUND


def format_items(items):
    """
    Renders the per-item debug listing.

    Returns (listing, some_files) where some_files tells whether at least one
    item held a plausible value, i.e. an existing path.
    """
    some_files = False
    lines = ["Relevant configuration variables:\n"]
    for item in items:
        if not item.found:
            value = "<not found>"
        elif not os.path.exists(item.path):
            value = f"{item.path}  (does not exist)"
        else:
            value = item.path
            some_files = True
        lines.append(f"  {item.name}={value}\n")
    lines.append(CACHE_HINT)
    return "".join(lines), some_files


def primary_message(reason, prefix, version=None, min_version=None, exact=False):
    if reason is FailureReason.VERSION_UNSUITABLE:
        msg = f"{prefix} {version} was found but"
        if exact:
            return f"{msg} only version {min_version} is acceptable."
        return f"{msg} version {min_version} is the minimum requirement."

    msg = _TEMPLATES[reason].format(prefix=prefix)
    if reason is FailureReason.SOME_FILES and min_version:
        msg += (f" This could also be caused by incompatible version "
                f"(if it helps, at least {prefix} {min_version} should work).")
    return msg


def fatal_message(msg, listing, project_name=None):
    project_name = project_name or DEFAULT_PROJECT_NAME
    return (
        f"REQUIRED PACKAGE NOT FOUND\n{msg} This package is REQUIRED and you need to install it "
        f"or adjust the configuration in order to continue building {project_name}.\n{listing}"
    )


def warning_message(msg, listing, project_name=None):
    project_name = project_name or DEFAULT_PROJECT_NAME
    return (
        f"WARNING: MISSING PACKAGE\n{msg} This package is NOT REQUIRED and you may ignore this "
        f"warning but by doing so you may miss some functionality of {project_name}. \n{listing}"
    )
