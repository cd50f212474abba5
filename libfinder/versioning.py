import re
from itertools import zip_longest
from packaging.version import Version, InvalidVersion

_LEADING_INT = re.compile(r"^\s*(\d+)")


def version_components(version: str) -> tuple:
    """
    Splits a dotted version string into integer components.

    PEP 440 versions use their release segment. Anything else (e.g. "1.2.3-beta"
    or "2.1c") falls back to the leading integer of each dotted component, with
    non-numeric components counting as 0.
    """
    version = str(version).strip()
    try:
        return Version(version).release
    except InvalidVersion:
        pass

    components = []
    for part in version.split("."):
        match = _LEADING_INT.match(part)
        components.append(int(match.group(1)) if match else 0)
    return tuple(components)


def compare_versions(a: str, b: str) -> int:
    """Returns -1, 0 or 1; missing trailing components compare as 0."""
    for x, y in zip_longest(version_components(a), version_components(b), fillvalue=0):
        if x < y:
            return -1
        if x > y:
            return 1
    return 0


def version_less(a: str, b: str) -> bool:
    return compare_versions(a, b) < 0


def version_equal(a: str, b: str) -> bool:
    return compare_versions(a, b) == 0
