"""Filesystem probing for header directories and library files.

Both helpers return a ProbeItem. A value already held by the cache (a
previous run, or a user override) is used as-is without searching again.
"""

import glob
import os

from .models import ItemRole, ProbeItem

PREFIX_PATH_ENV = "LIBFINDER_PREFIX_PATH"

DEFAULT_PREFIXES = ["/usr/local", "/usr", "/opt/local", "/opt/homebrew"]
LIB_SUBDIRS = ["lib", "lib64", "lib/x86_64-linux-gnu", "lib/aarch64-linux-gnu"]

LIBRARY_PATTERNS = ["lib{name}.so", "lib{name}.dylib", "lib{name}.a", "{name}.lib", "lib{name}.so.*"]


def _prefixes():
    env = os.environ.get(PREFIX_PATH_ENV, "")
    extra = [p for p in env.split(os.pathsep) if p]
    return extra + DEFAULT_PREFIXES


def default_include_dirs():
    return [os.path.join(prefix, "include") for prefix in _prefixes()]


def default_library_dirs():
    return [os.path.join(prefix, sub) for prefix in _prefixes() for sub in LIB_SUBDIRS]


def _cached(name, role, cache):
    if cache is None:
        return None
    value = cache.get_value(name)
    if value:
        return ProbeItem(name, value, role)
    return None


def find_path(name, files, hints=(), suffixes=(), cache=None):
    """
    Finds a directory containing one of `files`.

    Searches `hints` and then the default include directories, each also with
    every path suffix appended (e.g. "foo" for /usr/include/foo/foo.h).
    """
    cached = _cached(name, ItemRole.INCLUDE, cache)
    if cached is not None:
        return cached

    if isinstance(files, str):
        files = [files]
    subdirs = [""] + list(suffixes)
    for base in list(hints) + default_include_dirs():
        for sub in subdirs:
            directory = os.path.join(base, sub) if sub else base
            for filename in files:
                if os.path.isfile(os.path.join(directory, filename)):
                    item = ProbeItem(name, directory, ItemRole.INCLUDE)
                    if cache is not None:
                        cache.set_value(name, directory)
                    return item
    return ProbeItem(name, role=ItemRole.INCLUDE)


def _library_candidates(directory, lib_name):
    if os.sep in lib_name or os.path.splitext(lib_name)[1]:
        yield os.path.join(directory, lib_name)
        return
    for pattern in LIBRARY_PATTERNS:
        candidate = os.path.join(directory, pattern.format(name=lib_name))
        if "*" in candidate:
            yield from sorted(glob.glob(candidate))
        else:
            yield candidate


def find_library(name, names, hints=(), cache=None):
    """Finds the first library file matching one of `names`."""
    cached = _cached(name, ItemRole.LIBRARY, cache)
    if cached is not None:
        return cached

    if isinstance(names, str):
        names = [names]
    for lib_name in names:
        for directory in list(hints) + default_library_dirs():
            for candidate in _library_candidates(directory, lib_name):
                if os.path.isfile(candidate):
                    if cache is not None:
                        cache.set_value(name, candidate)
                    return ProbeItem(name, candidate, ItemRole.LIBRARY)
    return ProbeItem(name, role=ItemRole.LIBRARY)
