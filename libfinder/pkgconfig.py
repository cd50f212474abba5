import shlex
from dataclasses import dataclass, field
from typing import Optional

from .utils.command_executor import run_shell_command

PKG_CONFIG = "pkg-config"


@dataclass
class PkgConfigResult:
    module: str
    version: Optional[str] = None
    include_dirs: list[str] = field(default_factory=list)
    library_dirs: list[str] = field(default_factory=list)
    libraries: list[str] = field(default_factory=list)


def _query(module, *flags):
    stdout, _, code = run_shell_command([PKG_CONFIG, *flags, module], quiet=True)
    if code != 0:
        return None
    return stdout.strip()


def pkg_check_modules(module) -> Optional[PkgConfigResult]:
    """
    Queries pkg-config for `module`, always quietly.

    Returns None when pkg-config is not installed or does not know the module.
    The result is only a hint for find_path()/find_library().
    """
    if _query(module, "--exists") is None:
        return None

    result = PkgConfigResult(module=module, version=_query(module, "--modversion") or None)

    cflags = _query(module, "--cflags-only-I") or ""
    for token in shlex.split(cflags):
        if token.startswith("-I") and len(token) > 2:
            result.include_dirs.append(token[2:])

    libs = _query(module, "--libs") or ""
    for token in shlex.split(libs):
        if token.startswith("-L") and len(token) > 2:
            result.library_dirs.append(token[2:])
        elif token.startswith("-l") and len(token) > 2:
            result.libraries.append(token[2:])
    return result
