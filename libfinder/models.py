"""Data model shared by the probing helpers, the resolver and the CLI.

Every package detection works on a PackageContext: a find module fills in
the include and library ProbeItems (and perhaps a version), then hands the
context to process(), which returns a ResolutionOutcome.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class _NotFound:
    """Sentinel value of a ProbeItem that did not resolve."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "NOT_FOUND"

    def __bool__(self):
        return False


NOT_FOUND = _NotFound()

NOTFOUND_SUFFIX = "-NOTFOUND"


def is_notfound_value(name: str, value) -> bool:
    """True for the sentinel, empty values and the host's `<NAME>-NOTFOUND` string."""
    if value is NOT_FOUND or value is None or value == "":
        return True
    return isinstance(value, str) and value == f"{name}{NOTFOUND_SUFFIX}"


class ItemRole(Enum):
    INCLUDE = "include"
    LIBRARY = "library"


@dataclass(frozen=True)
class ProbeItem:
    """A named configuration slot holding a resolved path or NOT_FOUND.

    `option` is False for derived values (such as a dependency's paths) that
    are listed in diagnostics but are not user-settable cache entries.
    """

    name: str
    value: object = NOT_FOUND
    role: ItemRole = ItemRole.INCLUDE
    option: bool = True

    @property
    def found(self) -> bool:
        return not is_notfound_value(self.name, self.value)

    @property
    def path(self) -> Optional[str]:
        return str(self.value) if self.found else None

    def display_value(self) -> str:
        if not self.found:
            return f"{self.name}{NOTFOUND_SUFFIX}"
        return str(self.value)


@dataclass
class VersionInfo:
    version: Optional[str] = None
    min_version: Optional[str] = None
    exact: bool = False


@dataclass(frozen=True)
class VisibilityDirective:
    """Hide (visible=False) or reveal a configuration option."""

    name: str
    visible: bool


class FailureReason(Enum):
    VERSION_UNSUITABLE = "version_unsuitable"
    MISSING_HEADERS = "missing_headers"
    SOME_FILES = "some_files"
    NOT_FOUND = "not_found"


class OutcomeState(Enum):
    FOUND = "found"
    NOT_FOUND_OPTIONAL = "not_found_optional"
    NOT_FOUND_FATAL = "not_found_fatal"


@dataclass
class ResolutionOutcome:
    """Terminal result of one package resolution."""

    prefix: str
    state: OutcomeState
    include_dirs: list[str] = field(default_factory=list)
    libraries: list[str] = field(default_factory=list)
    version: Optional[str] = None
    directives: list[VisibilityDirective] = field(default_factory=list)
    reason: Optional[FailureReason] = None
    message: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.state is OutcomeState.FOUND

    def to_dict(self) -> dict:
        return {
            "prefix": self.prefix,
            "state": self.state.value,
            "include_dirs": list(self.include_dirs),
            "libraries": list(self.libraries),
            "version": self.version,
            "reason": self.reason.value if self.reason else None,
        }


@dataclass
class PackageContext:
    """Per-invocation detection state of one package.

    `required` and `quiet` come from the caller of find_package(), as does
    the version constraint in `version_info`.
    """

    prefix: str
    include_items: list[ProbeItem] = field(default_factory=list)
    library_items: list[ProbeItem] = field(default_factory=list)
    version_info: VersionInfo = field(default_factory=VersionInfo)
    required: bool = False
    quiet: bool = False

    @property
    def version(self) -> Optional[str]:
        return self.version_info.version

    @version.setter
    def version(self, value):
        self.version_info.version = value

    def add_include(self, name, value=NOT_FOUND, option=True):
        item = ProbeItem(name, value, ItemRole.INCLUDE, option)
        self.include_items.append(item)
        return item

    def add_library(self, name, value=NOT_FOUND, option=True):
        item = ProbeItem(name, value, ItemRole.LIBRARY, option)
        self.library_items.append(item)
        return item

    def add_item(self, item: ProbeItem):
        if item.role is ItemRole.LIBRARY:
            self.library_items.append(item)
        else:
            self.include_items.append(item)
        return item

    def include_dir(self) -> Optional[str]:
        """The package's main include directory, if one resolved."""
        main_name = f"{self.prefix}_INCLUDE_DIR"
        for item in self.include_items:
            if item.name == main_name:
                return item.path
        for item in self.include_items:
            if item.found:
                return item.path
        return None
