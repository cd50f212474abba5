from .errors import LibFinderError, RequiredPackageNotFound
from .finder import DetectionRun, declarative_module, run_from_config
from .forwarder import find_dependency
from .models import (
    NOT_FOUND,
    FailureReason,
    ItemRole,
    OutcomeState,
    PackageContext,
    ProbeItem,
    ResolutionOutcome,
    VersionInfo,
    VisibilityDirective,
)
from .resolver import process
from .version_header import extract_version
from .versioning import compare_versions

__all__ = [
    "LibFinderError",
    "RequiredPackageNotFound",
    "DetectionRun",
    "declarative_module",
    "run_from_config",
    "find_dependency",
    "NOT_FOUND",
    "FailureReason",
    "ItemRole",
    "OutcomeState",
    "PackageContext",
    "ProbeItem",
    "ResolutionOutcome",
    "VersionInfo",
    "VisibilityDirective",
    "process",
    "extract_version",
    "compare_versions",
]
