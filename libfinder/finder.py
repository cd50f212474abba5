"""Detection runs and find modules.

A find module is a callable ``module(context, run)`` that probes for the
package's files, fills the PackageContext and returns ``process(context, run)``.
Modules are registered on a DetectionRun, either as Python functions or built
from a [packages.<Name>] table of libfinder.toml by declarative_module().
"""

from .cache import CacheStore
from .config import get_package_specs, get_project_name
from .cli_logger import logger
from .errors import RequiredPackageNotFound
from .forwarder import find_dependency
from .messages import fatal_message, warning_message
from .models import OutcomeState, PackageContext, ResolutionOutcome, VersionInfo, FailureReason
from .pkgconfig import pkg_check_modules
from .probe import find_library, find_path
from .resolver import process
from .version_header import extract_version


class DetectionRun:
    """State shared by every package detected during one configuration run."""

    def __init__(self, project_name=None, cache=None):
        self.project_name = project_name
        self.cache = cache if cache is not None else CacheStore()
        self.outcomes = {}
        self.visibility = {}
        self.modules = {}
        self.constraints = {}

    def register_module(self, name, module, version=None, exact=False):
        """Registers a find module, with the version constraint configured for it."""
        self.modules[name] = module
        if version:
            self.constraints[name] = (str(version), bool(exact))

    def get_outcome(self, prefix):
        return self.outcomes.get(prefix)

    def is_found(self, prefix):
        outcome = self.outcomes.get(prefix)
        return outcome is not None and outcome.found

    def record(self, outcome):
        self.outcomes[outcome.prefix] = outcome
        for directive in outcome.directives:
            self.visibility[directive.name] = directive.visible
        self.cache.apply(outcome.directives)

    def find_package(self, name, version=None, exact=False, required=False, quiet=False):
        """
        Runs the find module registered for `name` and returns its outcome.

        Without an explicit `version`, the constraint registered for the
        module applies, so a package first reached as a dependency is still
        checked against its own configured version.
        """
        if not version and name in self.constraints:
            version, exact = self.constraints[name]
        previous = self.get_outcome(name)
        if previous is not None and previous.found:
            return previous

        module = self.modules.get(name)
        if module is None:
            return self._missing_module(name, required, quiet)

        context = PackageContext(
            prefix=name,
            version_info=VersionInfo(min_version=str(version) if version else None, exact=exact),
            required=required,
            quiet=quiet,
        )
        return module(context, self)

    def _missing_module(self, name, required, quiet):
        msg = f"No find module is registered for {name}; we were unable to find package {name}."
        listing = f"Known packages: {', '.join(sorted(self.modules)) or '(none)'}\n"
        if required:
            outcome = ResolutionOutcome(
                prefix=name,
                state=OutcomeState.NOT_FOUND_FATAL,
                reason=FailureReason.NOT_FOUND,
                message=fatal_message(msg, listing, self.project_name),
            )
            self.record(outcome)
            raise RequiredPackageNotFound(outcome)

        outcome = ResolutionOutcome(
            prefix=name,
            state=OutcomeState.NOT_FOUND_OPTIONAL,
            reason=FailureReason.NOT_FOUND,
            message=warning_message(msg, listing, self.project_name),
        )
        self.record(outcome)
        if not quiet:
            logger.warning(outcome.message)
        return outcome


def _as_list(value):
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


def _numbered(name, paths):
    if len(paths) == 1:
        return [(name, paths[0])]
    return [(f"{name}_{i}", path) for i, path in enumerate(paths, 1)]


def declarative_module(spec):
    """
    Builds a find module from a package table.

    Recognised keys: includes ({VAR = file or [files]}), libraries
    ({VAR = name or [names]}), pkg_config, hints, path_suffixes,
    version_header, version_define (name or [names], tried in order) and
    depends (package names, detected with the caller's required flag).
    """
    def module(context, run):
        include_hints = _as_list(spec.get("hints"))
        library_hints = _as_list(spec.get("hints"))
        pc = None
        if spec.get("pkg_config"):
            pc = pkg_check_modules(spec["pkg_config"])
            if pc is not None:
                include_hints = pc.include_dirs + include_hints
                library_hints = pc.library_dirs + library_hints

        suffixes = _as_list(spec.get("path_suffixes"))
        for var, files in spec.get("includes", {}).items():
            context.add_item(find_path(var, _as_list(files), hints=include_hints,
                                       suffixes=suffixes, cache=run.cache))
        for var, names in spec.get("libraries", {}).items():
            context.add_item(find_library(var, _as_list(names), hints=library_hints, cache=run.cache))

        for dependency in _as_list(spec.get("depends")):
            dep_outcome = find_dependency(context, run.find_package, dependency)
            if dep_outcome.found:
                for name, path in _numbered(f"{dependency}_INCLUDE_DIRS", dep_outcome.include_dirs):
                    context.add_include(name, path, option=False)
                for name, path in _numbered(f"{dependency}_LIBRARIES", dep_outcome.libraries):
                    context.add_library(name, path, option=False)
            else:
                context.add_library(f"{dependency}_LIBRARIES", option=False)

        header = spec.get("version_header")
        if header:
            defines = _as_list(spec.get("version_define"))
            for define in defines[:-1]:
                extract_version(context, header, define, quiet=True)
            if defines:
                extract_version(context, header, defines[-1])
        if not context.version and pc is not None and pc.version:
            context.version = pc.version

        return process(context, run)

    return module


def run_from_config(conf, cache=None):
    """Creates a DetectionRun with one declarative module per configured package."""
    run = DetectionRun(project_name=get_project_name(conf), cache=cache)
    for name, spec in get_package_specs(conf).items():
        run.register_module(name, declarative_module(spec),
                            version=spec.get("version"), exact=spec.get("exact", False))
    return run
