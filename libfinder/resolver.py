from .cli_logger import logger
from .errors import RequiredPackageNotFound
from .messages import choose_reason, fatal_message, format_items, primary_message, warning_message
from .models import OutcomeState, ResolutionOutcome, VisibilityDirective
from .versioning import version_equal, version_less


def process(context, run=None):
    """
    Final processing once the probe items of a package have been detected.

    Aggregates the include and library items of `context`, checks the version
    constraint and returns a ResolutionOutcome. When `run` is given, a prefix it
    already has as found is returned untouched, and the new outcome (with its
    visibility directives) is recorded into it.

    Raises RequiredPackageNotFound when detection fails for a required package.
    """
    prefix = context.prefix
    if run is not None:
        previous = run.get_outcome(prefix)
        if previous is not None and previous.found:
            return previous

    found = True
    missing_headers = False
    version_unsuitable = False

    info = context.version_info
    version = info.version
    min_version = info.min_version

    config_items = []
    includes = []
    libs = []

    for item in context.include_items:
        config_items.append(item)
        if item.found:
            includes.append(item.path)
        else:
            found = False
            missing_headers = True

    for item in context.library_items:
        config_items.append(item)
        if item.found:
            libs.append(item.path)
        else:
            found = False

    if found and min_version:
        if not version:
            logger.warning(
                f"Author warning: the find module for {prefix} does not provide version information. "
                "Either fix the module or remove any version requirements."
            )
            found = False
        elif version_less(version, min_version) or (info.exact and not version_equal(version, min_version)):
            found = False
            version_unsuitable = True

    if found:
        outcome = ResolutionOutcome(
            prefix=prefix,
            state=OutcomeState.FOUND,
            include_dirs=includes,
            libraries=libs,
            version=version,
            directives=[VisibilityDirective(item.name, False) for item in config_items if item.option],
        )
        if run is not None:
            run.record(outcome)
        if not context.quiet:
            logger.info(f"Found {prefix} {version or ''}".rstrip())
        return outcome

    listing, some_files = format_items(config_items)
    reason = choose_reason(version_unsuitable, missing_headers, some_files)
    msg = primary_message(reason, prefix, version=version, min_version=min_version, exact=info.exact)
    project_name = run.project_name if run is not None else None

    if context.required:
        state = OutcomeState.NOT_FOUND_FATAL
        message = fatal_message(msg, listing, project_name)
    else:
        state = OutcomeState.NOT_FOUND_OPTIONAL
        message = warning_message(msg, listing, project_name)

    outcome = ResolutionOutcome(
        prefix=prefix,
        state=state,
        directives=[VisibilityDirective(item.name, True) for item in config_items if item.option],
        reason=reason,
        message=message,
    )
    if run is not None:
        run.record(outcome)

    if context.required:
        raise RequiredPackageNotFound(outcome)
    if not context.quiet:
        logger.warning(message)
    return outcome
