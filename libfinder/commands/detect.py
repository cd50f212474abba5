import click
import json
from .. import config as config_module
from ..cache import CacheStore
from ..cli_logger import logger
from ..decorators import handle_exceptions
from ..finder import run_from_config


def parse_define(define):
    """Parses a -D NAME=VALUE override."""
    name, sep, value = define.partition("=")
    name = name.strip()
    if not sep or not name:
        raise click.BadParameter(f"'{define}' is not of the form NAME=VALUE", param_hint="-D")
    return name, value.strip()


def _print_summary(run, names):
    logger.info("Detection summary:")
    for name in names:
        outcome = run.get_outcome(name)
        if outcome is None:
            continue
        if outcome.found:
            version = f" {outcome.version}" if outcome.version else ""
            logger.step_info(f"{name}{version}: found", indent=2)
        else:
            logger.step_info(f"{name}: NOT found ({outcome.reason.value})", indent=2)


@click.command()
@click.argument("names", nargs=-1)
@click.option("-D", "defines", multiple=True, metavar="NAME=VALUE",
              help="Set a cached option value (e.g. FOO_INCLUDE_DIR=/opt/foo/include).")
@click.option("--quiet", "-q", is_flag=True, help="Only report required packages that are missing.")
@click.option("--json", "as_json", is_flag=True, help="Print the detection outcomes as JSON.")
@click.pass_context
@handle_exceptions
def detect(ctx, names, defines, quiet, as_json):
    """Detect the packages configured in libfinder.toml (all of them if no NAMES are given)."""
    path = ctx.obj["path"]
    conf = config_module.load_config(path=path)
    if not conf:
        logger.error("Error: No libfinder.toml found or it is empty.")
        return

    overrides = [parse_define(d) for d in defines]

    cache = CacheStore.load(path)
    for name, value in overrides:
        cache.set_value(name, value)

    specs = config_module.get_package_specs(conf)
    selected = list(names) or list(specs)
    if not selected:
        logger.warning("No packages configured in libfinder.toml.")
        return

    run = run_from_config(conf, cache=cache)
    try:
        for name in selected:
            spec = specs.get(name, {})
            run.find_package(
                name,
                version=spec.get("version"),
                exact=bool(spec.get("exact", False)),
                required=bool(spec.get("required", False)),
                quiet=quiet,
            )
    finally:
        cache.save()

    if as_json:
        click.echo(json.dumps([run.get_outcome(n).to_dict() for n in selected], indent=4))
    elif not quiet:
        _print_summary(run, selected)
