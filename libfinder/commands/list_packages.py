import click
from .. import config as config_module
from ..cli_logger import logger

@click.command(name="list-packages")
@click.pass_context
def list_packages(ctx):
    """List the packages configured in libfinder.toml."""
    conf = config_module.load_config(path=ctx.obj["path"])
    specs = config_module.get_package_specs(conf)
    if not specs:
        logger.info("No packages configured. Add [packages.<Name>] tables to libfinder.toml.")
        return

    for name, spec in sorted(specs.items()):
        flags = []
        if spec.get("version"):
            op = "==" if spec.get("exact") else ">="
            flags.append(f"{op} {spec['version']}")
        flags.append("required" if spec.get("required") else "optional")
        logger.info(f"{name} ({', '.join(flags)})")
        for var in spec.get("includes", {}):
            logger.step_info(f"include: {var}", indent=4)
        for var in spec.get("libraries", {}):
            logger.step_info(f"library: {var}", indent=4)
        for dep in spec.get("depends", []):
            logger.step_info(f"depends: {dep}", indent=4)
