import click
from .commands import *


@click.group()
@click.option("--path", "-p", default=".", help="Path to the project directory.")
@click.pass_context
def cli(ctx, path):
    """libfinder: detect external packages and report what is missing."""
    ctx.obj = {"path": path}

cli.add_command(detect)
cli.add_command(list_packages)
cli.add_command(cache)
cli.add_command(log)
cli.add_command(version)

if __name__ == '__main__':
    cli()
