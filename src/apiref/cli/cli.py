import logging

import click

from apiref.cli.commands.add import add_group
from apiref.cli.commands.list_cmd import list_references
from apiref.cli.commands.refresh import refresh
from apiref.cli.commands.remove import remove
from apiref.cli.error_boundary import cli_error_boundary
from apiref.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="apiref")
@click.option("--debug", is_flag=True, help="Show debug logging and full stack traces for errors.")
@click.option("--quiet", "-q", is_flag=True, help="Only show warnings and errors.")
@click.pass_context
def cli(ctx: click.Context, debug: bool, quiet: bool) -> None:
    """Manage OpenAPI references in a Python project."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = cli_error_boundary(create_context)(quiet=quiet)


cli.add_command(add_group)
cli.add_command(list_references)
cli.add_command(refresh)
cli.add_command(remove)


def main() -> None:
    """CLI entry point used by the `apiref` console script."""
    cli()
