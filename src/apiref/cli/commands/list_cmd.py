"""List command: show the references recorded in a project."""

import click
from rich.console import Console
from rich.table import Table

from apiref.cli.commands.options import project_option
from apiref.cli.error_boundary import cli_error_boundary
from apiref.cli.output import user_output
from apiref.cli.project_file import resolve_project_file
from apiref.core.context import ApiRefContext
from apiref.core.references import CODE_GENERATOR_KEY


@click.command("list")
@project_option
@click.pass_obj
@cli_error_boundary
def list_references(ctx: ApiRefContext, project: str | None) -> None:
    """List OpenAPI references in the project."""
    project_file = resolve_project_file(ctx.cwd, project)
    entries = ctx.reference_store(project_file).list_references()

    if not entries:
        user_output(f"No OpenAPI references found in {project_file}")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("kind", no_wrap=True)
    table.add_column("include", style="cyan", no_wrap=True)
    table.add_column("source", no_wrap=True)
    table.add_column("generator", no_wrap=True)

    for entry in entries:
        table.add_row(
            entry.tag,
            entry.include,
            entry.source_url or "[dim]-[/dim]",
            entry.metadata.get(CODE_GENERATOR_KEY, "[dim]-[/dim]"),
        )

    # Output table to stderr (consistent with user_output convention)
    console = Console(stderr=True, width=200, force_terminal=True)
    console.print(table)
