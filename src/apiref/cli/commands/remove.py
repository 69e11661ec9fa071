"""Remove command: drop OpenAPI references from a project."""

import click

from apiref.cli.commands.options import project_option
from apiref.cli.ensure import Ensure
from apiref.cli.error_boundary import cli_error_boundary
from apiref.cli.project_file import resolve_project_file
from apiref.core.context import ApiRefContext


@click.command("remove")
@click.argument("source")
@project_option
@click.pass_obj
@cli_error_boundary
def remove(ctx: ApiRefContext, source: str, project: str | None) -> None:
    """Remove references matching SOURCE (a source URL or a local path).

    Files that apiref downloaded for URL references are deleted as well.
    Local files and projects referenced with `add file` or `add project` are
    left on disk.
    """
    project_file = resolve_project_file(ctx.cwd, project)
    store = ctx.reference_store(project_file)

    entries = Ensure.not_empty(
        store.find(source),
        f"No reference to '{source}' found in '{project_file}'.",
    )

    fetcher = ctx.fetcher()
    for entry in entries:
        store.unregister(entry)
        if entry.source_url is not None:
            downloaded = fetcher.resolve_destination(entry.include)
            if downloaded.exists():
                downloaded.unlink()
                ctx.feedback.info(f"Deleted {downloaded}")
        ctx.feedback.success(f"✓ Removed reference to {entry.include} from {project_file}")
