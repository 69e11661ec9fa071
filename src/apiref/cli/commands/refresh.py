"""Refresh command: re-download referenced OpenAPI files."""

import click

from apiref.cli.commands.options import project_option
from apiref.cli.ensure import Ensure
from apiref.cli.error_boundary import cli_error_boundary
from apiref.cli.project_file import resolve_project_file
from apiref.core.context import ApiRefContext
from apiref.core.references import OPENAPI_REFERENCE
from apiref.core.urls import is_remote_url


@click.command("refresh")
@click.argument("source_url", metavar="SOURCE-URL")
@project_option
@click.pass_obj
@cli_error_boundary
def refresh(ctx: ApiRefContext, source_url: str, project: str | None) -> None:
    """Re-download SOURCE-URL over every local copy referencing it.

    Unlike `apiref add url`, local changes to the downloaded file are
    overwritten.
    """
    Ensure.invariant(is_remote_url(source_url), "source-URL was not valid. Valid values are URLs")

    project_file = resolve_project_file(ctx.cwd, project)
    store = ctx.reference_store(project_file)

    entries = Ensure.not_empty(
        [entry for entry in store.list_references(OPENAPI_REFERENCE) if entry.source_url == source_url],
        f"No reference to '{source_url}' found in '{project_file}'.",
    )

    fetcher = ctx.fetcher()
    for entry in entries:
        outcome = fetcher.fetch(source_url, entry.include, overwrite=True)
        ctx.feedback.success(f"✓ Refreshed {outcome.destination}")
