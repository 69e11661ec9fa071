"""Add commands: register OpenAPI references in a project."""

import click

from apiref.cli.commands.options import code_generator_option, project_option
from apiref.cli.error_boundary import cli_error_boundary
from apiref.cli.project_file import resolve_project_file
from apiref.core.context import ApiRefContext
from apiref.core.generators import validate_code_generator
from apiref.core.workflow import ReferenceKind, RegistrationRequest, default_output_file


def _register(
    ctx: ApiRefContext,
    kind: ReferenceKind,
    source: str | None,
    code_generator: str | None,
    project: str | None,
    output_file: str | None = None,
) -> None:
    generator = validate_code_generator(code_generator)
    project_file = resolve_project_file(ctx.cwd, project)

    workflow = ctx.registration_workflow(project_file)
    result = workflow.run(
        RegistrationRequest(
            kind=kind,
            source=source,
            project_dir=project_file.parent,
            code_generator=generator,
            output_file=output_file,
        )
    )
    if result.exit_code != 0:
        raise SystemExit(result.exit_code)


@click.group("add")
def add_group() -> None:
    """Add an OpenAPI reference to a project."""


@add_group.command("url")
@click.argument("source_url", metavar="SOURCE-URL", required=False)
@click.option(
    "--output-file",
    default=None,
    help=f"The destination to download the remote OpenAPI file to. Defaults to '{default_output_file()}'.",
)
@code_generator_option
@project_option
@click.pass_obj
@cli_error_boundary
def add_url(
    ctx: ApiRefContext,
    source_url: str | None,
    output_file: str | None,
    code_generator: str | None,
    project: str | None,
) -> None:
    """Download a remote OpenAPI file and reference it.

    SOURCE-URL must be an absolute http(s) URL. Re-running the command for a
    URL that is already referenced is safe: an identical local copy is left
    alone and the duplicate reference is reported as a warning. A local copy
    that was modified is never overwritten; use `apiref refresh` for that.

    Examples:

        apiref add url https://petstore3.swagger.io/api/v3/openapi.json

        apiref add url https://example.com/openapi.json --output-file specs/example.json
    """
    _register(ctx, "url", source_url, code_generator, project, output_file=output_file)


@add_group.command("file")
@click.argument("source_file", metavar="SOURCE-FILE", required=False)
@code_generator_option
@project_option
@click.pass_obj
@cli_error_boundary
def add_file(
    ctx: ApiRefContext,
    source_file: str | None,
    code_generator: str | None,
    project: str | None,
) -> None:
    """Reference an OpenAPI file that already exists locally."""
    _register(ctx, "file", source_file, code_generator, project)


@add_group.command("project")
@click.argument("project_path", metavar="PROJECT-PATH", required=False)
@code_generator_option
@project_option
@click.pass_obj
@cli_error_boundary
def add_project(
    ctx: ApiRefContext,
    project_path: str | None,
    code_generator: str | None,
    project: str | None,
) -> None:
    """Reference another project whose OpenAPI document is generated at build time."""
    _register(ctx, "project", project_path, code_generator, project)
