"""Options shared by several commands."""

import click

from apiref.core.generators import CODE_GENERATORS, DEFAULT_CODE_GENERATOR

project_option = click.option(
    "-p",
    "--project",
    "project",
    type=click.Path(),
    default=None,
    help="The project file to update. Defaults to pyproject.toml in the current directory.",
)

code_generator_option = click.option(
    "-c",
    "--code-generator",
    "code_generator",
    default=None,
    help=(
        f"The code generator to use ({', '.join(CODE_GENERATORS)}). "
        f"Defaults to '{DEFAULT_CODE_GENERATOR}'."
    ),
)
