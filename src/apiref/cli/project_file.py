"""Locate the project manifest a command operates on."""

from pathlib import Path

from apiref.core.errors import ValidationError

PROJECT_FILE_NAME = "pyproject.toml"


def resolve_project_file(cwd: Path, project_option: str | None) -> Path:
    """Resolve the pyproject.toml to update.

    Args:
        cwd: Working directory the command was invoked from
        project_option: Value of --project, if given. A directory resolves to
            the pyproject.toml inside it; relative paths resolve against cwd.

    Returns:
        Absolute path of an existing project file

    Raises:
        ValidationError: If the project file does not exist
    """
    if project_option is not None:
        project = Path(project_option)
        if not project.is_absolute():
            project = cwd / project
        if project.is_dir():
            project = project / PROJECT_FILE_NAME
        if not project.is_file():
            raise ValidationError(f"The project '{project}' does not exist.")
        return project

    project = cwd / PROJECT_FILE_NAME
    if not project.is_file():
        raise ValidationError(
            "No project files were found in the current directory. "
            "Either move to a new directory or provide the project explicitly"
        )
    return project
