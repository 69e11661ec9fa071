"""Production installer that shells out to `uv add`.

Each package is added with `uv add <id>==<version> --no-sync`, which records
the requirement in pyproject.toml without installing it into the
environment. The call is bounded by a wall-clock timeout; a hung installer is
killed and reported as a failure.
"""

import logging
import shutil
import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path

from apiref.core.errors import DependencyInstallError
from apiref.integrations.installer.abc import DependencyInstaller

logger = logging.getLogger(__name__)

DEFAULT_INSTALL_TIMEOUT_SECONDS = 20


class UvDependencyInstaller(DependencyInstaller):
    """Install packages by running the configured installer command.

    Args:
        command: Installer executable and any leading arguments (default: ("uv",))
        timeout_seconds: Per-package wall-clock limit
    """

    def __init__(
        self,
        *,
        command: Sequence[str] = ("uv",),
        timeout_seconds: float = DEFAULT_INSTALL_TIMEOUT_SECONDS,
    ) -> None:
        self._command = tuple(command)
        self._timeout_seconds = timeout_seconds

    def build_args(self, package_id: str, version: str) -> list[str]:
        """Build the argument list for adding one package."""
        return [*self._command, "add", f"{package_id}=={version}", "--no-sync"]

    def install(self, project_dir: Path, packages: Mapping[str, str]) -> None:
        if not packages:
            return

        executable = self._command[0]
        if shutil.which(executable) is None:
            first_package = next(iter(packages))
            raise DependencyInstallError(first_package, f"{executable} was not found on the PATH.")

        for package_id, version in packages.items():
            self._install_one(project_dir, package_id, version)

    def _install_one(self, project_dir: Path, package_id: str, version: str) -> None:
        args = self.build_args(package_id, version)
        logger.debug("Running %s in %s", " ".join(args), project_dir)
        try:
            result = subprocess.run(
                args,
                cwd=project_dir,
                capture_output=True,
                text=True,
                encoding="utf-8",
                check=False,
                timeout=self._timeout_seconds,
            )
        except subprocess.TimeoutExpired as e:
            raise DependencyInstallError(
                package_id,
                f"Adding package `{package_id}` to `{project_dir}` took longer than "
                f"{self._timeout_seconds:g} seconds.",
                stdout=_as_text(e.stdout),
                stderr=_as_text(e.stderr),
            ) from e
        except FileNotFoundError as e:
            raise DependencyInstallError(
                package_id, f"{self._command[0]} was not found on the PATH."
            ) from e

        if result.returncode != 0:
            raise DependencyInstallError(
                package_id,
                f"Could not add package `{package_id}` to `{project_dir}` "
                f"(exit code {result.returncode}).",
                stdout=result.stdout or "",
                stderr=result.stderr or "",
            )


def _as_text(output: str | bytes | None) -> str:
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode("utf-8", errors="replace")
    return output
