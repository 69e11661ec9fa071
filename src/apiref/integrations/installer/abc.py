"""Package installation interface.

Adding a code generator's packages to a project is delegated to an external
tool. This interface lets the registration workflow be tested with an
in-memory fake that records requested packages.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path


class DependencyInstaller(ABC):
    """Abstract package installer for dependency injection."""

    @abstractmethod
    def install(self, project_dir: Path, packages: Mapping[str, str]) -> None:
        """Add each package at its pinned version to the project.

        Packages are installed one at a time, in mapping order. The first
        failure stops the remaining installs.

        Args:
            project_dir: Directory containing the project manifest; used as
                the working directory of the installer
            packages: Mapping of package id to version

        Raises:
            DependencyInstallError: If the installer is missing, times out,
                or exits non-zero
        """
        ...
