"""Domain errors raised by apiref operations.

Every error the CLI knows how to report derives from ApiRefError. The error
boundary in apiref.cli.error_boundary turns these into a one-line message and
exit code 1. Duplicate references are not errors: they are reported as
warnings and the command still succeeds.
"""

from pathlib import Path
from typing import Literal

DownloadFailureReason = Literal["network", "conflict", "io"]


class ApiRefError(Exception):
    """Base class for user-facing apiref failures."""


class ValidationError(ApiRefError):
    """Invalid arguments; raised before any side effect is attempted."""


class DependencyInstallError(ApiRefError):
    """The package installer was missing, timed out, or exited non-zero.

    Attributes:
        package_id: Package that was being installed
        stdout: Captured stdout of the failed process (may be empty)
        stderr: Captured stderr of the failed process (may be empty)
    """

    def __init__(self, package_id: str, message: str, *, stdout: str = "", stderr: str = "") -> None:
        super().__init__(message)
        self.package_id = package_id
        self.stdout = stdout
        self.stderr = stderr


class DownloadError(ApiRefError):
    """Downloading a remote document to its local destination failed.

    Attributes:
        reason: "network" for transport failures, "conflict" when the existing
            file differs from the download and overwrite was not requested,
            "io" for local filesystem failures
        destination: Absolute destination path of the download
    """

    def __init__(self, message: str, *, reason: DownloadFailureReason, destination: Path) -> None:
        super().__init__(message)
        self.reason = reason
        self.destination = destination
