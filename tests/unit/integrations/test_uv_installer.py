"""Tests for UvDependencyInstaller with subprocess mocked out."""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from apiref.core.errors import DependencyInstallError
from apiref.integrations.installer import UvDependencyInstaller

PACKAGES = {"openapi-python-client": "0.21.5", "httpx": "0.27.2"}


def _completed(returncode: int = 0, stdout: str = "", stderr: str = "") -> subprocess.CompletedProcess[str]:
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


@patch("apiref.integrations.installer.real.shutil.which", return_value="/usr/bin/uv")
@patch("apiref.integrations.installer.real.subprocess.run")
def test_install_adds_each_package(mock_run: MagicMock, _which: MagicMock, tmp_path: Path) -> None:
    mock_run.return_value = _completed()

    UvDependencyInstaller(timeout_seconds=5).install(tmp_path, PACKAGES)

    assert [c.args[0] for c in mock_run.call_args_list] == [
        ["uv", "add", "openapi-python-client==0.21.5", "--no-sync"],
        ["uv", "add", "httpx==0.27.2", "--no-sync"],
    ]
    for call in mock_run.call_args_list:
        assert call.kwargs["cwd"] == tmp_path
        assert call.kwargs["timeout"] == 5
        assert call.kwargs["check"] is False


def test_build_args_with_custom_command() -> None:
    installer = UvDependencyInstaller(command=("python", "-m", "uv"))

    assert installer.build_args("attrs", "24.2.0") == ["python", "-m", "uv", "add", "attrs==24.2.0", "--no-sync"]


@patch("apiref.integrations.installer.real.shutil.which", return_value="/usr/bin/uv")
@patch("apiref.integrations.installer.real.subprocess.run")
def test_nonzero_exit_stops_and_carries_output(mock_run: MagicMock, _which: MagicMock, tmp_path: Path) -> None:
    mock_run.return_value = _completed(2, stdout="Resolving...\n", stderr="No solution found\n")

    with pytest.raises(DependencyInstallError) as exc_info:
        UvDependencyInstaller().install(tmp_path, PACKAGES)

    error = exc_info.value
    assert error.package_id == "openapi-python-client"
    assert str(error) == f"Could not add package `openapi-python-client` to `{tmp_path}` (exit code 2)."
    assert error.stdout == "Resolving...\n"
    assert error.stderr == "No solution found\n"
    assert mock_run.call_count == 1


@patch("apiref.integrations.installer.real.shutil.which", return_value="/usr/bin/uv")
@patch("apiref.integrations.installer.real.subprocess.run")
def test_timeout_is_reported(mock_run: MagicMock, _which: MagicMock, tmp_path: Path) -> None:
    mock_run.side_effect = subprocess.TimeoutExpired(cmd=["uv"], timeout=20, output=b"partial")

    with pytest.raises(DependencyInstallError) as exc_info:
        UvDependencyInstaller().install(tmp_path, {"httpx": "0.27.2"})

    assert str(exc_info.value) == f"Adding package `httpx` to `{tmp_path}` took longer than 20 seconds."
    assert exc_info.value.stdout == "partial"


@patch("apiref.integrations.installer.real.shutil.which", return_value=None)
@patch("apiref.integrations.installer.real.subprocess.run")
def test_missing_executable(mock_run: MagicMock, _which: MagicMock, tmp_path: Path) -> None:
    with pytest.raises(DependencyInstallError, match="uv was not found on the PATH"):
        UvDependencyInstaller().install(tmp_path, PACKAGES)

    mock_run.assert_not_called()


@patch("apiref.integrations.installer.real.subprocess.run")
def test_no_packages_runs_nothing(mock_run: MagicMock, tmp_path: Path) -> None:
    UvDependencyInstaller().install(tmp_path, {})

    mock_run.assert_not_called()
