"""Tests for the refresh command."""

from click.testing import CliRunner

from apiref.cli.cli import cli
from tests.fakes.http import FakeHttpClient
from tests.test_utils.env_helpers import simulated_project_env

SOURCE_URL = "https://api.example.com/openapi.json"
PYPROJECT_WITH_REFERENCE = f"""\
[project]
name = "demo-client"

[[tool.apiref.openapi-reference]]
include = "openapi/openapi.json"
source_url = "{SOURCE_URL}"
code_generator = "openapi-python-client"
"""


def test_refresh_overwrites_local_changes() -> None:
    runner = CliRunner()
    with simulated_project_env(runner, pyproject=PYPROJECT_WITH_REFERENCE) as env:
        local_copy = env.cwd / "openapi" / "openapi.json"
        local_copy.parent.mkdir()
        local_copy.write_bytes(b'{"edited": true}')
        ctx = env.build_context(http=FakeHttpClient(responses={SOURCE_URL: b'{"openapi": "3.1.0"}'}))

        result = runner.invoke(cli, ["refresh", SOURCE_URL], obj=ctx)

        assert result.exit_code == 0, result.output
        assert local_copy.read_bytes() == b'{"openapi": "3.1.0"}'
        assert env.feedback.by_level("success") == [f"✓ Refreshed {local_copy}"]


def test_refresh_restores_deleted_copy() -> None:
    runner = CliRunner()
    with simulated_project_env(runner, pyproject=PYPROJECT_WITH_REFERENCE) as env:
        ctx = env.build_context(http=FakeHttpClient(responses={SOURCE_URL: b"{}"}))

        result = runner.invoke(cli, ["refresh", SOURCE_URL], obj=ctx)

        assert result.exit_code == 0, result.output
        assert (env.cwd / "openapi" / "openapi.json").read_bytes() == b"{}"


def test_refresh_unknown_url() -> None:
    runner = CliRunner()
    with simulated_project_env(runner, pyproject=PYPROJECT_WITH_REFERENCE) as env:
        other = "https://other.example.com/openapi.json"

        result = runner.invoke(cli, ["refresh", other], obj=env.build_context())

        assert result.exit_code == 1
        assert f"No reference to '{other}' found in '{env.project_file}'." in result.output


def test_refresh_rejects_non_url() -> None:
    runner = CliRunner()
    with simulated_project_env(runner, pyproject=PYPROJECT_WITH_REFERENCE) as env:
        result = runner.invoke(cli, ["refresh", "openapi/openapi.json"], obj=env.build_context())

        assert result.exit_code == 1
        assert "source-URL was not valid. Valid values are URLs" in result.output


def test_refresh_network_failure_keeps_local_copy() -> None:
    runner = CliRunner()
    with simulated_project_env(runner, pyproject=PYPROJECT_WITH_REFERENCE) as env:
        local_copy = env.cwd / "openapi" / "openapi.json"
        local_copy.parent.mkdir()
        local_copy.write_bytes(b'{"old": true}')

        result = runner.invoke(cli, ["refresh", SOURCE_URL], obj=env.build_context(http=FakeHttpClient()))

        assert result.exit_code == 1
        assert "Error: " in result.output
        assert local_copy.read_bytes() == b'{"old": true}'
