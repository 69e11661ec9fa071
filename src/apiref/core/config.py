"""User configuration loaded from ~/.apiref/config.toml.

Example config:

    package_version_url = "https://example.com/package-versions.json"
    install_timeout_seconds = 20
    installer_command = ["uv"]
    http_timeout_seconds = 30
"""

import tomllib
from dataclasses import dataclass
from pathlib import Path

from apiref.integrations.installer import DEFAULT_INSTALL_TIMEOUT_SECONDS

DEFAULT_PACKAGE_VERSION_URL = (
    "https://raw.githubusercontent.com/apiref-dev/package-versions/main/package-versions.json"
)
DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class ApiRefConfig:
    """Immutable configuration, loaded once at CLI entry."""

    package_version_url: str
    install_timeout_seconds: float
    installer_command: tuple[str, ...]
    http_timeout_seconds: float

    @staticmethod
    def defaults() -> "ApiRefConfig":
        return ApiRefConfig(
            package_version_url=DEFAULT_PACKAGE_VERSION_URL,
            install_timeout_seconds=DEFAULT_INSTALL_TIMEOUT_SECONDS,
            installer_command=("uv",),
            http_timeout_seconds=DEFAULT_HTTP_TIMEOUT_SECONDS,
        )


def default_config_dir() -> Path:
    return Path.home() / ".apiref"


def load_config(config_dir: Path) -> ApiRefConfig:
    """Load config.toml from config_dir if present; otherwise return defaults.

    Raises:
        ValueError: If a key has the wrong type
    """
    cfg_path = config_dir / "config.toml"
    defaults = ApiRefConfig.defaults()
    if not cfg_path.exists():
        return defaults

    data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))

    url = data.get("package_version_url", defaults.package_version_url)
    if not isinstance(url, str):
        raise ValueError(f"'package_version_url' in {cfg_path} must be a string")

    command = data.get("installer_command", list(defaults.installer_command))
    if isinstance(command, str):
        command = [command]
    if not command or not all(isinstance(part, str) for part in command):
        raise ValueError(f"'installer_command' in {cfg_path} must be a non-empty list of strings")

    return ApiRefConfig(
        package_version_url=url,
        install_timeout_seconds=_positive_number(
            data, "install_timeout_seconds", defaults.install_timeout_seconds, cfg_path
        ),
        installer_command=tuple(command),
        http_timeout_seconds=_positive_number(
            data, "http_timeout_seconds", defaults.http_timeout_seconds, cfg_path
        ),
    )


def _positive_number(data: dict[str, object], key: str, default: float, cfg_path: Path) -> float:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int | float) or value <= 0:
        raise ValueError(f"'{key}' in {cfg_path} must be a positive number")
    return float(value)
