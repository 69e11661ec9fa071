from apiref.integrations.installer.abc import DependencyInstaller
from apiref.integrations.installer.real import DEFAULT_INSTALL_TIMEOUT_SECONDS, UvDependencyInstaller

__all__ = ["DEFAULT_INSTALL_TIMEOUT_SECONDS", "DependencyInstaller", "UvDependencyInstaller"]
