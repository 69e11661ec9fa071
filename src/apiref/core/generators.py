"""Code generators and their built-in package table.

The table ships with apiref in data/generator_packages.toml. It is loaded once
when the context is created and handed to PackageVersionResolver as the
fallback for when the remote package-version document is unavailable.
"""

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Literal, cast

from apiref.core.errors import ValidationError

CodeGenerator = Literal["openapi-python-client", "datamodel-code-generator"]

CODE_GENERATORS: tuple[CodeGenerator, ...] = ("openapi-python-client", "datamodel-code-generator")
DEFAULT_CODE_GENERATOR: CodeGenerator = "openapi-python-client"

BUILTIN_TABLE_PATH = Path(__file__).parent.parent / "data" / "generator_packages.toml"


def validate_code_generator(value: str | None) -> CodeGenerator:
    """Validate a code generator name, defaulting when none is given.

    Args:
        value: Name from the command line, or None

    Returns:
        Valid CodeGenerator

    Raises:
        ValidationError: If value is not a known code generator
    """
    if value is None:
        return DEFAULT_CODE_GENERATOR
    if value not in CODE_GENERATORS:
        choices = ", ".join(CODE_GENERATORS)
        raise ValidationError(f"Invalid value '{value}' given as code generator. Valid values: {choices}")
    return cast(CodeGenerator, value)


@dataclass(frozen=True)
class GeneratorPackageTable:
    """Immutable mapping of code generator to required package versions."""

    packages: Mapping[str, Mapping[str, str]]

    def packages_for(self, generator: CodeGenerator) -> dict[str, str]:
        """Return a fresh copy of the packages for generator (empty if unknown)."""
        return dict(self.packages.get(generator, {}))


def load_generator_table(path: Path = BUILTIN_TABLE_PATH) -> GeneratorPackageTable:
    """Load the generator package table from a TOML file.

    Raises:
        ValueError: If a generator section or a version is not the expected type
    """
    data = tomllib.loads(path.read_text(encoding="utf-8"))

    table: dict[str, Mapping[str, str]] = {}
    for generator, packages in data.items():
        if not isinstance(packages, dict):
            raise ValueError(f"Expected a table for generator '{generator}' in {path}")
        versions: dict[str, str] = {}
        for package_id, version in packages.items():
            if not isinstance(version, str):
                raise ValueError(f"Version of '{package_id}' for '{generator}' in {path} must be a string")
            versions[package_id] = version
        table[generator] = MappingProxyType(versions)

    return GeneratorPackageTable(packages=MappingProxyType(table))
