"""Resolve the packages a code generator needs.

The remote package-version document is authoritative when it can be fetched:

    {
      "Version": "1.0",
      "Packages": {
        "openapi-python-client": "0.21.5",
        "httpx": "0.27.2"
      }
    }

Losing the remote document must never block registration, so any failure
while fetching or parsing it falls back to the built-in generator table
without telling the user.
"""

import logging

from apiref.core.generators import CodeGenerator, GeneratorPackageTable
from apiref.integrations.http import HttpClient, HttpRequestError

logger = logging.getLogger(__name__)


class PackageVersionResolver:
    """Determine (package id, version) pairs for a code generator.

    Args:
        http: HTTP client used to fetch the remote document
        fallback_table: Built-in table used when the remote lookup fails
        version_url: Well-known URL of the remote package-version document
    """

    def __init__(self, http: HttpClient, fallback_table: GeneratorPackageTable, version_url: str) -> None:
        self._http = http
        self._fallback_table = fallback_table
        self._version_url = version_url

    def resolve(self, generator: CodeGenerator) -> dict[str, str]:
        """Return the packages required for generator. Never raises.

        A remote document that parses but lists no packages is returned as
        an empty mapping; the built-in table is only used when the lookup
        itself fails.
        """
        remote = self.fetch_remote_versions()
        if remote is not None:
            logger.debug("Using %d package(s) from %s", len(remote), self._version_url)
            return remote

        packages = self._fallback_table.packages_for(generator)
        logger.debug("Using built-in packages for %s: %s", generator, packages)
        return packages

    def fetch_remote_versions(self) -> dict[str, str] | None:
        """Fetch and parse the remote document, or return None on any failure."""
        try:
            document = self._http.get_json(self._version_url)
        except (HttpRequestError, ValueError) as e:
            logger.debug("Package version lookup failed: %s", e)
            return None
        except Exception:
            logger.debug("Package version lookup failed unexpectedly", exc_info=True)
            return None

        try:
            return parse_package_versions(document)
        except ValueError as e:
            logger.debug("Package version document from %s is malformed: %s", self._version_url, e)
            return None


def parse_package_versions(document: object) -> dict[str, str]:
    """Extract the Packages mapping from a package-version document.

    Package ids are matched case-insensitively; when two ids differ only in
    case, the first spelling is kept and the later version wins.

    Raises:
        ValueError: If the document or its Packages entry has the wrong shape
    """
    if not isinstance(document, dict):
        raise ValueError(f"expected a JSON object, got {type(document).__name__}")

    packages = document.get("Packages")
    if not isinstance(packages, dict):
        raise ValueError("'Packages' is missing or not an object")

    by_folded_id: dict[str, tuple[str, str]] = {}
    for package_id, version in packages.items():
        if not isinstance(version, str):
            raise ValueError(f"version of '{package_id}' is not a string")
        folded = package_id.casefold()
        first_seen_id = by_folded_id.get(folded, (package_id, version))[0]
        by_folded_id[folded] = (first_seen_id, version)

    return dict(by_folded_id.values())
