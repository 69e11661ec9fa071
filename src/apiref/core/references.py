"""OpenAPI references recorded in the project manifest.

A reference links a local document (its include path) to an optional source
URL. Within one tag, a local path is registered at most once and a source URL
is registered at most once. Registering either again is reported back to the
caller as a duplicate and leaves the manifest untouched.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from apiref.integrations.manifest import Manifest, ManifestItem

OPENAPI_REFERENCE = "openapi-reference"
OPENAPI_PROJECT_REFERENCE = "openapi-project-reference"
REFERENCE_TAGS = (OPENAPI_REFERENCE, OPENAPI_PROJECT_REFERENCE)

SOURCE_URL_KEY = "source_url"
CODE_GENERATOR_KEY = "code_generator"

RegistrationResult = Literal["added", "duplicate-path", "duplicate-identity"]


@dataclass(frozen=True)
class ReferenceEntry:
    """A reference as stored in the manifest."""

    tag: str
    include: str
    source_url: str | None = None
    metadata: dict[str, str] = field(default_factory=dict)

    @staticmethod
    def from_item(tag: str, item: ManifestItem) -> "ReferenceEntry":
        metadata = {k: v for k, v in item.metadata.items() if k != SOURCE_URL_KEY}
        return ReferenceEntry(
            tag=tag,
            include=item.include,
            source_url=item.metadata.get(SOURCE_URL_KEY) or None,
            metadata=metadata,
        )


class ManifestReferenceStore:
    """Duplicate-aware view over the references in a manifest.

    Args:
        manifest: Underlying manifest store
        working_dir: Base for turning relative include paths into absolute
            ones when comparing them
    """

    def __init__(self, manifest: Manifest, working_dir: Path) -> None:
        self._manifest = manifest
        self._working_dir = working_dir

    @property
    def manifest_path(self) -> Path:
        return self._manifest.path

    def normalize(self, include: str) -> str:
        """Absolute, normalized form of include, used only for comparisons."""
        path = Path(include)
        if not path.is_absolute():
            path = self._working_dir / path
        return os.path.normpath(path)

    def register(
        self,
        tag: str,
        include: str,
        source_url: str | None = None,
        metadata: Mapping[str, str] | None = None,
    ) -> RegistrationResult:
        """Record a reference unless it duplicates an existing one.

        The include path is stored exactly as given.

        Returns:
            "added" if the reference was written, "duplicate-path" if a
            reference under tag already points at the same file,
            "duplicate-identity" if one already has the same source URL
        """
        items = self._manifest.get_items(tag)

        normalized = self.normalize(include)
        if any(self.normalize(item.include) == normalized for item in items):
            return "duplicate-path"

        if source_url and any(item.metadata.get(SOURCE_URL_KEY) == source_url for item in items):
            return "duplicate-identity"

        item_metadata = dict(metadata or {})
        if source_url:
            item_metadata[SOURCE_URL_KEY] = source_url
        self._manifest.add_item(tag, include, item_metadata)
        return "added"

    def list_references(self, tag: str | None = None) -> list[ReferenceEntry]:
        """All references under tag, or under every reference tag if tag is None."""
        tags = (tag,) if tag is not None else REFERENCE_TAGS
        return [ReferenceEntry.from_item(t, item) for t in tags for item in self._manifest.get_items(t)]

    def find(self, source: str) -> list[ReferenceEntry]:
        """References whose source URL equals source or whose include path matches it."""
        normalized = self.normalize(source)
        return [
            entry
            for entry in self.list_references()
            if entry.source_url == source or self.normalize(entry.include) == normalized
        ]

    def unregister(self, entry: ReferenceEntry) -> bool:
        """Remove entry from the manifest. Returns False if it was already gone."""
        return self._manifest.remove_item(entry.tag, entry.include)
