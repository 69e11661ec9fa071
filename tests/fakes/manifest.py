"""In-memory manifest for testing ManifestReferenceStore without TOML files."""

from collections.abc import Mapping
from pathlib import Path

from apiref.integrations.manifest import Manifest, ManifestItem


class InMemoryManifest(Manifest):
    """Manifest kept in a dict of tag → items."""

    def __init__(
        self,
        items: dict[str, list[ManifestItem]] | None = None,
        path: Path = Path("/fake/project/pyproject.toml"),
    ) -> None:
        self._items = {tag: list(entries) for tag, entries in (items or {}).items()}
        self._path = path
        self._add_calls = 0

    @property
    def path(self) -> Path:
        return self._path

    @property
    def add_calls(self) -> int:
        """Number of add_item() calls. For test assertions only."""
        return self._add_calls

    def get_items(self, tag: str) -> list[ManifestItem]:
        return list(self._items.get(tag, []))

    def add_item(self, tag: str, include: str, metadata: Mapping[str, str]) -> None:
        self._add_calls += 1
        self._items.setdefault(tag, []).append(ManifestItem(include=include, metadata=dict(metadata)))

    def remove_item(self, tag: str, include: str) -> bool:
        entries = self._items.get(tag, [])
        remaining = [item for item in entries if item.include != include]
        self._items[tag] = remaining
        return len(remaining) != len(entries)
