"""Project manifest interface.

The manifest is treated as a store of tagged items. Each item has a primary
include path and a flat string metadata map. How and when the store is
persisted is up to the implementation.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class ManifestItem:
    """One tagged item in the manifest."""

    include: str
    metadata: dict[str, str] = field(default_factory=dict)


class Manifest(ABC):
    """Abstract manifest store for dependency injection."""

    @property
    @abstractmethod
    def path(self) -> Path:
        """Path of the manifest file (for messages)."""
        ...

    @abstractmethod
    def get_items(self, tag: str) -> list[ManifestItem]:
        """Return items stored under tag, in file order (empty if none)."""
        ...

    @abstractmethod
    def add_item(self, tag: str, include: str, metadata: Mapping[str, str]) -> None:
        """Append an item under tag.

        No duplicate checking is done here; see ManifestReferenceStore.
        """
        ...

    @abstractmethod
    def remove_item(self, tag: str, include: str) -> bool:
        """Remove every item under tag whose include equals include exactly.

        Returns:
            True if at least one item was removed
        """
        ...
