"""pyproject.toml-backed manifest.

References live in arrays of tables under [tool.apiref]:

    [[tool.apiref.openapi-reference]]
    include = "openapi/openapi.json"
    source_url = "https://example.com/openapi.json"
    code_generator = "openapi-python-client"

Reads use tomllib. Writes go through tomlkit so that the rest of the file
keeps its formatting and comments. Every mutation is written through
immediately.
"""

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import tomlkit

from apiref.integrations.manifest.abc import Manifest, ManifestItem

TOOL_SECTION = "apiref"
INCLUDE_KEY = "include"


class TomlManifest(Manifest):
    """Manifest stored in the [tool.apiref] section of a pyproject.toml."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def get_items(self, tag: str) -> list[ManifestItem]:
        if not self._path.exists():
            return []

        data = tomllib.loads(self._path.read_text(encoding="utf-8"))
        entries = data.get("tool", {}).get(TOOL_SECTION, {}).get(tag, [])
        if not isinstance(entries, list):
            raise ValueError(
                f"Expected [[tool.{TOOL_SECTION}.{tag}]] entries in {self._path}, "
                f"found {type(entries).__name__}"
            )

        items: list[ManifestItem] = []
        for entry in entries:
            if not isinstance(entry, dict) or INCLUDE_KEY not in entry:
                raise ValueError(f"Entry under tool.{TOOL_SECTION}.{tag} in {self._path} has no '{INCLUDE_KEY}'")
            metadata = {str(k): str(v) for k, v in entry.items() if k != INCLUDE_KEY}
            items.append(ManifestItem(include=str(entry[INCLUDE_KEY]), metadata=metadata))
        return items

    def add_item(self, tag: str, include: str, metadata: Mapping[str, str]) -> None:
        doc = self._load_document()
        section = self._ensure_section(doc)

        item = tomlkit.table()
        item[INCLUDE_KEY] = include
        for key, value in metadata.items():
            item[key] = value

        if tag in section:
            section[tag].append(item)
        else:
            entries = tomlkit.aot()
            entries.append(item)
            section[tag] = entries

        self._write_document(doc)

    def remove_item(self, tag: str, include: str) -> bool:
        if not self._path.exists():
            return False

        doc = self._load_document()
        section = doc.get("tool", {}).get(TOOL_SECTION)
        if section is None or tag not in section:
            return False

        entries = section[tag]
        matches = [i for i, entry in enumerate(entries) if str(entry.get(INCLUDE_KEY)) == include]
        if not matches:
            return False

        if len(matches) == len(entries):
            del section[tag]
        else:
            for index in reversed(matches):
                del entries[index]

        self._write_document(doc)
        return True

    def _load_document(self) -> tomlkit.TOMLDocument:
        if not self._path.exists():
            return tomlkit.document()
        with self._path.open("r", encoding="utf-8") as f:
            return tomlkit.load(f)

    def _ensure_section(self, doc: tomlkit.TOMLDocument) -> Any:
        if "tool" not in doc:
            doc["tool"] = tomlkit.table(is_super_table=True)
        if TOOL_SECTION not in doc["tool"]:  # type: ignore[operator]
            doc["tool"][TOOL_SECTION] = tomlkit.table(is_super_table=True)  # type: ignore[index]
        return doc["tool"][TOOL_SECTION]  # type: ignore[index]

    def _write_document(self, doc: tomlkit.TOMLDocument) -> None:
        with self._path.open("w", encoding="utf-8") as f:
            tomlkit.dump(doc, f)
