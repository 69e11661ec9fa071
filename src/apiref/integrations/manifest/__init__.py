from apiref.integrations.manifest.abc import Manifest, ManifestItem
from apiref.integrations.manifest.real import TOOL_SECTION, TomlManifest

__all__ = ["Manifest", "ManifestItem", "TOOL_SECTION", "TomlManifest"]
