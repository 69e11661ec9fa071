"""Tests for ManifestReferenceStore duplicate detection."""

from pathlib import Path

from apiref.core.references import (
    OPENAPI_PROJECT_REFERENCE,
    OPENAPI_REFERENCE,
    ManifestReferenceStore,
    ReferenceEntry,
)
from apiref.integrations.manifest import ManifestItem
from tests.fakes.manifest import InMemoryManifest

WORKING_DIR = Path("/work/client")
URL = "https://api.example.com/openapi.json"


def test_register_adds_reference_with_source_url() -> None:
    manifest = InMemoryManifest()
    store = ManifestReferenceStore(manifest, WORKING_DIR)

    result = store.register(OPENAPI_REFERENCE, "openapi/openapi.json", URL, {"code_generator": "x"})

    assert result == "added"
    assert manifest.get_items(OPENAPI_REFERENCE) == [
        ManifestItem(
            include="openapi/openapi.json",
            metadata={"code_generator": "x", "source_url": URL},
        )
    ]


def test_register_same_path_again_is_duplicate_path() -> None:
    manifest = InMemoryManifest()
    store = ManifestReferenceStore(manifest, WORKING_DIR)
    store.register(OPENAPI_REFERENCE, "openapi/openapi.json", URL)

    result = store.register(OPENAPI_REFERENCE, "openapi/openapi.json", URL)

    assert result == "duplicate-path"
    assert manifest.add_calls == 1


def test_duplicate_path_compares_normalized_paths() -> None:
    manifest = InMemoryManifest()
    store = ManifestReferenceStore(manifest, WORKING_DIR)
    store.register(OPENAPI_REFERENCE, "openapi/openapi.json")

    assert store.register(OPENAPI_REFERENCE, "./openapi/../openapi/openapi.json") == "duplicate-path"
    assert store.register(OPENAPI_REFERENCE, "/work/client/openapi/openapi.json") == "duplicate-path"


def test_same_url_different_path_is_duplicate_identity() -> None:
    manifest = InMemoryManifest()
    store = ManifestReferenceStore(manifest, WORKING_DIR)
    store.register(OPENAPI_REFERENCE, "openapi/openapi.json", URL)

    result = store.register(OPENAPI_REFERENCE, "specs/other.json", URL)

    assert result == "duplicate-identity"
    assert [item.include for item in manifest.get_items(OPENAPI_REFERENCE)] == ["openapi/openapi.json"]


def test_duplicate_identity_is_exact_string_match() -> None:
    store = ManifestReferenceStore(InMemoryManifest(), WORKING_DIR)
    store.register(OPENAPI_REFERENCE, "openapi/openapi.json", URL)

    assert store.register(OPENAPI_REFERENCE, "specs/upper.json", URL.upper()) == "added"


def test_duplicates_are_checked_per_tag() -> None:
    store = ManifestReferenceStore(InMemoryManifest(), WORKING_DIR)
    store.register(OPENAPI_REFERENCE, "../server")

    assert store.register(OPENAPI_PROJECT_REFERENCE, "../server") == "added"


def test_include_is_stored_as_given() -> None:
    manifest = InMemoryManifest()
    store = ManifestReferenceStore(manifest, WORKING_DIR)

    store.register(OPENAPI_REFERENCE, "./specs//api.json")

    assert manifest.get_items(OPENAPI_REFERENCE)[0].include == "./specs//api.json"


def test_list_references_across_tags() -> None:
    manifest = InMemoryManifest(
        items={
            OPENAPI_REFERENCE: [ManifestItem("openapi/openapi.json", {"source_url": URL, "code_generator": "g"})],
            OPENAPI_PROJECT_REFERENCE: [ManifestItem("../server", {})],
        }
    )
    store = ManifestReferenceStore(manifest, WORKING_DIR)

    entries = store.list_references()

    assert entries == [
        ReferenceEntry(OPENAPI_REFERENCE, "openapi/openapi.json", URL, {"code_generator": "g"}),
        ReferenceEntry(OPENAPI_PROJECT_REFERENCE, "../server", None, {}),
    ]
    assert store.list_references(OPENAPI_PROJECT_REFERENCE) == entries[1:]


def test_find_by_url_or_path() -> None:
    manifest = InMemoryManifest(
        items={
            OPENAPI_REFERENCE: [
                ManifestItem("openapi/openapi.json", {"source_url": URL}),
                ManifestItem("local.json", {}),
            ]
        }
    )
    store = ManifestReferenceStore(manifest, WORKING_DIR)

    assert [e.include for e in store.find(URL)] == ["openapi/openapi.json"]
    assert [e.include for e in store.find("./local.json")] == ["local.json"]
    assert store.find("https://other.example.com/openapi.json") == []


def test_unregister_removes_entry() -> None:
    manifest = InMemoryManifest(items={OPENAPI_REFERENCE: [ManifestItem("local.json", {})]})
    store = ManifestReferenceStore(manifest, WORKING_DIR)
    entry = store.list_references()[0]

    assert store.unregister(entry) is True
    assert store.list_references() == []
    assert store.unregister(entry) is False
