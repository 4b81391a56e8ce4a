"""Artifact resolution tests."""

from __future__ import annotations

import pytest
from packtest_runner.artifact_resolution import (
    DEFAULT_ARTIFACT_CATALOG,
    ArtifactCatalog,
    CatalogEntry,
    ModRole,
    UnsupportedVersionError,
    resolve_artifacts,
)


@pytest.mark.parametrize("version", DEFAULT_ARTIFACT_CATALOG.supported_versions())
def test_supported_versions_resolve_both_artifacts_without_overrides(version: str) -> None:
    artifacts = resolve_artifacts(version)

    assert artifacts.packtest.role is ModRole.PACKTEST
    assert artifacts.fabric_api.role is ModRole.FABRIC_API
    assert artifacts.packtest.url
    assert artifacts.fabric_api.url


def test_default_catalog_pins_known_good_urls_for_1_20_4() -> None:
    artifacts = resolve_artifacts("1.20.4")

    assert artifacts.packtest.url.endswith("packtest-1.3-mc1.20.4.jar")
    assert "fabric-api-0.91.3" in artifacts.fabric_api.url


@pytest.mark.parametrize("version", ["1.8.9", "24w99a", ""])
def test_unsupported_version_without_overrides_fails(version: str) -> None:
    with pytest.raises(UnsupportedVersionError) as exc_info:
        resolve_artifacts(version)

    assert exc_info.value.minecraft_version == version
    assert exc_info.value.role is ModRole.PACKTEST
    assert "No PackTest available" in str(exc_info.value)


@pytest.mark.parametrize("version", ["1.20.4", "1.8.9"])
def test_overrides_are_returned_verbatim_regardless_of_version_support(version: str) -> None:
    artifacts = resolve_artifacts(
        version,
        packtest_url="https://example.com/packtest.jar?x=1",
        fabric_api_url="file-ish but not latest",
    )

    assert artifacts.packtest.url == "https://example.com/packtest.jar?x=1"
    assert artifacts.fabric_api.url == "file-ish but not latest"


def test_latest_sentinel_falls_back_to_catalog() -> None:
    artifacts = resolve_artifacts("1.20.4", packtest_url="latest", fabric_api_url="latest")

    assert artifacts == resolve_artifacts("1.20.4")


def test_one_override_on_unsupported_version_still_fails_for_the_other_role() -> None:
    with pytest.raises(UnsupportedVersionError) as exc_info:
        resolve_artifacts("1.8.9", packtest_url="https://example.com/packtest.jar")

    assert exc_info.value.role is ModRole.FABRIC_API
    assert "No Fabric API available" in str(exc_info.value)


def test_resolver_uses_injected_catalog() -> None:
    catalog = ArtifactCatalog(
        entries={
            "1.21": CatalogEntry(
                packtest_url="https://example.com/pt-1.21.jar",
                fabric_api_url="https://example.com/fapi-1.21.jar",
            )
        }
    )

    artifacts = resolve_artifacts("1.21", catalog=catalog)

    assert [artifact.url for artifact in artifacts] == [
        "https://example.com/pt-1.21.jar",
        "https://example.com/fapi-1.21.jar",
    ]
    with pytest.raises(UnsupportedVersionError):
        resolve_artifacts("1.20.4", catalog=catalog)


def test_catalog_entry_missing_a_role_is_unsupported_for_that_role() -> None:
    catalog = ArtifactCatalog(
        entries={"1.21": CatalogEntry(packtest_url="https://example.com/pt.jar")}
    )

    with pytest.raises(UnsupportedVersionError) as exc_info:
        resolve_artifacts("1.21", catalog=catalog)

    assert exc_info.value.role is ModRole.FABRIC_API


def test_mod_roles_have_fixed_jar_filenames() -> None:
    assert ModRole.PACKTEST.jar_filename == "packtest.jar"
    assert ModRole.FABRIC_API.jar_filename == "fabric_api.jar"


def test_resolved_artifacts_iterate_packtest_before_fabric_api() -> None:
    artifacts = resolve_artifacts("1.20.4")

    assert [location.role for location in artifacts] == [ModRole.PACKTEST, ModRole.FABRIC_API]
