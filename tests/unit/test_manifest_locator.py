# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from cargo_get.errors import MalformedManifestError, NotFoundError, UnreadableError
from cargo_get.manifest.manifest_locator import locate_manifest, read_manifest


@patch("cargo_get.manifest.manifest_locator.path_exists", return_value=True)
@patch(
    "cargo_get.manifest.manifest_locator.get_current_working_directory",
    return_value="/work/project",
)
def test_defaults_to_manifest_in_current_directory(
    mock_cwd: Mock, mock_path_exists: Mock
) -> None:
    assert locate_manifest(None) == "/work/project/Cargo.toml"
    assert locate_manifest("") == "/work/project/Cargo.toml"
    mock_path_exists.assert_called_with("/work/project/Cargo.toml")


@patch("cargo_get.manifest.manifest_locator.path_exists", return_value=True)
@patch("cargo_get.manifest.manifest_locator.is_directory", return_value=True)
def test_directory_root_gets_manifest_name_appended(
    mock_is_directory: Mock, mock_path_exists: Mock
) -> None:
    assert locate_manifest("/work/other") == "/work/other/Cargo.toml"
    mock_is_directory.assert_called_once_with("/work/other")


@patch("cargo_get.manifest.manifest_locator.path_exists", return_value=True)
@patch("cargo_get.manifest.manifest_locator.is_directory", return_value=False)
def test_file_root_is_used_verbatim(
    mock_is_directory: Mock, mock_path_exists: Mock
) -> None:
    assert locate_manifest("../other/Cargo.toml") == "../other/Cargo.toml"


@patch("cargo_get.manifest.manifest_locator.path_exists", return_value=True)
@patch("cargo_get.manifest.manifest_locator.is_directory", return_value=True)
def test_custom_manifest_file_name(
    mock_is_directory: Mock, mock_path_exists: Mock
) -> None:
    assert (
        locate_manifest("/work", manifest_file_name="Manifest.toml")
        == "/work/Manifest.toml"
    )


@patch("cargo_get.manifest.manifest_locator.path_exists", return_value=False)
@patch("cargo_get.manifest.manifest_locator.is_directory", return_value=False)
def test_missing_manifest_raises_not_found(
    mock_is_directory: Mock, mock_path_exists: Mock
) -> None:
    with pytest.raises(NotFoundError, match="No manifest found at 'missing.toml'"):
        locate_manifest("missing.toml")


def test_directory_without_manifest_raises_not_found(tmp_path: Path) -> None:
    with pytest.raises(NotFoundError) as exc_info:
        locate_manifest(str(tmp_path))
    assert exc_info.value.path == str(tmp_path / "Cargo.toml")


def test_file_and_directory_roots_resolve_to_same_manifest(tmp_path: Path) -> None:
    manifest = tmp_path / "Cargo.toml"
    manifest.write_text('[package]\nname = "a"\nversion = "0.1.0"\n')

    assert locate_manifest(str(tmp_path)) == locate_manifest(str(manifest))


def test_read_manifest_returns_content(tmp_path: Path) -> None:
    manifest = tmp_path / "Cargo.toml"
    manifest.write_text('[package]\nname = "a"\n', encoding="utf-8")

    assert read_manifest(str(manifest)) == '[package]\nname = "a"\n'


def test_read_manifest_rejects_directories(tmp_path: Path) -> None:
    with pytest.raises(UnreadableError, match="not a regular file"):
        read_manifest(str(tmp_path))


@patch("cargo_get.manifest.manifest_locator.open_file")
@patch("cargo_get.manifest.manifest_locator.is_file", return_value=True)
def test_read_manifest_permission_denied(
    mock_is_file: Mock, mock_open_file: Mock
) -> None:
    mock_open_file.side_effect = PermissionError(13, "Permission denied")

    with pytest.raises(UnreadableError) as exc_info:
        read_manifest("/root/Cargo.toml")
    assert exc_info.value.path == "/root/Cargo.toml"
    assert exc_info.value.reason == "Permission denied"


def test_read_manifest_rejects_invalid_utf8(tmp_path: Path) -> None:
    manifest = tmp_path / "Cargo.toml"
    manifest.write_bytes(b"[package]\nname = \"\xff\xfe\"\n")

    with pytest.raises(MalformedManifestError, match="not valid UTF-8"):
        read_manifest(str(manifest))
