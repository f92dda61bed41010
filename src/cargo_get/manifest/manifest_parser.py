# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging
from typing import Any

import tomlkit
from tomlkit.exceptions import TOMLKitError

from cargo_get.errors import (
    InheritedFieldError,
    MalformedManifestError,
    SchemaMismatchError,
)
from cargo_get.manifest.manifest_locator import read_manifest
from cargo_get.manifest.metadata import PackageMetadata

PACKAGE_SECTION = "package"


class ManifestParser:
    """Parser for the [package] table of Cargo manifests."""

    @staticmethod
    def load(manifest_path: str) -> PackageMetadata:
        """Read and parse the manifest at ``manifest_path``.

        Raises:
            UnreadableError: If the file cannot be opened.
            MalformedManifestError: If the content is not a valid manifest.
            SchemaMismatchError: If the manifest has no [package] table.
            InheritedFieldError: If a field is inherited from the workspace.
        """
        metadata = ManifestParser.parse(read_manifest(manifest_path))
        logging.debug(f"Parsed package {metadata.name} {metadata.version}")
        return metadata

    @staticmethod
    def parse(content: str) -> PackageMetadata:
        """Parse manifest text into a PackageMetadata.

        Sections and keys other than the known [package] fields are ignored.
        """
        try:
            document = tomlkit.parse(content).unwrap()
        except TOMLKitError as e:
            raise MalformedManifestError(str(e))

        if PACKAGE_SECTION not in document:
            raise SchemaMismatchError(PACKAGE_SECTION)
        package = document[PACKAGE_SECTION]
        if not isinstance(package, dict):
            raise MalformedManifestError(f"{PACKAGE_SECTION} must be a table")

        return PackageMetadata(
            name=ManifestParser._required_string(package, "name"),
            version=ManifestParser._required_string(package, "version"),
            authors=ManifestParser._string_list(package, "authors"),
            edition=ManifestParser._string(package, "edition"),
            homepage=ManifestParser._string(package, "homepage"),
            keywords=ManifestParser._string_list(package, "keywords"),
            license=ManifestParser._string(package, "license"),
            links=ManifestParser._string(package, "links"),
            description=ManifestParser._string(package, "description"),
            categories=ManifestParser._string_list(package, "categories"),
        )

    @staticmethod
    def _lookup(package: dict[str, Any], key: str) -> Any:
        value = package.get(key)
        if isinstance(value, dict) and value.get("workspace") is True:
            raise InheritedFieldError(f"{PACKAGE_SECTION}.{key}")
        return value

    @staticmethod
    def _string(package: dict[str, Any], key: str) -> str | None:
        value = ManifestParser._lookup(package, key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise MalformedManifestError(
                f"{PACKAGE_SECTION}.{key} must be a string"
            )
        return value

    @staticmethod
    def _required_string(package: dict[str, Any], key: str) -> str:
        value = ManifestParser._string(package, key)
        if not value:
            raise MalformedManifestError(f"{PACKAGE_SECTION}.{key} is missing")
        return value

    @staticmethod
    def _string_list(package: dict[str, Any], key: str) -> tuple[str, ...] | None:
        value = ManifestParser._lookup(package, key)
        if value is None:
            return None
        if not isinstance(value, list) or not all(
            isinstance(item, str) for item in value
        ):
            raise MalformedManifestError(
                f"{PACKAGE_SECTION}.{key} must be a list of strings"
            )
        return tuple(value)
