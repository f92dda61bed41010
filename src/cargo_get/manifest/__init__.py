# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from cargo_get.manifest.manifest_locator import locate_manifest, read_manifest
from cargo_get.manifest.manifest_parser import ManifestParser
from cargo_get.manifest.metadata import ManifestField, PackageMetadata

__all__ = [
    "ManifestField",
    "ManifestParser",
    "PackageMetadata",
    "locate_manifest",
    "read_manifest",
]
