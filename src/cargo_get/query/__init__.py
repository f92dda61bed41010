# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from cargo_get.query.delimiter import Delimiter
from cargo_get.query.field_formatter import format_field
from cargo_get.query.version_parts import SemanticVersion, VersionPart, format_version

__all__ = [
    "Delimiter",
    "SemanticVersion",
    "VersionPart",
    "format_field",
    "format_version",
]
