# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from cargo_get.manifest.metadata import ManifestField, PackageMetadata
from cargo_get.query.delimiter import Delimiter


def format_field(
    metadata: PackageMetadata, field: ManifestField, delimiter: Delimiter
) -> str:
    """Render one field of the package as printable text.

    Absent values render as an empty string. Lists are joined with the
    delimiter in declaration order, values are never quoted or escaped.
    """
    value = metadata.get(field)
    if value is None:
        return ""
    if field.is_multi_valued:
        return delimiter.join(value)
    return str(value)
