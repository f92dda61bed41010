# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from dataclasses import dataclass
from enum import Enum


class ManifestField(Enum):
    NAME = "name"
    VERSION = "version"
    AUTHORS = "authors"
    EDITION = "edition"
    HOMEPAGE = "homepage"
    KEYWORDS = "keywords"
    LICENSE = "license"
    LINKS = "links"
    DESCRIPTION = "description"
    CATEGORIES = "categories"

    @property
    def is_multi_valued(self) -> bool:
        return self in _MULTI_VALUED_FIELDS


_MULTI_VALUED_FIELDS = frozenset(
    [ManifestField.AUTHORS, ManifestField.KEYWORDS, ManifestField.CATEGORIES]
)


# None means the key is absent from the manifest, an empty tuple means it was
# declared as an empty list.
@dataclass(frozen=True)
class PackageMetadata:
    """The [package] table of a Cargo manifest."""

    name: str
    version: str
    authors: tuple[str, ...] | None = None
    edition: str | None = None
    homepage: str | None = None
    keywords: tuple[str, ...] | None = None
    license: str | None = None
    links: str | None = None
    description: str | None = None
    categories: tuple[str, ...] | None = None

    def get(self, field: ManifestField) -> str | tuple[str, ...] | None:
        value: str | tuple[str, ...] | None = getattr(self, field.value)
        return value
