# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import re
from dataclasses import dataclass
from enum import Enum

from cargo_get.errors import InvalidSelectionError, InvalidVersionError
from cargo_get.query.delimiter import Delimiter

# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
_SEMVER_PATTERN = re.compile(
    r"^(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<pre>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<build>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
)


class VersionPart(Enum):
    # declaration order is the output order
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    PRE = "pre"
    BUILD = "build"


@dataclass(frozen=True)
class SemanticVersion:
    major: str
    minor: str
    patch: str
    pre: str | None
    build: str | None

    @staticmethod
    def parse(text: str) -> "SemanticVersion":
        match = _SEMVER_PATTERN.fullmatch(text)
        if match is None:
            raise InvalidVersionError(text)
        return SemanticVersion(
            major=match.group("major"),
            minor=match.group("minor"),
            patch=match.group("patch"),
            pre=match.group("pre"),
            build=match.group("build"),
        )

    def part(self, part: VersionPart) -> str:
        value: str | None = getattr(self, part.value)
        return value or ""


def format_version(
    version: str,
    parts: set[VersionPart],
    delimiter: Delimiter,
    pretty: bool = False,
) -> str:
    """
    Render the package version.

    With no parts and no pretty flag the version is printed as declared,
    without validation. Requested parts are printed in major, minor, patch,
    pre, build order; a missing pre-release or build metadata keeps its slot
    as an empty string.
    """
    if pretty and parts:
        raise InvalidSelectionError(
            "--pretty cannot be combined with version part selection"
        )
    if not pretty and not parts:
        return version

    semantic_version = SemanticVersion.parse(version)
    if pretty:
        return f"v{version}"
    return delimiter.join(
        semantic_version.part(part) for part in VersionPart if part in parts
    )
