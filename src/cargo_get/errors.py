# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Errors raised while locating, parsing and querying a manifest.

Every error is terminal for a run; the CLI turns them into a single line on
stderr and a non-zero exit code.
"""


class CargoGetError(Exception):
    """Base class for all cargo-get failures."""


class InvalidSelectionError(CargoGetError):
    """Zero or several fields were selected, or version modifiers were misused."""


class NotFoundError(CargoGetError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"No manifest found at '{path}'.")


class UnreadableError(CargoGetError):
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Unable to read manifest '{path}': {reason}")


class MalformedManifestError(CargoGetError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Malformed manifest: {reason}")


class SchemaMismatchError(CargoGetError):
    def __init__(self, section: str):
        self.section = section
        super().__init__(f"Manifest has no [{section}] section.")


class InheritedFieldError(CargoGetError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(
            f"{key} is inherited from the workspace and cannot be resolved."
        )


class InvalidVersionError(CargoGetError):
    def __init__(self, version: str):
        self.version = version
        super().__init__(f"'{version}' is not a valid semantic version.")
