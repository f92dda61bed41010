# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging

from cargo_get.adaptors.os import (
    get_current_working_directory,
    is_directory,
    is_file,
    open_file,
    path_exists,
    path_join,
)
from cargo_get.config import default_config
from cargo_get.errors import MalformedManifestError, NotFoundError, UnreadableError


def locate_manifest(
    root: str | None, manifest_file_name: str = default_config.manifest_file_name
) -> str:
    """Resolve the path of the manifest to read.

    Args:
        root: A manifest file, a directory holding one, or None/empty for the
            current working directory.
        manifest_file_name: File name looked up inside directories.

    Returns:
        The path of the manifest file.

    Raises:
        NotFoundError: If the resolved path does not exist.
    """
    if not root:
        manifest_path = path_join(get_current_working_directory(), manifest_file_name)
    elif is_directory(root):
        manifest_path = path_join(root, manifest_file_name)
    else:
        manifest_path = root

    if not path_exists(manifest_path):
        raise NotFoundError(manifest_path)

    logging.debug(f"Using manifest {manifest_path}")
    return manifest_path


def read_manifest(manifest_path: str) -> str:
    """Read the text of an existing manifest.

    Raises:
        UnreadableError: If the path is not a regular file or cannot be opened.
        MalformedManifestError: If the content is not valid UTF-8.
    """
    if not is_file(manifest_path):
        raise UnreadableError(manifest_path, "not a regular file")
    try:
        return open_file(manifest_path)
    except UnicodeDecodeError:
        raise MalformedManifestError("manifest is not valid UTF-8")
    except OSError as e:
        raise UnreadableError(manifest_path, e.strerror or str(e))
