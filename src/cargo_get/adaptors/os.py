# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Here we collect a set of OS wrappers and adaptors to be easily replaced during testing and debugging."""

import os


def path_exists(file_path: str) -> bool:
    return os.path.exists(file_path)


def is_directory(path: str) -> bool:
    return os.path.isdir(path)


def is_file(path: str) -> bool:
    return os.path.isfile(path)


def get_current_working_directory() -> str:
    return os.getcwd()


def open_file(file_path: str) -> str:
    # TOML documents are always UTF-8
    with open(file_path, "r", encoding="utf-8") as file:
        return file.read()


def path_join(path: str, *paths: str) -> str:
    return os.path.join(path, *paths)
