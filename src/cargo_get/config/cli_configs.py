# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from dataclasses import dataclass


@dataclass
class Config:
    manifest_file_name: str
    default_delimiter: str
    symbolic_delimiters: dict[str, str]
    subcommand_alias: str
    default_log_level: str


default_config = Config(
    manifest_file_name="Cargo.toml",
    default_delimiter="\n",
    symbolic_delimiters={
        "Tab": "\t",
        "CR": "\r",
        "LF": "\n",
        "CRLF": "\r\n",
    },
    # cargo runs `cargo-get get ...` when invoked as `cargo get ...`
    subcommand_alias="get",
    default_log_level="WARNING",
)
