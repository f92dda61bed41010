# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

# Main entry point for the cargo-get CLI tool

import sys

import typer

from cargo_get.cli.get_command import get
from cargo_get.config import default_config

app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
app.command()(get)


def strip_subcommand_alias(args: list[str]) -> list[str]:
    """Drop the leading `get` cargo passes when run as `cargo get ...`."""
    if args and args[0] == default_config.subcommand_alias:
        return args[1:]
    return args


def main() -> None:
    app(args=strip_subcommand_alias(sys.argv[1:]), prog_name="cargo-get")


if __name__ == "__main__":
    main()
