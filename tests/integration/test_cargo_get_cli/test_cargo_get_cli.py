# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Runs cargo-get end to end against the manifests next to this file."""

import sys
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from cargo_get.cli.main_cli import app, main

FIXTURES = Path(__file__).parent
PROJECT = FIXTURES / "project"

runner = CliRunner()


@pytest.fixture(autouse=True)
def in_project(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(PROJECT)


def test_keywords_are_newline_joined() -> None:
    result = runner.invoke(app, ["--keywords"], color=False)

    assert result.exit_code == 0
    assert result.stdout == "cli\ntools\n"


def test_keywords_with_custom_delimiter() -> None:
    result = runner.invoke(app, ["--keywords", "--delimiter=;"], color=False)

    assert result.exit_code == 0
    assert result.stdout == "cli;tools\n"


def test_missing_homepage_is_empty() -> None:
    result = runner.invoke(app, ["--homepage"], color=False)

    assert result.exit_code == 0
    assert result.stdout == "\n"


def test_version() -> None:
    result = runner.invoke(app, ["--version"], color=False)

    assert result.exit_code == 0
    assert result.stdout == "0.2.1\n"


def test_root_pointing_at_another_manifest() -> None:
    result = runner.invoke(
        app, ["--name", "--root=../other/Cargo.toml"], color=False
    )

    assert result.exit_code == 0
    assert result.stdout == "some-other-project\n"


def test_no_field_flag() -> None:
    result = runner.invoke(app, [], color=False)

    assert result.exit_code != 0
    assert result.stdout == ""
    assert "Exactly one field must be selected" in result.stderr


def test_categories_with_tab() -> None:
    result = runner.invoke(app, ["-c", "--delimiter", "Tab"], color=False)

    assert result.exit_code == 0
    assert (
        result.stdout
        == "command-line-utilities\tdevelopment-tools::cargo-plugins\n"
    )


def test_other_manifest_from_directory_root() -> None:
    result = runner.invoke(
        app, ["--links", "--root", str(FIXTURES / "other")], color=False
    )

    assert result.exit_code == 0
    assert result.stdout == "z\n"


def test_pre_release_of_other_manifest() -> None:
    result = runner.invoke(
        app, ["-v", "--pre", "--root", "../other"], color=False
    )

    assert result.exit_code == 0
    assert result.stdout == "rc.1\n"


def test_main_accepts_cargo_subcommand_invocation(
    capsys: pytest.CaptureFixture[str],
) -> None:
    with patch.object(sys, "argv", ["cargo-get", "get", "--name"]):
        with pytest.raises(SystemExit) as exc_info:
            main()

    assert exc_info.value.code == 0
    assert capsys.readouterr().out == "cargo-get\n"
