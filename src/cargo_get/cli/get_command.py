# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

# Command printing one field of the package described by a Cargo manifest

from typing import Annotated

import typer

from cargo_get.config import default_config
from cargo_get.errors import CargoGetError, InvalidSelectionError
from cargo_get.manifest.manifest_locator import locate_manifest
from cargo_get.manifest.manifest_parser import ManifestParser
from cargo_get.manifest.metadata import ManifestField
from cargo_get.query.delimiter import Delimiter
from cargo_get.query.field_formatter import format_field
from cargo_get.query.version_parts import VersionPart, format_version
from cargo_get.utils.logging import parse_log_level, setup_logging


def select_field(flags: dict[ManifestField, bool]) -> ManifestField:
    """Reduce the field flags given on the command line to a single field."""
    selected = [field for field, is_set in flags.items() if is_set]
    if not selected:
        raise InvalidSelectionError(
            "Exactly one field must be selected, e.g. --name or --version."
        )
    if len(selected) > 1:
        names = ", ".join(f"--{field.value}" for field in selected)
        raise InvalidSelectionError(
            f"Exactly one field must be selected, got {names}."
        )
    return selected[0]


def select_version_parts(
    field: ManifestField,
    part_flags: dict[VersionPart, bool],
    pretty: bool,
    full: bool,
) -> set[VersionPart]:
    parts = {part for part, is_set in part_flags.items() if is_set}
    if field is not ManifestField.VERSION:
        if parts or pretty or full:
            raise InvalidSelectionError(
                "--major, --minor, --patch, --pre, --build, --pretty and --full "
                "can only be used with --version."
            )
        return parts
    if pretty and full:
        raise InvalidSelectionError("Cannot specify both --pretty and --full.")
    if parts and (pretty or full):
        raise InvalidSelectionError(
            "Cannot combine --pretty or --full with a version part."
        )
    return parts


def get(
    version: Annotated[
        bool, typer.Option("--version", "-v", help="Get package.version.")
    ] = False,
    authors: Annotated[
        bool, typer.Option("--authors", "-a", help="Get package.authors.")
    ] = False,
    edition: Annotated[
        bool, typer.Option("--edition", "-e", help="Get package.edition.")
    ] = False,
    name: Annotated[
        bool, typer.Option("--name", "-n", help="Get package.name.")
    ] = False,
    homepage: Annotated[
        bool, typer.Option("--homepage", "-o", help="Get package.homepage.")
    ] = False,
    keywords: Annotated[
        bool, typer.Option("--keywords", "-k", help="Get package.keywords.")
    ] = False,
    license: Annotated[
        bool, typer.Option("--license", "-l", help="Get package.license.")
    ] = False,
    links: Annotated[
        bool, typer.Option("--links", "-i", help="Get package.links.")
    ] = False,
    description: Annotated[
        bool, typer.Option("--description", "-d", help="Get package.description.")
    ] = False,
    categories: Annotated[
        bool, typer.Option("--categories", "-c", help="Get package.categories.")
    ] = False,
    root: Annotated[
        str | None,
        typer.Option(
            "--root",
            help=(
                "Optional entry point: a Cargo.toml file or a directory "
                "containing one. Defaults to the current directory."
            ),
            metavar="PATH",
        ),
    ] = None,
    delimiter: Annotated[
        str | None,
        typer.Option(
            "--delimiter",
            help="Delimiter for multi-valued fields. Defaults to a newline.",
            metavar="Tab | CR | LF | CRLF | String",
        ),
    ] = None,
    major: Annotated[
        bool, typer.Option("--major", help="With --version, get the major part.")
    ] = False,
    minor: Annotated[
        bool, typer.Option("--minor", help="With --version, get the minor part.")
    ] = False,
    patch: Annotated[
        bool, typer.Option("--patch", help="With --version, get the patch part.")
    ] = False,
    pre: Annotated[
        bool,
        typer.Option("--pre", help="With --version, get the pre-release part."),
    ] = False,
    build: Annotated[
        bool,
        typer.Option("--build", help="With --version, get the build metadata."),
    ] = False,
    pretty: Annotated[
        bool,
        typer.Option(
            "--pretty", help="With --version, get a pretty version, e.g. v1.2.3."
        ),
    ] = False,
    full: Annotated[
        bool,
        typer.Option(
            "--full", help="With --version, get the full version.", hidden=True
        ),
    ] = False,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
        ),
    ] = default_config.default_log_level,
) -> None:
    """
    Query package info from Cargo.toml in a script-friendly way.

    Exactly one field flag must be given. Multi-valued fields are printed one
    value per line unless --delimiter is set.
    """
    try:
        setup_logging(parse_log_level(log_level))
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    # Nothing is read from disk until the selection is known to be valid
    try:
        field = select_field(
            {
                ManifestField.VERSION: version,
                ManifestField.AUTHORS: authors,
                ManifestField.EDITION: edition,
                ManifestField.NAME: name,
                ManifestField.HOMEPAGE: homepage,
                ManifestField.KEYWORDS: keywords,
                ManifestField.LICENSE: license,
                ManifestField.LINKS: links,
                ManifestField.DESCRIPTION: description,
                ManifestField.CATEGORIES: categories,
            }
        )
        version_parts = select_version_parts(
            field,
            {
                VersionPart.MAJOR: major,
                VersionPart.MINOR: minor,
                VersionPart.PATCH: patch,
                VersionPart.PRE: pre,
                VersionPart.BUILD: build,
            },
            pretty,
            full,
        )
    except InvalidSelectionError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    output_delimiter = Delimiter.parse(delimiter)
    try:
        metadata = ManifestParser.load(locate_manifest(root))
        if field is ManifestField.VERSION:
            output = format_version(
                metadata.version, version_parts, output_delimiter, pretty
            )
        else:
            output = format_field(metadata, field, output_delimiter)
    except CargoGetError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    # color=True keeps escape sequences stored in the manifest when piped
    typer.echo(output, color=True)
