"""Parse and validate commands for semverkit.

Typical usage::

    # Show the components of a version
    $ semverkit parse 1.2-rc.01+build.5

    # Machine-readable output
    $ semverkit parse 1.2.3 --format json

    # Check several versions at once (exit code 1 if any is invalid)
    $ semverkit validate 1.0.0 1.0.0+ 2.0.0-beta
"""

from __future__ import annotations

import sys
import json
from typing import Any, Dict, List, Optional, Tuple

import click
from rich.markup import escape

from semverkit.core.identifier import Identifier
from semverkit.exceptions import VersionParsingError
from semverkit.models.version import Version, parse
from semverkit.context import SemverKitContext, pass_context
from semverkit.utils import (
    get_logger,
    print_error,
    print_plain,
    print_success,
    print_table,
)

logger = get_logger("commands.parse")


@click.command("parse")
@click.argument("version")
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "json", "canonical"], case_sensitive=False),
    default="table",
    help="Output format.",
)
@pass_context
def parse_command(ctx: SemverKitContext, version: str, output_format: str) -> None:
    """Parse VERSION and show its components.

    Exits with status 1 if VERSION is not a valid semantic version.
    """
    try:
        parsed = parse(version)
    except VersionParsingError as exc:
        print_error(f"Invalid version {escape(repr(version))}: {escape(str(exc))}")
        sys.exit(1)

    logger.debug("Parsed %r as %r", version, parsed)

    output_format = output_format.lower()
    if output_format == "json":
        click.echo(json.dumps(version_to_dict(parsed), indent=2))
    elif output_format == "canonical":
        print_plain(str(parsed))
    else:
        rows = [{"Field": field, "Value": value} for field, value in _describe(parsed)]
        print_table(rows, headers=["Field", "Value"], title=str(parsed))


@click.command("validate")
@click.argument("versions", nargs=-1, required=True)
@pass_context
def validate_command(ctx: SemverKitContext, versions: Tuple[str, ...]) -> None:
    """Check that every VERSION is a valid semantic version.

    Exits with status 1 if any of them is invalid.
    """
    failures = 0

    for version in versions:
        try:
            parsed = parse(version)
        except VersionParsingError as exc:
            failures += 1
            print_error(f"{escape(version)}: {escape(str(exc))}")
            continue

        canonical = str(parsed)
        note = "" if canonical == version else f" (canonical: {canonical})"
        print_success(f"{escape(version)}{note}")

    logger.debug("Validated %d version(s), %d invalid", len(versions), failures)
    if failures:
        sys.exit(1)


def _identifier_values(identifiers: Optional[Tuple[Identifier, ...]]) -> Optional[List[Any]]:
    if identifiers is None:
        return None
    return [identifier.value for identifier in identifiers]


def version_to_dict(version: Version) -> Dict[str, Any]:
    """Return a JSON-friendly description of ``version``.

    Numeric identifiers are emitted as numbers, alphanumeric ones as
    strings.
    """
    return {
        "canonical": str(version),
        "major": version.major,
        "minor": version.minor,
        "patch": version.patch,
        "prerelease": _identifier_values(version.prerelease),
        "build": _identifier_values(version.build),
        "is_prerelease": version.is_prerelease,
    }


def _describe(version: Version) -> List[Tuple[str, str]]:
    return [
        ("major", str(version.major)),
        ("minor", str(version.minor)),
        ("patch", str(version.patch)),
        ("prerelease", version.prerelease_text or "-"),
        ("build", version.build_text or "-"),
        ("canonical", str(version)),
    ]
