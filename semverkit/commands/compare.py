"""Compare and sort commands for semverkit.

Typical usage::

    $ semverkit compare 1.0.0-rc.1 1.0.0
    1.0.0-rc.1 < 1.0.0

    $ semverkit sort 1.0.0 1.0.0-beta.11 1.0.0-beta.2
    1.0.0-beta.2
    1.0.0-beta.11
    1.0.0
"""

from __future__ import annotations

import sys
from typing import List, Tuple

import click
from rich.markup import escape

from semverkit.core.comparator import Ordering, compare, sort_key
from semverkit.exceptions import VersionParsingError
from semverkit.models.version import Version, parse
from semverkit.context import SemverKitContext, pass_context
from semverkit.utils import (
    format_ordering,
    get_logger,
    get_raw_console,
    print_error,
    print_plain,
)

logger = get_logger("commands.compare")


def _parse_all(versions: Tuple[str, ...]) -> List[Version]:
    """Parse every argument, reporting each invalid one before exiting."""
    parsed: List[Version] = []
    failed = False

    for text in versions:
        try:
            parsed.append(parse(text))
        except VersionParsingError as exc:
            failed = True
            print_error(f"Invalid version {escape(repr(text))}: {escape(str(exc))}")

    if failed:
        sys.exit(1)
    return parsed


def describe_comparison(lhs: Version, rhs: Version) -> Tuple[Ordering, str]:
    """Return the ordering of two versions and a one-line Rich description.

    Versions that only differ in build metadata are ordering-equal but not
    ``==``; the description says so.
    """
    ordering = compare(lhs, rhs)
    if ordering is Ordering.EQUAL and lhs != rhs:
        return ordering, f"{lhs} [green]=[/green] {rhs} [dim](build metadata differs)[/dim]"
    return ordering, f"{lhs} {format_ordering(ordering)} {rhs}"


@click.command("compare")
@click.argument("first")
@click.argument("second")
@pass_context
def compare_command(ctx: SemverKitContext, first: str, second: str) -> None:
    """Compare FIRST and SECOND by semantic version precedence."""
    lhs, rhs = _parse_all((first, second))
    ordering, description = describe_comparison(lhs, rhs)

    logger.debug("compare(%s, %s) -> %s", lhs, rhs, ordering.name)
    get_raw_console().print(description)


@click.command("sort")
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--reverse",
    "-r",
    is_flag=True,
    help="Print the highest precedence first.",
)
@pass_context
def sort_command(ctx: SemverKitContext, versions: Tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS in precedence order, one per line.

    Versions of equal precedence keep their input order.
    """
    parsed = _parse_all(versions)
    for version in sorted(parsed, key=sort_key, reverse=reverse):
        print_plain(str(version))
