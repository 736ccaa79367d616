"""Store commands for semverkit.

Read and write versions in the JSON file store named by the configuration
(``store_path``, default ``.semverkit.json``).

Typical usage::

    $ semverkit store set last_release 1.4.0
    $ semverkit store get last_release
    1.4.0
    $ semverkit store get first_launch --default 0.0.0
    0.0.0
    $ semverkit store unset last_release
"""

from __future__ import annotations

import sys
from typing import Optional

import click
from rich.markup import escape

from semverkit.exceptions import SemverKitError, VersionParsingError
from semverkit.models.version import parse
from semverkit.storage import JSONFileStore, OptionalVersionValue, VersionValue
from semverkit.context import SemverKitContext, pass_context
from semverkit.utils import (
    get_logger,
    print_error,
    print_plain,
    print_success,
    print_warning,
)

logger = get_logger("commands.store")

_domain_option = click.option(
    "--domain",
    "-d",
    default=None,
    help="Store domain (defaults to the configured domain).",
)


def _open_store(ctx: SemverKitContext) -> JSONFileStore:
    store = JSONFileStore(ctx.config.store_path)
    logger.debug("Using store %s", store.path)
    return store


@click.group("store")
def store() -> None:
    """Read and write versions in the configured store."""


@store.command("get")
@click.argument("name")
@click.option(
    "--default",
    "default",
    default=None,
    help="Version printed when NAME is missing or unparsable.",
)
@_domain_option
@pass_context
def get_command(
    ctx: SemverKitContext,
    name: str,
    default: Optional[str],
    domain: Optional[str],
) -> None:
    """Print the version stored under NAME.

    Without --default, exits with status 1 when nothing valid is stored.
    """
    domain = domain or ctx.config.domain

    try:
        if default is not None:
            value = VersionValue(_open_store(ctx), domain, name, default=default)
            print_plain(str(value.get()))
            return

        version = OptionalVersionValue(_open_store(ctx), domain, name).get()
    except SemverKitError as exc:
        print_error(escape(str(exc)))
        sys.exit(1)

    if version is None:
        print_warning(f"No version stored for {escape(domain)}/{escape(name)}")
        sys.exit(1)
    print_plain(str(version))


@store.command("set")
@click.argument("name")
@click.argument("version")
@_domain_option
@pass_context
def set_command(
    ctx: SemverKitContext,
    name: str,
    version: str,
    domain: Optional[str],
) -> None:
    """Store VERSION under NAME in its canonical form."""
    domain = domain or ctx.config.domain

    try:
        parsed = parse(version)
    except VersionParsingError as exc:
        print_error(f"Invalid version {escape(repr(version))}: {escape(str(exc))}")
        sys.exit(1)

    try:
        OptionalVersionValue(_open_store(ctx), domain, name).set(parsed)
    except SemverKitError as exc:
        print_error(escape(str(exc)))
        sys.exit(1)

    print_success(f"{escape(domain)}/{escape(name)} = {parsed}")


@store.command("unset")
@click.argument("name")
@_domain_option
@pass_context
def unset_command(ctx: SemverKitContext, name: str, domain: Optional[str]) -> None:
    """Remove the version stored under NAME."""
    domain = domain or ctx.config.domain

    try:
        OptionalVersionValue(_open_store(ctx), domain, name).set(None)
    except SemverKitError as exc:
        print_error(escape(str(exc)))
        sys.exit(1)

    print_success(f"Removed {escape(domain)}/{escape(name)}")
