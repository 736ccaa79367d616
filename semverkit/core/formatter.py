"""Canonical string rendering for versions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence

from semverkit.constants import (
    BUILD_SEPARATOR,
    IDENTIFIER_SEPARATOR,
    PRERELEASE_SEPARATOR,
)
from semverkit.core.identifier import Identifier

if TYPE_CHECKING:
    from semverkit.models.version import Version

__all__ = ["format_identifiers", "format_version"]


def format_identifiers(identifiers: Optional[Sequence[Identifier]]) -> Optional[str]:
    """Join identifiers with ``.``; ``None`` stays ``None``."""
    if identifiers is None:
        return None
    return IDENTIFIER_SEPARATOR.join(str(i) for i in identifiers)


def format_version(version: "Version") -> str:
    """Render the canonical ``MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]`` form.

    The result always parses back to an equal version, but it is not
    necessarily the text the version was parsed from: missing components
    are filled in and numeric identifiers lose their leading zeros.

    Examples:
        >>> format_version(parse("1.2-rc.01"))
        '1.2.0-rc.1'
    """
    text = f"{version.major}.{version.minor}.{version.patch}"

    prerelease = format_identifiers(version.prerelease)
    if prerelease is not None:
        text += PRERELEASE_SEPARATOR + prerelease

    build = format_identifiers(version.build)
    if build is not None:
        text += BUILD_SEPARATOR + build

    return text
