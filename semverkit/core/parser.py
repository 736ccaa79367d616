"""
Version string parser for semverkit.

Turns raw text into the pieces a :class:`~semverkit.models.Version` is built
from. Parsing runs in three stages:

1. :func:`decompose` splits the text into core, prerelease and build
   substrings.
2. :func:`parse_core` reads the ``major.minor.patch`` triple, filling in
   missing trailing components with ``0``.
3. :func:`parse_identifiers` classifies and validates each metadata
   section, reporting every invalid token at once.

:func:`parse_components` runs all three stages in the order that decides
which error is reported for inputs with several problems.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from semverkit.constants import (
    BUILD_SEPARATOR,
    IDENTIFIER_SEPARATOR,
    MAX_CORE_COMPONENTS,
    NUMERIC_PATTERN,
    PRERELEASE_SEPARATOR,
)
from semverkit.core.identifier import Identifier, MetadataKind, classify
from semverkit.exceptions import (
    EmptyBuildError,
    EmptyPreReleaseError,
    InvalidBuildIdentifiersError,
    InvalidCoreFormatError,
    InvalidPreReleaseIdentifiersError,
    MultipleBuildMetadataError,
    VersionParsingError,
)

__all__ = [
    "decompose",
    "parse_core",
    "parse_identifiers",
    "parse_components",
    "is_valid",
]

Core = Tuple[int, int, int]
Identifiers = Tuple[Identifier, ...]


def decompose(text: str) -> Tuple[str, Optional[str], Optional[str]]:
    """Split a version string into core, prerelease and build substrings.

    Empty sections are returned as ``""`` rather than ``None`` so callers
    can tell ``"1.0.0+"`` apart from ``"1.0.0"``.

    Args:
        text: Raw version string.

    Returns:
        ``(core, prerelease, build)``; absent sections are ``None``.

    Raises:
        MultipleBuildMetadataError: More than one ``+`` separator.

    Examples:
        >>> decompose("1.0.0-rc.1+build.5")
        ('1.0.0', 'rc.1', 'build.5')
        >>> decompose("1.0.0-")
        ('1.0.0', '', None)
    """
    build_splits = text.split(BUILD_SEPARATOR)
    if len(build_splits) > 2:
        raise MultipleBuildMetadataError(build_splits[1:])

    build = build_splits[1] if len(build_splits) == 2 else None

    core, sep, prerelease = build_splits[0].partition(PRERELEASE_SEPARATOR)
    return core, (prerelease if sep else None), build


def parse_core(text: str) -> Core:
    """Parse the ``major.minor.patch`` core.

    Between one and three components are accepted; missing trailing
    components default to ``0``.

    Every component must be a non-empty run of ASCII digits, so empty
    components such as ``"1."`` or ``"1..2"`` are rejected, not skipped
    (``"1..2"`` does not mean ``1.2.0``).

    Raises:
        InvalidCoreFormatError: Wrong component count, or a component that
            is not a plain run of digits.

    Examples:
        >>> parse_core("1.2")
        (1, 2, 0)
    """
    components = text.split(IDENTIFIER_SEPARATOR)

    if not 1 <= len(components) <= MAX_CORE_COMPONENTS:
        raise InvalidCoreFormatError(text)

    if not all(NUMERIC_PATTERN.fullmatch(c) for c in components):
        raise InvalidCoreFormatError(text)

    numbers = [int(c) for c in components]
    numbers.extend([0] * (MAX_CORE_COMPONENTS - len(numbers)))
    major, minor, patch = numbers
    return major, minor, patch


def parse_identifiers(text: str, kind: MetadataKind) -> Identifiers:
    """Parse a dot-separated metadata section into identifiers.

    Every token is classified (see :func:`~semverkit.core.identifier.classify`)
    and all invalid tokens are collected before raising, so the error lists
    each offender in input order. Empty tokens are kept and reported as
    invalid, not dropped: ``"a..b"`` fails rather than reading as ``a.b``.

    Args:
        text: Prerelease or build metadata text, without its separator.
        kind: Which section is being parsed; selects the error type.

    Returns:
        A non-empty tuple of identifiers.

    Raises:
        EmptyPreReleaseError: ``text`` is empty and ``kind`` is prerelease.
        EmptyBuildError: ``text`` is empty and ``kind`` is build.
        InvalidPreReleaseIdentifiersError: Invalid prerelease tokens.
        InvalidBuildIdentifiersError: Invalid build tokens.
    """
    if not text:
        if kind is MetadataKind.PRERELEASE:
            raise EmptyPreReleaseError()
        raise EmptyBuildError()

    identifiers = tuple(classify(token) for token in text.split(IDENTIFIER_SEPARATOR))
    invalid: List[str] = [str(i) for i in identifiers if not i.is_valid]

    if invalid:
        if kind is MetadataKind.PRERELEASE:
            raise InvalidPreReleaseIdentifiersError(invalid)
        raise InvalidBuildIdentifiersError(invalid)

    return identifiers


def parse_components(
    text: str,
) -> Tuple[Core, Optional[Identifiers], Optional[Identifiers]]:
    """Parse a full version string into its validated components.

    Checks run in a fixed order: separators, core, empty build, empty
    prerelease, build identifiers, prerelease identifiers.

    Args:
        text: Raw version string. Whitespace is not stripped.

    Returns:
        ``(core, prerelease, build)`` with ``None`` for absent sections.

    Raises:
        TypeError: ``text`` is not a string.
        VersionParsingError: Any grammar violation.
    """
    if not isinstance(text, str):
        raise TypeError(f"Version must be a string, got {type(text).__name__}")

    raw_core, raw_prerelease, raw_build = decompose(text)
    core = parse_core(raw_core)

    if raw_build is not None and not raw_build:
        raise EmptyBuildError()
    if raw_prerelease is not None and not raw_prerelease:
        raise EmptyPreReleaseError()

    build = (
        parse_identifiers(raw_build, MetadataKind.BUILD)
        if raw_build is not None
        else None
    )
    prerelease = (
        parse_identifiers(raw_prerelease, MetadataKind.PRERELEASE)
        if raw_prerelease is not None
        else None
    )
    return core, prerelease, build


def is_valid(text: object) -> bool:
    """Return ``True`` if ``text`` is a string that parses as a version."""
    if not isinstance(text, str):
        return False
    try:
        parse_components(text)
    except VersionParsingError:
        return False
    return True
