"""
semverkit: semantic version values for Python.

semverkit parses ``MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]`` strings into
immutable, totally ordered :class:`Version` values, validates them against
a strict grammar, and renders them back to a canonical form.

Features include:
    • SemVer 2.0.0 precedence (build metadata ignored for ordering)
    • Precise, structured parse errors listing every offending identifier
    • JSON serialization as the canonical string
    • Store-backed version accessors with fallback defaults
    • A ``semverkit`` command-line tool

Example:
    >>> from semverkit import parse
    >>> parse("2.0.0-alpha") > parse("1.0.0")
    True
    >>> str(parse("1.2"))
    '1.2.0'
"""

from __future__ import annotations

from semverkit.__version__ import __version__
from semverkit.exceptions import (
    EmptyBuildError,
    EmptyPreReleaseError,
    InvalidBuildIdentifiersError,
    InvalidCoreFormatError,
    InvalidPreReleaseIdentifiersError,
    MultipleBuildMetadataError,
    SemverKitError,
    VersionParsingError,
)
from semverkit.models import (
    AlphanumericIdentifier,
    NumericIdentifier,
    Version,
    parse,
    try_parse,
)
from semverkit.core import Ordering, compare, format_version, is_valid, sort_key

# ---------------------------------------------------------------------------
# Package Metadata
# ---------------------------------------------------------------------------

__license__ = "Apache-2.0"
__description__ = "Semantic version parsing, comparison and storage."

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "__version__",
    # Values
    "Version",
    "NumericIdentifier",
    "AlphanumericIdentifier",
    # Operations
    "parse",
    "try_parse",
    "is_valid",
    "compare",
    "sort_key",
    "format_version",
    "Ordering",
    # Errors
    "SemverKitError",
    "VersionParsingError",
    "InvalidCoreFormatError",
    "InvalidPreReleaseIdentifiersError",
    "InvalidBuildIdentifiersError",
    "MultipleBuildMetadataError",
    "EmptyPreReleaseError",
    "EmptyBuildError",
]
