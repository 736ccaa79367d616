"""
Core functionality exports for semverkit.

The core holds everything with real logic: the identifier model, the
parser stages, the precedence comparator, and the canonical formatter.
Importing from here keeps user-facing imports clean and stable:

    from semverkit.core import compare, decompose

The :class:`~semverkit.models.Version` value type composes these pieces.
"""

from __future__ import annotations

from semverkit.core.identifier import (
    AlphanumericIdentifier,
    Identifier,
    MetadataKind,
    NumericIdentifier,
    classify,
)
from semverkit.core.parser import (
    decompose,
    is_valid,
    parse_components,
    parse_core,
    parse_identifiers,
)
from semverkit.core.comparator import (
    Ordering,
    compare,
    compare_identifiers,
    compare_prerelease,
    sort_key,
)
from semverkit.core.formatter import format_identifiers, format_version

__all__ = [
    # Identifiers
    "AlphanumericIdentifier",
    "Identifier",
    "MetadataKind",
    "NumericIdentifier",
    "classify",
    # Parsing
    "decompose",
    "is_valid",
    "parse_components",
    "parse_core",
    "parse_identifiers",
    # Comparison
    "Ordering",
    "compare",
    "compare_identifiers",
    "compare_prerelease",
    "sort_key",
    # Formatting
    "format_identifiers",
    "format_version",
]
