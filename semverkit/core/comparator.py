"""
Version precedence for semverkit.

Implements SemVer 2.0.0 precedence:

1. ``major``, ``minor`` and ``patch`` compare numerically.
2. A version without prerelease identifiers outranks one that has them.
3. Prerelease identifiers compare position by position: numeric by value,
   alphanumeric by code point, and numeric always below alphanumeric. A
   longer sequence outranks its own prefix.

Build metadata is never consulted here.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Any, Optional, Sequence, Tuple

from semverkit.core.identifier import (
    AlphanumericIdentifier,
    Identifier,
    NumericIdentifier,
)

if TYPE_CHECKING:
    from semverkit.models.version import Version

__all__ = [
    "Ordering",
    "compare",
    "compare_identifiers",
    "compare_prerelease",
    "sort_key",
]


class Ordering(IntEnum):
    """Result of comparing two versions; usable wherever ``-1/0/1`` is."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, lhs: Any, rhs: Any) -> "Ordering":
        """Order two values supporting ``<``."""
        if lhs < rhs:
            return cls.LESS
        if rhs < lhs:
            return cls.GREATER
        return cls.EQUAL


def compare_identifiers(lhs: Identifier, rhs: Identifier) -> Ordering:
    """Compare two prerelease identifiers.

    Examples:
        >>> compare_identifiers(NumericIdentifier(2), NumericIdentifier(11))
        <Ordering.LESS: -1>
        >>> compare_identifiers(NumericIdentifier(99), AlphanumericIdentifier("a"))
        <Ordering.LESS: -1>
    """
    lhs_numeric = isinstance(lhs, NumericIdentifier)
    rhs_numeric = isinstance(rhs, NumericIdentifier)

    if lhs_numeric and not rhs_numeric:
        return Ordering.LESS
    if rhs_numeric and not lhs_numeric:
        return Ordering.GREATER
    return Ordering.of(lhs.value, rhs.value)


def compare_prerelease(
    lhs: Optional[Sequence[Identifier]],
    rhs: Optional[Sequence[Identifier]],
) -> Ordering:
    """Compare two optional prerelease sequences.

    ``None`` means "no prerelease", which ranks above any prerelease.
    """
    if lhs is None and rhs is None:
        return Ordering.EQUAL
    if lhs is None:
        return Ordering.GREATER
    if rhs is None:
        return Ordering.LESS

    if tuple(lhs) == tuple(rhs):
        return Ordering.EQUAL

    for left, right in zip(lhs, rhs):
        result = compare_identifiers(left, right)
        if result is not Ordering.EQUAL:
            return result

    # Unequal sequences whose common prefix matched must differ in length.
    assert len(lhs) != len(rhs), "unequal prerelease sequences with equal length"
    return Ordering.of(len(lhs), len(rhs))


def compare(lhs: "Version", rhs: "Version") -> Ordering:
    """Compare two versions by SemVer precedence.

    Build metadata is ignored, so ``compare`` may return
    :attr:`Ordering.EQUAL` for versions that are not ``==``.

    Examples:
        >>> compare(parse("1.0.0-alpha"), parse("1.0.0"))
        <Ordering.LESS: -1>
        >>> compare(parse("1.0.0+a"), parse("1.0.0+b"))
        <Ordering.EQUAL: 0>
    """
    core = Ordering.of(
        (lhs.major, lhs.minor, lhs.patch),
        (rhs.major, rhs.minor, rhs.patch),
    )
    if core is not Ordering.EQUAL:
        return core

    return compare_prerelease(lhs.prerelease, rhs.prerelease)


def sort_key(version: "Version") -> Tuple[Any, ...]:
    """Return a key for :func:`sorted` that orders exactly like :func:`compare`.

    Examples:
        >>> [str(v) for v in sorted(map(parse, ["1.0.0", "1.0.0-rc.1"]), key=sort_key)]
        ['1.0.0-rc.1', '1.0.0']
    """
    if version.prerelease is None:
        prerelease_key: Tuple[Any, ...] = (1,)
    else:
        parts = []
        for identifier in version.prerelease:
            if isinstance(identifier, AlphanumericIdentifier):
                parts.append((1, 0, identifier.value))
            else:
                parts.append((0, identifier.value, ""))
        prerelease_key = (0, tuple(parts))

    return (version.major, version.minor, version.patch, prerelease_key)
