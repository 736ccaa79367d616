"""
Metadata identifier model for semverkit.

Prerelease and build metadata are dot-separated sequences of identifiers.
Each identifier is either numeric (the token is a base-10 integer: ASCII
digits with an optional sign) or alphanumeric (anything else). Alphanumeric
identifiers are valid only when every character belongs to ``[A-Za-z0-9-]``.
"""

from __future__ import annotations

from enum import Enum
from dataclasses import dataclass
from typing import Union

from semverkit.constants import ALPHANUMERIC_PATTERN, NUMERIC_IDENTIFIER_PATTERN


class MetadataKind(Enum):
    """Which metadata section an identifier sequence belongs to."""

    PRERELEASE = "prerelease"
    BUILD = "build"


@dataclass(frozen=True)
class NumericIdentifier:
    """An identifier whose token parses entirely as a base-10 integer.

    Leading zeros and a plus sign are not preserved: ``"007"`` is stored as
    ``7``. A prerelease such as ``rc.-1`` holds ``-1``, which orders below
    ``0``. Numeric identifiers are always valid.
    """

    value: int

    @property
    def is_valid(self) -> bool:
        return True

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class AlphanumericIdentifier:
    """An identifier holding arbitrary text, validated against ``[A-Za-z0-9-]+``."""

    value: str

    @property
    def is_valid(self) -> bool:
        return ALPHANUMERIC_PATTERN.fullmatch(self.value) is not None

    def __str__(self) -> str:
        return self.value


Identifier = Union[NumericIdentifier, AlphanumericIdentifier]


def classify(token: str) -> Identifier:
    """Classify a single dot-separated token.

    Args:
        token: Raw identifier text.

    Returns:
        A :class:`NumericIdentifier` when ``token`` is an optionally signed
        run of ASCII digits, otherwise an :class:`AlphanumericIdentifier`
        (which may be invalid).

    Examples:
        >>> classify("11")
        NumericIdentifier(value=11)
        >>> classify("-1")
        NumericIdentifier(value=-1)
        >>> classify("rc")
        AlphanumericIdentifier(value='rc')
    """
    if NUMERIC_IDENTIFIER_PATTERN.fullmatch(token):
        return NumericIdentifier(int(token))
    return AlphanumericIdentifier(token)
