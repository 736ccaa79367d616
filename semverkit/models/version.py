"""
Version value type for semverkit.

This module defines :class:`Version`, an immutable semantic version built
either from integers or by parsing a string, together with the module-level
:func:`parse` and :func:`try_parse` helpers.

Equality is stricter than ordering: two versions whose build metadata
differs are never ``==`` but still compare as neither lower nor higher, so
``<=`` and ``>=`` hold in both directions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, Tuple, Union

from semverkit.core.comparator import Ordering, compare
from semverkit.core.formatter import format_identifiers, format_version
from semverkit.core.identifier import (
    AlphanumericIdentifier,
    Identifier,
    MetadataKind,
    NumericIdentifier,
)
from semverkit.core.parser import parse_components, parse_identifiers
from semverkit.exceptions import (
    EmptyBuildError,
    EmptyPreReleaseError,
    InvalidBuildIdentifiersError,
    InvalidCoreFormatError,
    InvalidPreReleaseIdentifiersError,
    VersionParsingError,
)

__all__ = ["Version", "parse", "try_parse"]

MetadataInput = Union[str, Sequence[Identifier], None]


def _normalize_metadata(
    value: MetadataInput,
    kind: MetadataKind,
) -> Optional[Tuple[Identifier, ...]]:
    """Validate constructor metadata given as raw text or identifiers."""
    if value is None:
        return None

    if isinstance(value, str):
        return parse_identifiers(value, kind)

    identifiers = tuple(value)
    if not identifiers:
        if kind is MetadataKind.PRERELEASE:
            raise EmptyPreReleaseError()
        raise EmptyBuildError()

    for identifier in identifiers:
        if not isinstance(identifier, (NumericIdentifier, AlphanumericIdentifier)):
            raise TypeError(
                f"{kind.value} identifiers must be NumericIdentifier or "
                f"AlphanumericIdentifier, got {type(identifier).__name__}"
            )

    invalid = [str(i) for i in identifiers if not i.is_valid]
    if invalid:
        if kind is MetadataKind.PRERELEASE:
            raise InvalidPreReleaseIdentifiersError(invalid)
        raise InvalidBuildIdentifiersError(invalid)

    return identifiers


@dataclass(frozen=True, eq=False)
class Version:
    """An immutable semantic version.

    ``prerelease`` and ``build`` may be passed as raw dot-separated text or
    as identifier sequences; they are validated and stored as tuples of
    identifiers (or ``None`` when absent).

    Attributes:
        major: Major version number.
        minor: Minor version number.
        patch: Patch version number.
        prerelease: Prerelease identifiers, e.g. ``alpha.1``.
        build: Build metadata identifiers, e.g. ``build.5``.

    Raises:
        TypeError: A component has the wrong type.
        VersionParsingError: Negative components or invalid metadata.

    Examples:
        >>> Version(1, 0, 0, prerelease="rc.1")
        Version('1.0.0-rc.1')
        >>> Version(1, 2) == parse("1.2")
        True
    """

    major: int
    minor: int = 0
    patch: int = 0
    prerelease: Optional[Tuple[Identifier, ...]] = None
    build: Optional[Tuple[Identifier, ...]] = None

    def __post_init__(self) -> None:
        for field_name in ("major", "minor", "patch"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(
                    f"{field_name} must be an int, got {type(value).__name__}"
                )

        if min(self.major, self.minor, self.patch) < 0:
            raise InvalidCoreFormatError(f"{self.major}.{self.minor}.{self.patch}")

        # Build is validated before prerelease, matching parse().
        build = _normalize_metadata(self.build, MetadataKind.BUILD)
        prerelease = _normalize_metadata(self.prerelease, MetadataKind.PRERELEASE)
        object.__setattr__(self, "build", build)
        object.__setattr__(self, "prerelease", prerelease)

    @classmethod
    def parse(cls, text: str) -> "Version":
        """Parse ``text`` into a version; see :func:`parse`."""
        (major, minor, patch), prerelease, build = parse_components(text)
        return cls(major, minor, patch, prerelease=prerelease, build=build)

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    @property
    def core(self) -> Tuple[int, int, int]:
        """The ``(major, minor, patch)`` triple."""
        return (self.major, self.minor, self.patch)

    @property
    def prerelease_text(self) -> Optional[str]:
        """Prerelease identifiers joined by ``.``, or ``None``."""
        return format_identifiers(self.prerelease)

    @property
    def build_text(self) -> Optional[str]:
        """Build identifiers joined by ``.``, or ``None``."""
        return format_identifiers(self.build)

    @property
    def is_prerelease(self) -> bool:
        return self.prerelease is not None

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def _compare(self, other: Any, predicate: Callable[[Ordering], bool]) -> Any:
        if not isinstance(other, Version):
            return NotImplemented
        return predicate(compare(self, other))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) is Ordering.EQUAL and self.build == other.build

    def __lt__(self, other: Any) -> bool:
        return self._compare(other, lambda o: o is Ordering.LESS)

    def __le__(self, other: Any) -> bool:
        return self._compare(other, lambda o: o is not Ordering.GREATER)

    def __gt__(self, other: Any) -> bool:
        return self._compare(other, lambda o: o is Ordering.GREATER)

    def __ge__(self, other: Any) -> bool:
        return self._compare(other, lambda o: o is not Ordering.LESS)

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.prerelease, self.build))

    # ------------------------------------------------------------------
    # Rendering and pickling
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return format_version(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({format_version(self)!r})"

    def __reduce__(self) -> Tuple[Any, ...]:
        return (parse, (format_version(self),))


def parse(text: str) -> Version:
    """Parse a semantic version string.

    Args:
        text: ``MAJOR[.MINOR[.PATCH]][-PRERELEASE][+BUILD]``. Missing
            ``MINOR`` / ``PATCH`` default to ``0``.

    Returns:
        The parsed :class:`Version`.

    Raises:
        TypeError: ``text`` is not a string.
        VersionParsingError: ``text`` is not a valid version.

    Examples:
        >>> parse("1")
        Version('1.0.0')
        >>> parse("2.0.0-alpha") > parse("1.0.0")
        True
    """
    return Version.parse(text)


def try_parse(text: Optional[str]) -> Optional[Version]:
    """Parse ``text``, returning ``None`` instead of raising.

    ``None`` and non-string input also yield ``None``.
    """
    if not isinstance(text, str):
        return None
    try:
        return Version.parse(text)
    except VersionParsingError:
        return None
