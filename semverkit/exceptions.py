"""
Errors raised by semverkit.

Every error is a :class:`SemverKitError` carrying a human-readable
``message`` plus a ``details`` mapping of extra context, which ``str()``
appends as ``key=value`` pairs.

Version parsing failures derive from :class:`VersionParsingError`. They
compare equal when they are of the same class and carry the same payload,
so callers can match on an exact failure::

    >>> try:
    ...     parse("1.0.0+A+AA")
    ... except VersionParsingError as exc:
    ...     exc == MultipleBuildMetadataError(["A", "AA"])
    True
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, MutableMapping, Optional, Tuple


class SemverKitError(Exception):
    """Root of the semverkit error hierarchy.

    Args:
        message: What went wrong, for humans.
        details: Extra context (paths, offending values); copied.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message: str = message
        self.details: MutableMapping[str, Any] = dict(details or {})

    def __str__(self) -> str:
        if self.details:
            pairs = ", ".join(f"{key}={value}" for key, value in self.details.items())
            return f"{self.message} ({pairs})"
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, details={dict(self.details)!r})"


def _present(**values: Any) -> Dict[str, Any]:
    """Keep only the keyword arguments that are not ``None``."""
    return {key: value for key, value in values.items() if value is not None}


def _truncate(text: str, max_length: int = 200) -> str:
    return text if len(text) <= max_length else text[:max_length] + "..."

# ---------------------------------------------------------------------------
# Version parsing
# ---------------------------------------------------------------------------


class VersionParsingError(SemverKitError):
    """Base class for every failure raised while parsing a version.

    Subclasses expose their payload through :meth:`_key`, which drives
    equality and hashing.
    """

    __slots__ = ()

    def _key(self) -> Tuple[Any, ...]:
        return ()

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._key() == other._key()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._key()))


class InvalidCoreFormatError(VersionParsingError):
    """Raised when the ``major.minor.patch`` core cannot be parsed.

    The core must hold one to three dot-separated non-negative integers.

    Args:
        text: The offending core substring.
    """

    __slots__ = ("text",)

    def __init__(self, text: str) -> None:
        super().__init__(
            "Invalid version core format",
            {"core": repr(_truncate(text))},
        )
        self.text = text

    def _key(self) -> Tuple[Any, ...]:
        return (self.text,)


class _InvalidIdentifiersError(VersionParsingError):
    """Shared implementation for errors carrying a list of bad tokens."""

    __slots__ = ("tokens",)

    _message = "Invalid identifiers"

    def __init__(self, tokens: Iterable[str]) -> None:
        self.tokens: Tuple[str, ...] = tuple(tokens)
        super().__init__(
            self._message,
            {"identifiers": ", ".join(repr(t) for t in self.tokens)},
        )

    def _key(self) -> Tuple[Any, ...]:
        return self.tokens


class InvalidPreReleaseIdentifiersError(_InvalidIdentifiersError):
    """Raised when one or more prerelease identifiers are invalid."""

    __slots__ = ()

    _message = "Invalid prerelease identifiers"


class InvalidBuildIdentifiersError(_InvalidIdentifiersError):
    """Raised when one or more build metadata identifiers are invalid."""

    __slots__ = ()

    _message = "Invalid build metadata identifiers"


class MultipleBuildMetadataError(_InvalidIdentifiersError):
    """Raised when a version holds more than one ``+`` separator.

    ``tokens`` lists every ``+``-delimited segment after the first one.
    """

    __slots__ = ()

    _message = "Multiple build metadata sections"


class EmptyPreReleaseError(VersionParsingError):
    """Raised when ``-`` is present but the prerelease text is empty."""

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__("Prerelease section is empty")


class EmptyBuildError(VersionParsingError):
    """Raised when ``+`` is present but the build metadata text is empty."""

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__("Build metadata section is empty")


# ---------------------------------------------------------------------------
# Serialization, configuration and storage
# ---------------------------------------------------------------------------


class SerializationError(SemverKitError):
    """A JSON payload could not be turned into a version.

    ``payload`` keeps the raw input; ``details`` holds a truncated copy.
    """

    __slots__ = ("payload",)

    def __init__(self, message: str, *, payload: Optional[str] = None) -> None:
        super().__init__(
            message,
            _present(payload=None if payload is None else _truncate(payload)),
        )
        self.payload = payload


class ConfigError(SemverKitError):
    """A configuration file is missing, unreadable or invalid."""

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        super().__init__(message, _present(path=config_path, option=option))
        self.config_path = config_path
        self.option = option


class FileOperationError(SemverKitError):
    """Reading or writing a store file failed.

    Args:
        message: Error description.
        file_path: File being accessed.
        operation: ``"read"`` or ``"write"``.
        original_error: Underlying exception, if any.
    """

    __slots__ = ("file_path", "operation", "original_error")

    def __init__(
        self,
        message: str,
        *,
        file_path: Optional[str] = None,
        operation: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        super().__init__(
            message,
            _present(
                path=file_path,
                operation=operation,
                original_error=None if original_error is None else str(original_error),
            ),
        )
        self.file_path = file_path
        self.operation = operation
        self.original_error = original_error
