"""
JSON serialization for semverkit versions.

A version is encoded as a single JSON string holding its canonical form.
Decoding parses that string, so invalid version text surfaces the usual
:class:`~semverkit.exceptions.VersionParsingError` subclasses, while
malformed JSON or a non-string payload raises
:class:`~semverkit.exceptions.SerializationError`.

Typical usage::

    >>> to_json(parse("1.2.3-rc.1"))
    '"1.2.3-rc.1"'
    >>> from_json('"1.2.3-rc.1"') == parse("1.2.3-rc.1")
    True
    >>> json.dumps({"min": parse("1.0")}, cls=VersionJSONEncoder)
    '{"min": "1.0.0"}'
"""

from __future__ import annotations

import json
from typing import Any, Union

from semverkit.models.version import Version, parse
from semverkit.exceptions import SerializationError

__all__ = ["VersionJSONEncoder", "to_json", "from_json", "decode_value"]


class VersionJSONEncoder(json.JSONEncoder):
    """``json.JSONEncoder`` that writes :class:`Version` as its canonical string."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Version):
            return str(o)
        return super().default(o)


def to_json(version: Version) -> str:
    """Encode a version as a JSON string literal."""
    return json.dumps(str(version))


def decode_value(value: Any) -> Version:
    """Build a version from an already-decoded JSON value.

    Raises:
        SerializationError: ``value`` is not a string.
        VersionParsingError: The string is not a valid version.
    """
    if not isinstance(value, str):
        raise SerializationError(
            f"Expected a version string, got {type(value).__name__}",
            payload=repr(value),
        )
    return parse(value)


def from_json(data: Union[str, bytes, bytearray]) -> Version:
    """Decode a version from a JSON document holding a single string."""
    try:
        value = json.loads(data)
    except (TypeError, ValueError) as exc:
        raise SerializationError(
            f"Invalid JSON: {exc}",
            payload=data if isinstance(data, str) else repr(data),
        ) from exc

    return decode_value(value)
