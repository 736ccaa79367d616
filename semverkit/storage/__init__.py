"""
Persistence helpers for semverkit.

Stores hold plain strings; accessors translate between those strings and
:class:`~semverkit.models.Version` values with a fallback policy.

Example:
    >>> from semverkit.storage import MemoryStore, VersionValue
    >>> seen = VersionValue(MemoryStore(), "app", "seen", default="1.0.0")
    >>> seen.get()
    Version('1.0.0')
"""

from __future__ import annotations

from semverkit.storage.base import KeyValueStore
from semverkit.storage.stores import JSONFileStore, MemoryStore
from semverkit.storage.accessors import OptionalVersionValue, VersionValue

__all__ = [
    "KeyValueStore",
    "MemoryStore",
    "JSONFileStore",
    "VersionValue",
    "OptionalVersionValue",
]
