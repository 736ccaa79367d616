"""
Version accessors backed by a key-value store.

A stored version is kept as its canonical string. Reading parses it back;
when the key is missing or its text no longer parses, the accessor falls
back instead of raising:

- :class:`VersionValue` returns its default version.
- :class:`OptionalVersionValue` returns ``None``.

Accessors work standalone or as class attributes (descriptors)::

    store = JSONFileStore("settings.json")

    class AppSettings:
        last_launched = VersionValue(store, "app", "last_launched", default="0.0.0")
        dismissed_update = OptionalVersionValue(store, "app", "dismissed_update")

    settings = AppSettings()
    if current > settings.last_launched:
        show_whats_new()
    settings.last_launched = current
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional, Type, Union

from semverkit.exceptions import VersionParsingError
from semverkit.models.version import Version, parse
from semverkit.storage.base import KeyValueStore
from semverkit.utils.logger import get_logger

logger = get_logger("storage.accessors")

__all__ = ["VersionValue", "OptionalVersionValue"]


class _VersionAccessor(ABC):
    """Shared store plumbing for the version accessors."""

    def __init__(self, store: KeyValueStore, domain: str, name: str) -> None:
        self.store = store
        self.domain = domain
        self.name = name

    def _read(self) -> Optional[Version]:
        raw = self.store.get(self.domain, self.name)
        if raw is None:
            return None

        try:
            return parse(raw)
        except VersionParsingError as exc:
            logger.warning(
                "Ignoring unparsable version %r stored at %s/%s: %s",
                raw,
                self.domain,
                self.name,
                exc,
            )
            return None

    def _write(self, version: Optional[Version]) -> None:
        if version is not None and not isinstance(version, Version):
            raise TypeError(f"Expected Version, got {type(version).__name__}")
        self.store.set(self.domain, self.name, None if version is None else str(version))

    @abstractmethod
    def get(self) -> Any:
        """Return the stored version, or the fallback when there is none."""

    @abstractmethod
    def set(self, version: Any) -> None:
        """Store ``version`` under this accessor's key."""

    @property
    def value(self) -> Any:
        return self.get()

    @value.setter
    def value(self, version: Any) -> None:
        self.set(version)

    def __get__(self, instance: Any, owner: Optional[Type[Any]] = None) -> Any:
        if instance is None:
            return self
        return self.get()

    def __set__(self, instance: Any, version: Any) -> None:
        self.set(version)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(store={self.store!r}, "
            f"domain={self.domain!r}, name={self.name!r})"
        )


class VersionValue(_VersionAccessor):
    """Stored version with a fallback default.

    Args:
        store: Backing key-value store.
        domain: Store domain (namespace).
        name: Key within the domain.
        default: Version returned when nothing valid is stored. A string is
            parsed immediately.

    Raises:
        VersionParsingError: ``default`` is a string that does not parse.
    """

    def __init__(
        self,
        store: KeyValueStore,
        domain: str,
        name: str,
        default: Union[Version, str],
    ) -> None:
        super().__init__(store, domain, name)
        self.default: Version = parse(default) if isinstance(default, str) else default
        if not isinstance(self.default, Version):
            raise TypeError(f"default must be a Version or str, got {type(default).__name__}")

    def get(self) -> Version:
        stored = self._read()
        return self.default if stored is None else stored

    def set(self, version: Version) -> None:
        if version is None:
            raise TypeError("VersionValue cannot store None; use reset()")
        self._write(version)

    def reset(self) -> None:
        """Remove the stored value so :meth:`get` returns the default."""
        self._write(None)


class OptionalVersionValue(_VersionAccessor):
    """Stored version that reads as ``None`` when absent or unparsable."""

    def get(self) -> Optional[Version]:
        return self._read()

    def set(self, version: Optional[Version]) -> None:
        self._write(version)
