"""Abstract key-value store holding string values grouped by domain."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Optional


class KeyValueStore(ABC):
    """A string-valued store addressed by ``(domain, name)``.

    A domain is a namespace (a settings suite); ``name`` is the key within
    it. Implementations must be safe to call from several threads.
    """

    @abstractmethod
    def get(self, domain: str, name: str) -> Optional[str]:
        """Return the stored value, or ``None`` if the key is absent."""

    @abstractmethod
    def set(self, domain: str, name: str, value: Optional[str]) -> None:
        """Store ``value``; ``None`` removes the key."""

    @abstractmethod
    def items(self, domain: str) -> Dict[str, str]:
        """Return a snapshot of every key stored in ``domain``."""

    def delete(self, domain: str, name: str) -> None:
        self.set(domain, name, None)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        domain, name = key
        return self.get(domain, name) is not None
