"""
Concrete key-value stores for persisting versions.

:class:`MemoryStore` keeps values in process memory. :class:`JSONFileStore`
persists a ``{domain: {name: value}}`` JSON document on disk, re-reading it
on every access and replacing it atomically on every write, so several
processes sharing one file see each other's updates.
"""

from __future__ import annotations

import json
import threading
from pathlib import Path
from typing import Dict, Optional, Union

from semverkit.exceptions import FileOperationError
from semverkit.storage.base import KeyValueStore
from semverkit.utils.filesystem import safe_read_file, safe_write_file
from semverkit.utils.logger import get_logger

logger = get_logger("storage")

Document = Dict[str, Dict[str, str]]


class MemoryStore(KeyValueStore):
    """In-memory store, mostly useful for tests and short-lived processes."""

    def __init__(self, initial: Optional[Document] = None) -> None:
        self._data: Document = {
            domain: dict(values) for domain, values in (initial or {}).items()
        }
        self._lock = threading.Lock()

    def get(self, domain: str, name: str) -> Optional[str]:
        with self._lock:
            return self._data.get(domain, {}).get(name)

    def set(self, domain: str, name: str, value: Optional[str]) -> None:
        with self._lock:
            if value is None:
                values = self._data.get(domain)
                if values is not None:
                    values.pop(name, None)
                    if not values:
                        del self._data[domain]
                return
            self._data.setdefault(domain, {})[name] = value

    def items(self, domain: str) -> Dict[str, str]:
        with self._lock:
            return dict(self._data.get(domain, {}))

    def __repr__(self) -> str:
        return f"MemoryStore(domains={sorted(self._data)!r})"


class JSONFileStore(KeyValueStore):
    """Store backed by a JSON file.

    A missing file reads as an empty store. Non-string values found in the
    file are ignored with a warning.

    Args:
        path: Location of the JSON document.

    Raises:
        FileOperationError: The file exists but is not a valid store
            document, or cannot be read or written.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def _load(self) -> Document:
        if not self.path.exists():
            return {}

        raw = safe_read_file(self.path)
        if not raw.strip():
            return {}

        try:
            document = json.loads(raw)
        except ValueError as exc:
            raise FileOperationError(
                f"Store file is not valid JSON: {exc}",
                file_path=str(self.path),
                operation="read",
                original_error=exc,
            ) from exc

        if not isinstance(document, dict):
            raise FileOperationError(
                "Store file must contain a JSON object",
                file_path=str(self.path),
                operation="read",
            )

        result: Document = {}
        for domain, values in document.items():
            if not isinstance(values, dict):
                logger.warning("Ignoring non-object domain %r in %s", domain, self.path)
                continue
            result[domain] = {}
            for name, value in values.items():
                if isinstance(value, str):
                    result[domain][name] = value
                else:
                    logger.warning(
                        "Ignoring non-string value for %s/%s in %s",
                        domain,
                        name,
                        self.path,
                    )
        return result

    def _save(self, document: Document) -> None:
        safe_write_file(self.path, json.dumps(document, indent=2, sort_keys=True) + "\n")

    def get(self, domain: str, name: str) -> Optional[str]:
        with self._lock:
            return self._load().get(domain, {}).get(name)

    def set(self, domain: str, name: str, value: Optional[str]) -> None:
        with self._lock:
            document = self._load()
            if value is None:
                values = document.get(domain, {})
                if name not in values:
                    return
                del values[name]
                if not values:
                    document.pop(domain, None)
            else:
                document.setdefault(domain, {})[name] = value

            self._save(document)
            logger.debug("Stored %s/%s=%r in %s", domain, name, value, self.path)

    def items(self, domain: str) -> Dict[str, str]:
        with self._lock:
            return dict(self._load().get(domain, {}))

    def __repr__(self) -> str:
        return f"JSONFileStore({str(self.path)!r})"
