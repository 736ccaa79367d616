"""
File access for the JSON version store.

Reads are bounded in size; writes go to a sibling temporary file that then
replaces the target, so a crash never leaves a half-written store behind.
Every failure surfaces as :class:`~semverkit.exceptions.FileOperationError`.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from semverkit.exceptions import FileOperationError
from semverkit.utils.logger import get_logger

logger = get_logger("filesystem")

PathLike = Union[str, Path]

#: Store documents larger than this are refused.
MAX_FILE_SIZE = 10 * 1024 * 1024


def _discard(path: Path) -> None:
    try:
        path.unlink()
    except FileNotFoundError:
        return
    except OSError as exc:
        logger.warning("Could not remove leftover %s: %s", path, exc)
    else:
        logger.debug("Removed leftover %s", path)


def _atomic_write(target: Path, content: str) -> None:
    """Replace ``target`` with ``content`` in a single rename."""
    staging: Optional[Path] = None
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, name = tempfile.mkstemp(
            dir=str(target.parent),
            prefix=f".{target.name}.",
            suffix=".tmp",
        )
        staging = Path(name)
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        staging.replace(target)
    except OSError as exc:
        if staging is not None:
            _discard(staging)
        raise FileOperationError(
            f"Atomic write failed: {exc}",
            file_path=str(target),
            operation="write",
            original_error=exc,
        ) from exc


def safe_read_file(
    file_path: PathLike,
    *,
    max_size: Optional[int] = MAX_FILE_SIZE,
    encoding: str = "utf-8",
) -> str:
    """Return the text of ``file_path``.

    Args:
        file_path: File to read.
        max_size: Size limit in bytes; ``None`` lifts it.
        encoding: Text encoding of the file.

    Raises:
        FileOperationError: The path is missing, is not a regular file,
            exceeds ``max_size``, or cannot be decoded.
    """
    path = Path(file_path)

    def failure(message: str, exc: Optional[Exception] = None) -> FileOperationError:
        return FileOperationError(
            message, file_path=str(path), operation="read", original_error=exc
        )

    if not path.exists():
        raise failure(f"File not found: {path}")
    if not path.is_file():
        raise failure(f"Not a file: {path}")

    size = path.stat().st_size
    if max_size is not None and size > max_size:
        raise failure(f"File too large: {size} bytes (max {max_size})")

    try:
        return path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise failure(f"Failed to read file: {exc}", exc) from exc


def safe_write_file(file_path: PathLike, content: str) -> Path:
    """Atomically write ``content`` to ``file_path`` and return the path."""
    path = Path(file_path)
    _atomic_write(path, content)
    logger.debug("Wrote %d bytes to %s", len(content), path)
    return path
