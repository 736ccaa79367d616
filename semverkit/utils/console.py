"""
Terminal output for the semverkit CLI, rendered with Rich.

Commands talk to the user through the helpers below; diagnostics belong in
:mod:`semverkit.utils.logger` instead. A single themed :class:`Console` is
created lazily and writes to whatever ``sys.stdout`` is at print time.
"""

from __future__ import annotations

import os
import sys
import threading
from typing import Any, Dict, List, Mapping, Optional, Sequence

from rich.table import Table
from rich.theme import Theme
from rich.markup import escape
from rich.console import Console

from semverkit.core.comparator import Ordering

SEMVERKIT_THEME = Theme(
    {
        "success": "bold green",
        "error": "bold red",
        "warning": "bold yellow",
        "info": "bold cyan",
        "dim": "dim",
        "version": "bold magenta",
    }
)

_ORDERING_SYMBOLS: Mapping[Ordering, Sequence[str]] = {
    Ordering.LESS: ("<", "cyan"),
    Ordering.EQUAL: ("==", "green"),
    Ordering.GREATER: (">", "yellow"),
}

_shared: Optional[Console] = None
_shared_lock = threading.Lock()


def _should_use_color() -> bool:
    """Colors are off under ``NO_COLOR`` or ``CI`` and when stdout is not a TTY."""
    if os.environ.get("NO_COLOR") or os.environ.get("CI"):
        return False
    try:
        return bool(sys.stdout.isatty())
    except (AttributeError, OSError):
        return False


def _get_console() -> Console:
    global _shared

    with _shared_lock:
        if _shared is None:
            _shared = Console(
                theme=SEMVERKIT_THEME,
                no_color=not _should_use_color(),
                highlight=False,
                soft_wrap=True,
            )
        return _shared


def reconfigure_console() -> None:
    """Forget the shared console; the next print builds a fresh one.

    Call after changing ``NO_COLOR`` or replacing ``sys.stdout``.
    """
    global _shared
    with _shared_lock:
        _shared = None


def get_raw_console() -> Console:
    """Expose the shared console for callers printing their own markup."""
    return _get_console()


def _status(style: str, prefix: str, message: str) -> None:
    _get_console().print(f"{escape(prefix)} {message}", style=style)


def print_success(message: str, *, prefix: str = "[OK]") -> None:
    _status("success", prefix, message)


def print_error(message: str, *, prefix: str = "[ERROR]") -> None:
    _status("error", prefix, message)


def print_warning(message: str, *, prefix: str = "[WARNING]") -> None:
    _status("warning", prefix, message)


def print_plain(message: str) -> None:
    """Print ``message`` as-is; square brackets are not treated as markup."""
    _get_console().print(message, markup=False)


def print_table(
    rows: List[Dict[str, Any]],
    *,
    headers: Optional[List[str]] = None,
    title: Optional[str] = None,
) -> None:
    """Print ``rows`` as a table, one column per header.

    Columns follow ``headers``, or the keys of the first row when omitted.
    Cell values are stringified and escaped. Nothing is printed for an
    empty ``rows`` list.
    """
    if not rows:
        return

    columns = headers if headers is not None else list(rows[0])

    table = Table(title=title, show_header=True, header_style="bold")
    for column in columns:
        table.add_column(column, overflow="fold")
    for row in rows:
        table.add_row(*(escape(str(row.get(column, ""))) for column in columns))

    _get_console().print(table)


def format_ordering(ordering: Ordering) -> str:
    """Return the comparison symbol for ``ordering`` wrapped in color markup."""
    symbol, color = _ORDERING_SYMBOLS[ordering]
    return f"[{color}]{symbol}[/{color}]"
