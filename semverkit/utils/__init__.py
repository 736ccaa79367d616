"""
Utility helpers for semverkit.

This package provides reusable utilities used across semverkit, including:

- Console output helpers (Rich-based)
- Logging configuration and retrieval
- Filesystem safety helpers

Only symbols listed in ``__all__`` are considered part of the public API.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Filesystem utilities
# ---------------------------------------------------------------------------

from semverkit.utils.filesystem import safe_read_file, safe_write_file

# ---------------------------------------------------------------------------
# Logging utilities
# ---------------------------------------------------------------------------

from semverkit.utils.logger import (
    disable_logging,
    get_logger,
    is_logging_configured,
    level_for_verbosity,
    setup_logging,
)

# ---------------------------------------------------------------------------
# Console utilities
# ---------------------------------------------------------------------------

from semverkit.utils.console import (
    format_ordering,
    get_raw_console,
    print_error,
    print_plain,
    print_success,
    print_table,
    print_warning,
    reconfigure_console,
)

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    # Console
    "print_error",
    "print_plain",
    "print_table",
    "print_success",
    "print_warning",
    "format_ordering",
    "get_raw_console",
    "reconfigure_console",
    # Logging
    "get_logger",
    "setup_logging",
    "disable_logging",
    "level_for_verbosity",
    "is_logging_configured",
    # Filesystem
    "safe_read_file",
    "safe_write_file",
]
