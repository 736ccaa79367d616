"""
Unified data model exports for semverkit.

This module re-exports the version value type and its identifier model to
provide a stable and convenient public API.

Example:
    >>> from semverkit.models import Version, NumericIdentifier
"""

from __future__ import annotations

from semverkit.core.identifier import (
    AlphanumericIdentifier,
    Identifier,
    NumericIdentifier,
)
from semverkit.models.version import Version, parse, try_parse

__all__ = [
    "Version",
    "Identifier",
    "NumericIdentifier",
    "AlphanumericIdentifier",
    "parse",
    "try_parse",
]
