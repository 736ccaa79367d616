"""Per-invocation state shared by the semverkit CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from semverkit.config import SemverKitConfig


class SemverKitContext:
    """Options resolved by the ``semverkit`` group, handed to every subcommand.

    Attributes:
        config_path: Configuration file that was loaded, or ``None``.
        verbose: Number of ``-v`` flags given.
        color: ``False`` when ``--no-color`` was passed.
        config: Effective configuration (defaults until loaded).
    """

    __slots__ = ("config_path", "verbose", "color", "config")

    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.verbose: int = 0
        self.color: bool = True
        self.config: SemverKitConfig = SemverKitConfig()


pass_context = click.make_pass_decorator(SemverKitContext, ensure=True)
