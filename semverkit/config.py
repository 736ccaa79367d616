"""Configuration loading for the semverkit CLI.

Settings live either in a standalone ``semverkit.toml`` (``[semverkit]``
table) or in ``pyproject.toml`` (``[tool.semverkit]`` table)::

    [semverkit]
    store_path = ".cache/versions.json"
    domain = "my-app"

A file named with ``--config`` (or ``SEMVERKIT_CONFIG``) wins; otherwise
the working directory is searched, standalone file first.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field

import tomli

from semverkit.exceptions import ConfigError
from semverkit.utils.logger import get_logger
from semverkit.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_DOMAIN,
    DEFAULT_STORE_PATH,
)

logger = get_logger("config")

PYPROJECT_FILE_NAME = "pyproject.toml"

_KNOWN_OPTIONS = frozenset({"store_path", "domain"})


@dataclass
class SemverKitConfig:
    """Effective semverkit settings.

    Attributes:
        store_path: JSON file backing the ``store`` commands. Relative paths
            from a config file are anchored at that file's directory.
        domain: Store domain used when a command gets no ``--domain``.
        source_path: File the settings came from; ``None`` for defaults.
    """

    store_path: Path = field(default_factory=lambda: Path(DEFAULT_STORE_PATH))
    domain: str = DEFAULT_DOMAIN
    source_path: Optional[Path] = field(default=None, repr=False)

    def to_log_dict(self) -> Dict[str, Any]:
        return {"store_path": str(self.store_path), "domain": self.domain}


def discover_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Locate the configuration file to use, if any.

    Raises:
        ConfigError: ``explicit_path`` was given but is not a file.
    """
    if explicit_path is not None:
        if not explicit_path.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        return explicit_path.resolve()

    cwd = Path.cwd()
    standalone = cwd / CONFIG_FILE_NAME
    if standalone.is_file():
        return standalone

    pyproject = cwd / PYPROJECT_FILE_NAME
    if pyproject.is_file() and _pyproject_has_section(pyproject):
        return pyproject

    return None


def _pyproject_has_section(path: Path) -> bool:
    # An unreadable pyproject.toml belongs to someone else; ignore it.
    try:
        tool = _read_toml(path).get("tool")
    except ConfigError as exc:
        logger.debug("Ignoring %s: %s", path, exc)
        return False
    return isinstance(tool, dict) and "semverkit" in tool


def _read_toml(path: Path) -> Dict[str, Any]:
    """Parse ``path`` as TOML, raising :class:`ConfigError` on any failure."""
    try:
        with open(path, "rb") as fh:
            return tomli.load(fh)
    except tomli.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path.name}: {exc}", config_path=str(path)) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {path}: {exc}", config_path=str(path)
        ) from exc


def load_config(config_path: Optional[Path] = None) -> SemverKitConfig:
    """Return the effective configuration.

    Args:
        config_path: Explicit file; when ``None`` the working directory is
            searched (see :func:`discover_config_file`).

    Raises:
        ConfigError: The file is unreadable, is not TOML, or holds unknown
            or mistyped options.
    """
    path = discover_config_file(config_path)
    if path is None:
        logger.debug("No configuration file, using defaults")
        return SemverKitConfig()

    logger.info("Loading configuration from %s", path)
    document = _read_toml(path)
    if path.name == PYPROJECT_FILE_NAME:
        section = document.get("tool", {}).get("semverkit", {})
    else:
        section = document.get("semverkit", {})

    config = _parse_section(section, config_path=path) if section else SemverKitConfig()
    config.source_path = path
    logger.debug("Configuration: %s", config.to_log_dict())
    return config


def _string_option(section: Dict[str, Any], name: str, config_path: Path) -> Optional[str]:
    if name not in section:
        return None
    value = section[name]
    if not isinstance(value, str) or not value:
        raise ConfigError(
            f"{name} must be a non-empty string, got {type(value).__name__}",
            config_path=str(config_path),
            option=name,
        )
    return value


def _parse_section(section: Dict[str, Any], *, config_path: Path) -> SemverKitConfig:
    """Validate the semverkit table of ``config_path``."""
    if not isinstance(section, dict):
        raise ConfigError(
            "semverkit configuration must be a table",
            config_path=str(config_path),
        )

    unknown = sorted(set(section) - _KNOWN_OPTIONS)
    if unknown:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(unknown)}",
            config_path=str(config_path),
        )

    config = SemverKitConfig()

    store_path = _string_option(section, "store_path", config_path)
    if store_path is not None:
        resolved = Path(store_path).expanduser()
        config.store_path = resolved if resolved.is_absolute() else config_path.parent / resolved

    domain = _string_option(section, "domain", config_path)
    if domain is not None:
        config.domain = domain

    return config
