"""
Centralized constants for semverkit.

This module defines immutable values used across semverkit, including the
version grammar, configuration defaults, and logging formats. All values
are intended to be treated as read-only.
"""

import re
from typing import Final, Pattern

# ---------------------------------------------------------------------------
# Version grammar
# ---------------------------------------------------------------------------

#: Separator between the version core and build metadata.
BUILD_SEPARATOR: Final[str] = "+"

#: Separator between the version core and prerelease identifiers.
PRERELEASE_SEPARATOR: Final[str] = "-"

#: Separator between core components and between metadata identifiers.
IDENTIFIER_SEPARATOR: Final[str] = "."

#: Maximum number of dot-separated components in the version core.
MAX_CORE_COMPONENTS: Final[int] = 3

#: A core component: ASCII digits only (no sign, whitespace or underscores).
NUMERIC_PATTERN: Final[Pattern[str]] = re.compile(r"[0-9]+")

#: A numeric metadata identifier: an optionally signed run of ASCII digits.
NUMERIC_IDENTIFIER_PATTERN: Final[Pattern[str]] = re.compile(r"[+-]?[0-9]+")

#: A valid alphanumeric metadata identifier.
ALPHANUMERIC_PATTERN: Final[Pattern[str]] = re.compile(r"[A-Za-z0-9-]+")

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

#: Name of the standalone configuration file.
CONFIG_FILE_NAME: Final[str] = "semverkit.toml"

#: Environment variable holding an explicit configuration path.
CONFIG_ENV_VAR: Final[str] = "SEMVERKIT_CONFIG"

#: Default location of the JSON-backed version store.
DEFAULT_STORE_PATH: Final[str] = ".semverkit.json"

#: Default store domain used when none is configured.
DEFAULT_DOMAIN: Final[str] = "semverkit"

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
