from __future__ import annotations

from typing import Generator

import pytest

from semverkit.utils.console import reconfigure_console
from semverkit.utils.logger import disable_logging


@pytest.fixture(autouse=True)
def reset_output_state() -> Generator[None, None, None]:
    """Drop handlers and the cached console bound to streams of a previous test."""
    yield
    disable_logging()
    reconfigure_console()
