"""
Repository-level pytest configuration.

Why this exists:
  - Configure Loguru once per test process, before any page object logs
  - Expose the repository root to fixtures that write artifacts
"""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest

from e2e_suites.ui_testing.framework.log_config import init_logger


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _configure_logging() -> Generator[None, None, None]:
    """Route suite logs through the configured Loguru sinks."""
    init_logger()
    yield
