"""
Repository-level pytest configuration.

Sets safe defaults so local runs never launch a visible browser or hit the
public demo site unless explicitly asked to.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest

from fluentverify.common import init_logger


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _safe_env_defaults() -> Generator[None, None, None]:
    """
    Set defaults if not already provided by the user/CI.

    UI tests stay skipped unless RUN_UI_TESTS=1.
    """
    defaults = {
        "HEADLESS": "true",
        "RUN_UI_TESTS": "0",
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    init_logger()
    yield
