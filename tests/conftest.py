"""Shared test configuration and fixtures."""

import logging
import os
from collections.abc import Iterator
from datetime import date
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from monthcal.config.settings import MonthCalSettings, reset_settings


def pytest_configure(config: Any) -> None:
    """Configure pytest with markers."""
    config.addinivalue_line("markers", "unit: Fast unit tests")
    config.addinivalue_line("markers", "critical_path: Core functionality tests")
    config.addinivalue_line("markers", "smoke: Basic smoke tests")


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path) -> Iterator[Path]:
    """Keep tests away from the user's config, env vars and the global settings."""
    clean_env = {k: v for k, v in os.environ.items() if not k.upper().startswith("MONTHCAL_")}
    clean_env["MONTHCAL_CONFIG_DIR"] = str(tmp_path / "config")
    clean_env["MONTHCAL_DATA_DIR"] = str(tmp_path / "data")

    with (
        patch.dict("os.environ", clean_env, clear=True),
        patch(
            "monthcal.config.settings.PROJECT_CONFIG_FILE",
            tmp_path / "no-project-config" / "config.yaml",
        ),
    ):
        reset_settings()
        yield tmp_path
        reset_settings()

    app_logger = logging.getLogger("monthcal")
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def config_dir(isolated_environment: Path) -> Path:
    """User config directory used by settings in tests."""
    path = isolated_environment / "config"
    path.mkdir(parents=True, exist_ok=True)
    return path


@pytest.fixture
def test_settings(isolated_environment: Path) -> MonthCalSettings:
    """Settings with file logging off and default rendering options."""
    return MonthCalSettings()


@pytest.fixture
def fixed_today() -> date:
    """Reference date used for today-highlighting tests."""
    return date(2024, 1, 15)
