"""
Repository-level pytest configuration.

Why this exists:
  - Register the `--claims-config` option (must live in the rootdir conftest)
  - Expose the repository root to fixtures
  - Enable `pytester` for the suite guard tests in claimsuite/unit

Important:
  The shipped config/config.yaml holds placeholder credentials only.
  Real runs should inject secrets through USERS_<ROLE>_PASSWORD env vars in CI.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from claimsuite.ui_testing.framework.config_loader import CONFIG_PATH_ENV, ConfigLoader


pytest_plugins = ["pytester"]


def pytest_addoption(parser):
    parser.addoption(
        "--claims-config",
        action="store",
        default=None,
        help="Path to an alternate claims suite YAML configuration file.",
    )


def pytest_configure(config):
    config_path = config.getoption("--claims-config")
    if config_path:
        os.environ[CONFIG_PATH_ENV] = str(Path(config_path).resolve())
        ConfigLoader.reset()


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent
