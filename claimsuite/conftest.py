"""
================================================================================
Suite-level Pytest Configuration
================================================================================

Registers the project-wide markers, configures logging, and guards UI runs:

  - settings are validated during collection, so missing configuration aborts
    the run before any test executes
  - UI tests are skipped when the portal does not answer, unless
    `application.requirePortal` is set, in which case the run aborts

================================================================================
"""

from pathlib import Path
from typing import Optional

import httpx
import pytest
from loguru import logger

from claimsuite.ui_testing.framework.config_loader import ConfigurationError, load_settings
from claimsuite.ui_testing.framework.log_setup import init_logger


# Seconds to wait for the portal to answer the reachability probe
PORTAL_PROBE_TIMEOUT = 5.0


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    init_logger()

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests simulating user flows"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: Browser-driven tests against the claims portal"
    )
    config.addinivalue_line(
        "markers", "unit: Framework tests that need neither browser nor portal"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "auth: Tests related to authentication"
    )
    config.addinivalue_line(
        "markers", "claims: Tests related to claim submission"
    )
    config.addinivalue_line(
        "markers", "uploads: Tests related to document uploads"
    )
    config.addinivalue_line(
        "markers", "coverage: Tests related to policy coverage checks"
    )


def _portal_unreachable_reason(base_url: str):
    """Return a skip reason when the portal does not answer, else None."""
    try:
        httpx.get(base_url, timeout=PORTAL_PROBE_TIMEOUT, follow_redirects=True)
    except httpx.HTTPError as e:
        return f"Claims portal not reachable at {base_url}: {e.__class__.__name__}"
    return None


def suite_of(path: Path, rootpath: Path) -> Optional[str]:
    """Classify a test file as "ui" or "unit" by its directories under the rootdir."""
    try:
        parts = path.relative_to(rootpath).parts[:-1]
    except ValueError:
        parts = path.parts[:-1]
    if "ui_testing" in parts:
        return "ui"
    if "unit" in parts:
        return "unit"
    return None


def pytest_collection_modifyitems(config, items):
    """
    Add domain markers and apply the UI run guards.
    """
    ui_items = []
    for item in items:
        suite = suite_of(item.path, config.rootpath)
        if suite == "ui":
            item.add_marker(pytest.mark.ui)
            ui_items.append(item)
        elif suite == "unit":
            item.add_marker(pytest.mark.unit)

    if not ui_items:
        return

    try:
        settings = load_settings()
    except ConfigurationError as e:
        raise pytest.UsageError(f"Invalid claims suite configuration: {e}") from e

    reason = _portal_unreachable_reason(settings.base_url)
    if reason is None:
        return

    if settings.require_portal:
        raise pytest.UsageError(reason)

    logger.warning(f"{reason}. Skipping {len(ui_items)} UI tests.")
    skip = pytest.mark.skip(reason=reason)
    for item in ui_items:
        item.add_marker(skip)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Claims Portal UI Automation Suite",
        "=" * 60,
        "",
    ]
