"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for browser management, page objects, and test setup/teardown.

Key Features:
- One browser per worker, one isolated browsing context per test
- Context released after every test, pass or fail
- Screenshot, Playwright trace and page diagnostics attached on failure
- Page Object fixtures for all claims portal screens
- Claimant login and upload file fixtures

================================================================================
"""

from typing import AsyncGenerator

import pytest
from playwright.async_api import Page

from claimsuite.ui_testing.data.claim_factory import ClaimFactory
from claimsuite.ui_testing.data.upload_files import UploadFileFactory
from claimsuite.ui_testing.framework.browser_manager import BrowserManager, Session
from claimsuite.ui_testing.framework.config_loader import Settings, load_settings
from claimsuite.ui_testing.framework.page_base import BasePage
from claimsuite.ui_testing.pages.claim_details_page import ClaimDetailsPage
from claimsuite.ui_testing.pages.claim_submission_page import ClaimSubmissionPage
from claimsuite.ui_testing.pages.claims_dashboard_page import ClaimsDashboardPage
from claimsuite.ui_testing.pages.login_page import LoginPage


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True, tryfirst=True)
def pytest_runtest_makereport(item, call):
    """
    Expose each phase's report on the item (rep_setup, rep_call, rep_teardown).

    Fixture teardown reads `rep_setup` and `rep_call` to decide whether to
    keep failure artifacts.
    """
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


def _test_failed(request: pytest.FixtureRequest) -> bool:
    """True when a fixture (e.g. login) or the test body failed."""
    for when in ("setup", "call"):
        report = getattr(request.node, f"rep_{when}", None)
        if report is not None and report.failed:
            return True
    return False


# ================================================================================
# Configuration Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def settings() -> Settings:
    """Validated suite settings (already checked during collection)."""
    return load_settings()


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="session")
async def browser_manager(settings: Settings) -> AsyncGenerator[BrowserManager, None]:
    """
    Session-scoped browser manager fixture.

    A single browser per worker process; tests get isolated contexts from it.
    """
    async with BrowserManager(settings) as manager:
        yield manager


@pytest.fixture
async def browser_session(
    request: pytest.FixtureRequest,
    browser_manager: BrowserManager,
) -> AsyncGenerator[Session, None]:
    """
    Function-scoped browsing context.

    Released unconditionally after the test. When setup or the test body
    failed, a screenshot and the Playwright trace are saved and attached to Allure.
    """
    session = await browser_manager.new_session(request.node.nodeid)
    try:
        yield session
    finally:
        await browser_manager.close(session, failed=_test_failed(request))


@pytest.fixture
async def page(
    request: pytest.FixtureRequest,
    browser_session: Session,
    settings: Settings,
) -> AsyncGenerator[Page, None]:
    """
    The test's page. On failure, URL, recent portal API responses and
    locator fallbacks are attached before the context is released.
    """
    diagnostics = BasePage(browser_session.page, settings)
    yield browser_session.page
    if _test_failed(request) and not browser_session.page.is_closed():
        await diagnostics.capture_failure(request.node.name, screenshot=False)


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def login_page(page: Page, settings: Settings) -> LoginPage:
    return LoginPage(page, settings)


@pytest.fixture
def claim_submission_page(page: Page, settings: Settings) -> ClaimSubmissionPage:
    return ClaimSubmissionPage(page, settings)


@pytest.fixture
def claims_dashboard_page(page: Page, settings: Settings) -> ClaimsDashboardPage:
    return ClaimsDashboardPage(page, settings)


@pytest.fixture
def claim_details_page(page: Page, settings: Settings) -> ClaimDetailsPage:
    return ClaimDetailsPage(page, settings)


# ================================================================================
# Authentication Fixtures
# ================================================================================

@pytest.fixture
async def claimant_session(login_page: LoginPage, settings: Settings) -> LoginPage:
    """
    Logged in as the configured claimant.

    Returns the LoginPage so tests can logout/switch users.
    """
    await login_page.open()
    await login_page.login_as(settings.credentials("claimant"))
    return login_page


# ================================================================================
# Test Data Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def upload_files(tmp_path_factory: pytest.TempPathFactory) -> UploadFileFactory:
    """Upload documents (valid, wrong type, oversized), created on first use."""
    return UploadFileFactory(tmp_path_factory.mktemp("upload-files"))


@pytest.fixture
def claim_factory() -> ClaimFactory:
    return ClaimFactory()
