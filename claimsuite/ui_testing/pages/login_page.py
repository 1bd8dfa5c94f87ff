"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

Authentication entry point of the claims portal.

Selectors come from the shared SmartLocator table (username/password inputs,
login/logout buttons) so the same elements resolve identically on every page.

================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger

from claimsuite.ui_testing.data.claim_data import Credentials
from claimsuite.ui_testing.framework.page_base import BasePage


class LoginPage(BasePage):
    """Login page object (async)."""

    URL_PATH = "/login"
    PAGE_TITLE = "Login"

    # Post-login landing route
    DASHBOARD_URL_PATTERN = "**/dashboard**"

    @allure.step("Open login page")
    async def open(self) -> "LoginPage":
        """Navigate to the login page."""
        await self.navigate()
        await self.wait_for_page_load()
        return self

    @allure.step("Verify login form is displayed")
    async def verify_form_displayed(self) -> bool:
        """Verify login form elements are visible."""
        username_ok = await self.smart.is_visible("username_input", timeout=2000)
        password_ok = await self.smart.is_visible("password_input", timeout=2000)
        button_ok = await self.smart.is_visible("login_button", timeout=2000)
        return username_ok and password_ok and button_ok

    @allure.step("Login (username={username})")
    async def login(
        self,
        username: str,
        password: str,
        wait_dashboard: bool = True,
    ) -> None:
        """
        Perform login.

        Args:
            username: Username (email) to login with
            password: Password
            wait_dashboard: Whether to wait for the dashboard URL after login.
                Pass False for negative scenarios.
        """
        if "/login" not in (self.page.url or ""):
            await self.open()

        await self.fill("username_input", username)
        await self.fill("password_input", password)
        await self.click("login_button")

        if wait_dashboard:
            await self.wait_for_url(self.DASHBOARD_URL_PATTERN)
            logger.info(f"Logged in as: {username}")

    async def login_as(self, credentials: Credentials, wait_dashboard: bool = True) -> None:
        """Login with a configured role's credentials."""
        await self.login(credentials.username, credentials.password, wait_dashboard)

    @allure.step("Logout")
    async def logout(self) -> None:
        """
        Logout and wait for the login page.

        The logout button may sit inside a collapsed user menu; the menu is
        opened first when the button is not directly visible.
        """
        if not await self.smart.is_visible("logout_button", timeout=2000):
            await self.click("user_menu")
        await self.click("logout_button")
        await self.wait_for_url("**/login**")
        logger.info("Logged out")

    @allure.step("Verify login error is displayed")
    async def verify_error_displayed(self) -> bool:
        """Verify an error toast/message is visible after failed login."""
        if await self.smart.is_visible("toast_error", timeout=3000):
            return True
        return await self.smart.is_visible(
            {
                "primary": "[data-testid='login-error']",
                "fallback_1": ".error-message",
                "fallback_2": ".alert-danger",
            },
            timeout=2000,
            element_name="login_error",
        )

    async def assert_login_page_loaded(self) -> None:
        """Hard assertion helper used by tests."""
        assert await self.verify_form_displayed(), "Login form should be visible"


__all__ = ["LoginPage"]
