"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Common page interactions
    - Smart element location
    - Screenshot and debugging utilities
    - Wait strategies
    - API response capture for failure diagnostics

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import allure
from loguru import logger
from playwright.async_api import Page, Response

from .config_loader import Settings
from .reporting import artifact_name, attach_json, attach_png, attach_text
from .smart_locator import SmartLocator


# Number of recent /api/ responses kept per page object
MAX_CAPTURED_RESPONSES = 20


class BasePage:
    """
    Base class for all page objects.

    Provides common functionality for:
        - Navigation and URL handling
        - Smart element interaction
        - Screenshot capture
        - API response logging
        - Wait utilities

    Usage:
        class LoginPage(BasePage):
            URL_PATH = "/login"

            async def login(self, username: str, password: str):
                await self.fill("username_input", username)
                await self.fill("password_input", password)
                await self.click("login_button")
    """

    # Override in subclasses
    URL_PATH: str = "/"
    PAGE_TITLE: str = ""

    def __init__(
        self,
        page: Page,
        settings: Settings,
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            settings: Suite settings (base URL, default timeout, artifacts dir)
        """
        self.page = page
        self.settings = settings
        self.base_url = settings.base_url.rstrip("/")
        self.timeout = settings.timeout
        self.smart = SmartLocator(page)

        self._captured_responses: List[Dict[str, Any]] = []
        self._setup_response_capture()

    def _setup_response_capture(self) -> None:
        """Record portal API responses for debugging failed tests."""

        def capture_response(response: Response) -> None:
            if "/api/" not in response.url:
                return
            self._captured_responses.append({
                "timestamp": datetime.now().isoformat(),
                "method": response.request.method,
                "url": response.url,
                "status": response.status,
            })
            if len(self._captured_responses) > MAX_CAPTURED_RESPONSES:
                self._captured_responses.pop(0)

        self.page.on("response", capture_response)

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    @property
    def captured_responses(self) -> List[Dict[str, Any]]:
        return list(self._captured_responses)

    async def navigate(self, wait_for: str = "domcontentloaded") -> None:
        """
        Navigate to this page.

        Args:
            wait_for: Wait condition - 'load', 'domcontentloaded', 'networkidle'
        """
        with allure.step(f"Navigate to {self.URL_PATH}"):
            await self.page.goto(self.url, wait_until=wait_for)
            logger.debug(f"Navigated to: {self.url}")

    async def navigate_to(
        self,
        path: str,
        wait_for: str = "domcontentloaded",
    ) -> None:
        """
        Navigate to specific path.

        Args:
            path: URL path to navigate to
            wait_for: Wait condition
        """
        full_url = f"{self.base_url}{path}"
        with allure.step(f"Navigate to {path}"):
            await self.page.goto(full_url, wait_until=wait_for)
            logger.debug(f"Navigated to: {full_url}")

    async def wait_for_page_load(
        self,
        state: str = "networkidle",
        timeout: Optional[int] = None,
    ) -> None:
        """
        Wait for the page to reach a stable load state.

        Args:
            state: Playwright load state ('load', 'domcontentloaded', 'networkidle')
            timeout: Timeout in milliseconds (settings timeout if None)
        """
        await self.page.wait_for_load_state(state, timeout=timeout or self.timeout)

    def smart_locator(
        self,
        primary: str,
        fallbacks: Optional[List[str]] = None,
        name: str = "custom_element",
    ) -> SmartLocator:
        """
        Build a SmartLocator in *element mode* with primary + fallback selectors.

        Args:
            primary: Primary selector (recommended: data-testid)
            fallbacks: Fallback selectors to try when primary fails
            name: Human-readable element name for logging/Allure

        Returns:
            SmartLocator instance configured for a single element. Fallbacks
            it uses appear in `get_locator_health_report()`.
        """
        locators: Dict[str, str] = {"primary": primary}
        for i, fb in enumerate(fallbacks or [], start=1):
            locators[f"fallback_{i}"] = fb
        return SmartLocator(
            self.page, element_name=name, locators=locators, report_to=self.smart
        )

    # =========================================================================
    # Smart Element Interactions
    # =========================================================================

    async def click(
        self,
        element_name: str,
        timeout: Optional[int] = None,
        **kwargs: Any,
    ) -> None:
        """
        Click element using smart location.

        Args:
            element_name: Name of element from SmartLocator.LOCATORS
            timeout: Timeout for element location
            **kwargs: Additional click options
        """
        with allure.step(f"Click: {element_name}"):
            await self.smart.click(element_name, timeout or self.timeout, **kwargs)

    async def fill(
        self,
        element_name: str,
        value: str,
        timeout: Optional[int] = None,
        **kwargs: Any,
    ) -> None:
        """
        Fill input element.

        Args:
            element_name: Name of input element
            value: Value to fill
            timeout: Timeout for element location
            **kwargs: Additional fill options
        """
        shown = "*" * len(value) if "password" in element_name.lower() else value
        with allure.step(f"Fill {element_name}: {shown}"):
            await self.smart.fill(element_name, value, timeout or self.timeout, **kwargs)

    async def get_text(
        self,
        element_name: str,
        timeout: Optional[int] = None,
    ) -> str:
        """Get text content of element."""
        return await self.smart.get_text(element_name, timeout or self.timeout)

    async def is_visible(
        self,
        element_name: str,
        timeout: int = 2000,
    ) -> bool:
        """Check if element is visible."""
        return await self.smart.is_visible(element_name, timeout)

    # =========================================================================
    # Element-mode helpers
    # =========================================================================

    async def fill_field(self, element: SmartLocator, value: Any) -> None:
        """Clear and fill an element-mode locator. None values are skipped."""
        if value is None:
            return
        text = str(value)
        with allure.step(f"Fill {element.name}: {text}"):
            locator = await element.locate(timeout=self.timeout)
            await locator.fill(text)

    async def select_field(self, element: SmartLocator, label: Any) -> None:
        """Select a dropdown option by visible label. None values are skipped."""
        if label is None:
            return
        text = getattr(label, "value", label)
        with allure.step(f"Select {element.name}: {text}"):
            await element.select_option(None, str(text), timeout=self.timeout)

    # =========================================================================
    # Wait Utilities
    # =========================================================================

    async def wait_for_url(
        self,
        url_pattern: str,
        timeout: Optional[int] = None,
    ) -> None:
        """
        Wait for URL to match pattern.

        Args:
            url_pattern: URL pattern (supports wildcards)
            timeout: Timeout in milliseconds
        """
        with allure.step(f"Wait for URL: {url_pattern}"):
            await self.page.wait_for_url(url_pattern, timeout=timeout or self.timeout)

    # =========================================================================
    # Screenshot and Debug Utilities
    # =========================================================================

    async def screenshot(
        self,
        name: str,
        full_page: bool = False,
        attach_to_allure: bool = True,
    ) -> Path:
        """
        Take screenshot and optionally attach to Allure.

        Args:
            name: Screenshot name (without extension)
            full_page: Capture full scrollable page
            attach_to_allure: Whether to attach to Allure report

        Returns:
            Path to saved screenshot
        """
        screenshot_dir = self.settings.artifacts_dir
        screenshot_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = screenshot_dir / f"{artifact_name(name)}_{timestamp}.png"

        content = await self.page.screenshot(path=str(filepath), full_page=full_page)

        if attach_to_allure:
            attach_png(content, name=name)

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath

    async def capture_failure(self, test_name: str, screenshot: bool = True) -> None:
        """
        Capture debugging information on test failure.

        Saves:
            - Screenshot (skip when the browser manager already takes one)
            - Current URL
            - Recent API responses
            - Locator fallbacks used
        """
        with allure.step("Capture failure details"):
            if screenshot:
                await self.screenshot(f"failure_{test_name}", full_page=True)
            attach_text(self.page.url, name="Current URL")

            if self._captured_responses:
                attach_json(self._captured_responses[-10:], name="Recent API Responses")

            attach_text(self.get_locator_health_report(), name="Locator Health")

    def get_locator_health_report(self) -> str:
        """Get smart locator health report."""
        return self.smart.get_health_report()


__all__ = ["BasePage"]
