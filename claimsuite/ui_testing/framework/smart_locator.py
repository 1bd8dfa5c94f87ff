"""
================================================================================
Smart Locator
================================================================================

Element location with ordered fallback strategies:
    - Multiple selectors per element, tried in priority order
    - Automatic degradation when the primary selector fails
    - Fallback usage tracking for locator maintenance

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from loguru import logger
from playwright.async_api import Locator, Page


class ElementNotFoundError(Exception):
    """Raised when all locator strategies fail to find element."""
    pass


@dataclass
class LocatorHealth:
    """
    Tracks locator health and usage statistics.

    Attributes:
        element_name: Human-readable element name
        primary_selector: The preferred selector
        used_fallback: Whether a fallback was used
        fallback_name: Name of fallback used (if any)
        fallback_selector: The fallback selector used (if any)
    """
    element_name: str
    primary_selector: str
    used_fallback: bool = False
    fallback_name: Optional[str] = None
    fallback_selector: Optional[str] = None


class SmartLocator:
    """
    Element locator with fallback strategies.

    Locator Priority Order:
        1. data-testid (most stable, recommended)
        2. id / name attributes
        3. aria-label
        4. Visible text content

    Usage:
        >>> smart = SmartLocator(page)
        >>> await smart.click("login_button")
        >>> await smart.fill("username_input", "claimant@email.com")

    Configuration:
        Shared portal elements are defined in the LOCATORS dictionary.
        Screen-specific elements are declared on each Page Object via
        `BasePage.smart_locator()` (element mode).
    """

    # Format: element_name -> {strategy_name: selector}
    LOCATORS: Dict[str, Dict[str, str]] = {
        # Authentication elements
        "username_input": {
            "primary": "[data-testid='input-username']",
            "fallback_1": "#username",
            "fallback_2": "input[name='username']",
            "fallback_3": "input[type='email']",
        },
        "password_input": {
            "primary": "[data-testid='input-password']",
            "fallback_1": "#password",
            "fallback_2": "input[name='password']",
            "fallback_3": "input[type='password']",
        },
        "login_button": {
            "primary": "[data-testid='btn-login']",
            "fallback_1": "[aria-label='Login']",
            "fallback_2": "button:has-text('Log In')",
            "fallback_3": "button[type='submit']",
        },
        "logout_button": {
            "primary": "[data-testid='btn-logout']",
            "fallback_1": "[aria-label='Logout']",
            "fallback_2": "button:has-text('Log Out')",
        },
        "user_menu": {
            "primary": "[data-testid='user-menu']",
            "fallback_1": "[aria-label='Account']",
            "fallback_2": ".user-menu",
        },

        # Navigation elements
        "nav_claims": {
            "primary": "[data-testid='nav-claims']",
            "fallback_1": "a[href='/claims']",
            "fallback_2": "nav >> text=My Claims",
        },
        "nav_new_claim": {
            "primary": "[data-testid='nav-new-claim']",
            "fallback_1": "a[href='/claims/new']",
            "fallback_2": "nav >> text=File a Claim",
        },

        # Claim form
        "submit_claim_button": {
            "primary": "[data-testid='btn-submit-claim']",
            "fallback_1": "button[type='submit']",
            "fallback_2": "button:has-text('Submit Claim')",
        },

        # Toast/notification elements
        "toast_success": {
            "primary": "[data-testid='toast-success']",
            "fallback_1": ".toast.success",
            "fallback_2": "[role='alert']:has-text('success')",
        },
        "toast_error": {
            "primary": "[data-testid='toast-error']",
            "fallback_1": ".toast.error",
            "fallback_2": "[role='alert'].error",
        },
    }

    def __init__(
        self,
        page: Page,
        element_name: Optional[str] = None,
        locators: Optional[Dict[str, str]] = None,
        report_to: Optional["SmartLocator"] = None,
    ):
        """
        Initialize SmartLocator with Playwright page.

        This class supports two usage styles:
        1) **Library mode**: `SmartLocator(page)` then `await smart.click("login_button")`
           using the class-level `LOCATORS` map.
        2) **Element mode**: `SmartLocator(page, element_name="X", locators={...})`
           then `await element.locate()` to resolve a single element with fallbacks.

        Args:
            page: Playwright Page object
            element_name: Optional human-readable element name (element mode)
            locators: Optional locator map (element mode)
            report_to: Record health into this locator's report instead of
                a private one (element locators report to their page's
                library-mode locator)
        """
        self.page = page
        self._element_name = element_name
        self._element_locators = locators
        if report_to is not None:
            self._health_records: List[LocatorHealth] = report_to._health_records
            self._fallback_used: Dict[str, LocatorHealth] = report_to._fallback_used
        else:
            self._health_records = []
            self._fallback_used = {}

    async def locate(
        self,
        target: Optional[Union[str, Dict[str, str]]] = None,
        timeout: int = 5000,
        element_name: Optional[str] = None,
        custom_locators: Optional[Dict[str, str]] = None,
        state: str = "visible",
    ) -> Locator:
        """
        Locate element using smart fallback strategy.

        Tries each locator strategy in order until one succeeds.

        Args:
            target: Either an element key (str) to look up in `LOCATORS`,
                a locator map (dict) with primary/fallback selectors, or None
                to use the instance's stored locator map (element mode).
            timeout: Timeout in milliseconds for each attempt
            element_name: Optional human-readable name (used for logging/reporting).
            custom_locators: Override default locators when `target` is a string key.
            state: Element state to wait for. File inputs are usually hidden,
                so uploads wait for 'attached'.

        Returns:
            Playwright Locator for the found element

        Raises:
            ElementNotFoundError: When all strategies fail
        """
        if isinstance(target, dict):
            locators = target
            display_name = element_name or self._element_name or "custom_element"
        elif isinstance(target, str):
            locators = custom_locators or self.LOCATORS.get(target, {})
            display_name = target
        else:
            locators = self._element_locators or {}
            display_name = element_name or self._element_name or "custom_element"

        if not locators:
            raise ElementNotFoundError(
                f"No locators defined for element: {display_name}"
            )

        errors = []

        for strategy_name, selector in locators.items():
            try:
                locator = self.page.locator(selector).first
                await locator.wait_for(state=state, timeout=timeout)
            except Exception as e:
                errors.append(f"{strategy_name}: {selector} -> {str(e)[:80]}")
                continue

            health = LocatorHealth(
                element_name=display_name,
                primary_selector=locators.get("primary", selector),
                used_fallback=(strategy_name != "primary"),
                fallback_name=strategy_name if strategy_name != "primary" else None,
                fallback_selector=selector if strategy_name != "primary" else None,
            )
            self._health_records.append(health)

            if strategy_name != "primary":
                logger.warning(
                    f"Element '{display_name}' used fallback: "
                    f"{strategy_name} -> {selector}"
                )
                self._fallback_used[display_name] = health
            else:
                logger.debug(f"Element '{display_name}' found: {selector}")

            return locator

        error_msg = (
            f"All locators failed for '{display_name}':\n" +
            "\n".join(f"  - {err}" for err in errors)
        )
        logger.error(error_msg)
        raise ElementNotFoundError(error_msg)

    async def click(
        self,
        target: Optional[Union[str, Dict[str, str]]] = None,
        timeout: int = 5000,
        element_name: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        """
        Click element using smart location.

        Args:
            target: Element key (str), locator map (dict), or None in element mode
            timeout: Timeout for element location
            element_name: Optional human-readable name when `target` is a dict
            **kwargs: Additional arguments passed to click()
        """
        locator = await self.locate(target, timeout=timeout, element_name=element_name)
        await locator.click(**kwargs)

    async def fill(
        self,
        target: Optional[Union[str, Dict[str, str]]],
        value: str,
        timeout: int = 5000,
        element_name: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        """
        Fill input element using smart location.

        Args:
            target: Element key (str), locator map (dict), or None in element mode
            value: Value to fill
            timeout: Timeout for element location
            element_name: Optional human-readable name when `target` is a dict
            **kwargs: Additional arguments passed to fill()
        """
        locator = await self.locate(target, timeout=timeout, element_name=element_name)
        await locator.fill(value, **kwargs)

    async def select_option(
        self,
        target: Optional[Union[str, Dict[str, str]]],
        label: str,
        timeout: int = 5000,
        element_name: Optional[str] = None,
    ) -> None:
        """Select a dropdown option by its visible label."""
        locator = await self.locate(target, timeout=timeout, element_name=element_name)
        await locator.select_option(label=label)

    async def set_input_files(
        self,
        target: Optional[Union[str, Dict[str, str]]],
        files: Union[str, Path, Sequence[Union[str, Path]]],
        timeout: int = 5000,
        element_name: Optional[str] = None,
    ) -> None:
        """Attach file(s) to a file input. Hidden inputs are accepted."""
        locator = await self.locate(
            target, timeout=timeout, element_name=element_name, state="attached"
        )
        await locator.set_input_files(files)

    async def get_text(
        self,
        target: Optional[Union[str, Dict[str, str]]] = None,
        timeout: int = 5000,
        element_name: Optional[str] = None,
    ) -> str:
        """
        Get text content of element.

        Args:
            target: Element key (str) or locator map (dict)
            timeout: Timeout for element location
            element_name: Optional human-readable name when `target` is a dict

        Returns:
            Stripped text content of element
        """
        locator = await self.locate(target, timeout=timeout, element_name=element_name)
        return (await locator.text_content() or "").strip()

    async def is_visible(
        self,
        target: Optional[Union[str, Dict[str, str]]] = None,
        timeout: int = 2000,
        element_name: Optional[str] = None,
    ) -> bool:
        """
        Check if element is visible.

        Returns:
            True if element is visible, False otherwise
        """
        try:
            locator = await self.locate(target, timeout=timeout, element_name=element_name)
        except ElementNotFoundError:
            return False
        return await locator.is_visible()

    def get_health_report(self) -> str:
        """
        Generate locator health report.

        Lists elements that needed a fallback locator (maintenance candidates).

        Returns:
            Formatted health report string
        """
        if not self._fallback_used:
            return "All elements used primary locators. No maintenance needed."

        report_lines = [
            "Locator Health Report - Fallbacks Used:",
            "",
            "The following elements used fallback locators.",
            "Consider updating the primary selectors:",
            "",
        ]

        for element_name, health in self._fallback_used.items():
            report_lines.extend([
                f"  [{element_name}]",
                f"    Failed primary: {health.primary_selector}",
                f"    Used: {health.fallback_name} -> {health.fallback_selector}",
                "",
            ])

        return "\n".join(report_lines)

    @property
    def name(self) -> str:
        """Element name in element mode."""
        return self._element_name or "custom_element"

    @property
    def fallbacks_used(self) -> Dict[str, LocatorHealth]:
        return dict(self._fallback_used)

    def register_locator(
        self,
        element_name: str,
        locators: Dict[str, str],
    ) -> None:
        """
        Register new locator at runtime.

        The registration is instance-local; the class-level LOCATORS
        table is not modified.

        Args:
            element_name: Unique name for the element
            locators: Dictionary of strategy -> selector
        """
        self.LOCATORS = {**self.LOCATORS, element_name: locators}
        logger.debug(f"Registered new locator: {element_name}")


__all__ = [
    "SmartLocator",
    "ElementNotFoundError",
    "LocatorHealth",
]
