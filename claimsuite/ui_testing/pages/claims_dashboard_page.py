"""
================================================================================
Claims Dashboard Page Object (Async / Playwright)
================================================================================

The "My Claims" list: one row per claim with its number and status label.

================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger
from playwright.async_api import Locator

from claimsuite.ui_testing.framework.page_base import BasePage


class ClaimsDashboardPage(BasePage):
    """Claims dashboard page object (async)."""

    URL_PATH = "/claims"
    PAGE_TITLE = "My Claims"

    @allure.step("Open claims dashboard")
    async def open(self) -> "ClaimsDashboardPage":
        """Navigate to the claims dashboard."""
        await self.navigate()
        await self.wait_for_page_load()
        return self

    @allure.step("Verify dashboard loaded")
    async def verify_dashboard_loaded(self) -> None:
        locator = self.page.locator(
            "[data-testid='claims-table'], [data-testid='dashboard-title'], table.claims"
        ).first
        await locator.wait_for(state="visible", timeout=self.timeout)

    def get_claim_by_number(self, claim_number: str) -> Locator:
        """Dashboard row for a claim (use with `expect(...).to_be_visible()`)."""
        return self.page.locator(
            f"[data-testid='claim-row-{claim_number}'], "
            f"tr[data-claim-number='{claim_number}']"
        ).first

    @allure.step("Get status of claim {claim_number}")
    async def get_claim_status(self, claim_number: str) -> str:
        """Return the status label rendered in the claim's row."""
        status = self.get_claim_by_number(claim_number).locator(
            "[data-testid='claim-status'], .claim-status"
        ).first
        await status.wait_for(state="visible", timeout=self.timeout)
        text = (await status.inner_text()).strip()
        logger.debug(f"Claim {claim_number} status: {text}")
        return text


__all__ = ["ClaimsDashboardPage"]
