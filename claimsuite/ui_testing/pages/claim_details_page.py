"""
================================================================================
Claim Details Page Object (Async / Playwright)
================================================================================

Single-claim view: status, Special Investigation Unit (SIU) flag.

================================================================================
"""

from __future__ import annotations

import allure

from claimsuite.ui_testing.framework.page_base import BasePage
from claimsuite.ui_testing.framework.smart_locator import SmartLocator


class ClaimDetailsPage(BasePage):
    """Claim details page object (async)."""

    URL_PATH = "/claims/{claim_number}"
    PAGE_TITLE = "Claim Details"

    @property
    def siu_flag(self) -> SmartLocator:
        return self.smart_locator(
            primary="[data-testid='siu-flag']",
            fallbacks=[".siu-flag", "[aria-label='SIU Status']"],
            name="SIU Flag",
        )

    @property
    def claim_status(self) -> SmartLocator:
        return self.smart_locator(
            primary="[data-testid='claim-status']",
            fallbacks=[".claim-status", "[aria-label='Claim Status']"],
            name="Claim Status",
        )

    @allure.step("Open claim details: {claim_number}")
    async def open_claim(self, claim_number: str) -> "ClaimDetailsPage":
        await self.navigate_to(self.URL_PATH.format(claim_number=claim_number))
        await self.wait_for_page_load()
        return self

    async def get_siu_flag(self) -> str:
        """SIU flag text, e.g. 'Pending SIU Review'. Empty when the claim is not flagged."""
        if not await self.siu_flag.is_visible(timeout=2000):
            return ""
        return await self.siu_flag.get_text(timeout=self.timeout)

    async def get_claim_status(self) -> str:
        return await self.claim_status.get_text(timeout=self.timeout)


__all__ = ["ClaimDetailsPage"]
