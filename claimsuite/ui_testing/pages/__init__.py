"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the claims portal screens.

Each page class encapsulates:
    - Element locators
    - Page-specific actions
    - Read-only accessors for assertions

Author: Automation Team
License: MIT
================================================================================
"""

from .login_page import LoginPage
from .claim_submission_page import ClaimSubmissionPage
from .claims_dashboard_page import ClaimsDashboardPage
from .claim_details_page import ClaimDetailsPage

__all__ = [
    "LoginPage",
    "ClaimSubmissionPage",
    "ClaimsDashboardPage",
    "ClaimDetailsPage",
]
