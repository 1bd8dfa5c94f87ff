"""
================================================================================
Claim Document Upload Validation UI Tests (Async / Playwright)
================================================================================

File type and size rules apply identically to every upload slot, so both
rejections are checked per slot.

================================================================================
"""

import allure
import pytest
from playwright.async_api import expect

from claimsuite.ui_testing.data.claim_data import ClaimType
from claimsuite.ui_testing.data.upload_files import FILE_TOO_LARGE_MESSAGE, INVALID_FILE_TYPE_MESSAGE
from claimsuite.ui_testing.pages.claim_submission_page import DOCUMENT_CATEGORIES, ClaimSubmissionPage


pytestmark = pytest.mark.asyncio(loop_scope="session")


@allure.epic("UI Testing")
@allure.feature("Document Uploads")
class TestUploadValidation:
    """Upload validation UI test suite (async)."""

    @allure.story("Negative Path")
    @allure.title("Handle file upload validation")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P1
    @pytest.mark.regression
    @pytest.mark.uploads
    @pytest.mark.parametrize("category", DOCUMENT_CATEGORIES)
    async def test_rejects_invalid_type_and_oversized_file(
        self,
        category,
        claimant_session,
        claim_submission_page: ClaimSubmissionPage,
        upload_files,
    ):
        await claim_submission_page.navigate_to_claim_submission()
        await claim_submission_page.select_claim_type(ClaimType.AUTO)

        with allure.step("Upload unsupported file type"):
            await claim_submission_page.upload_document(category, upload_files.path("invalid-file.txt"))
            await expect(claim_submission_page.upload_error).to_contain_text(INVALID_FILE_TYPE_MESSAGE)

        with allure.step("Upload file over the size limit"):
            await claim_submission_page.upload_document(category, upload_files.path("large-file.zip"))
            await expect(claim_submission_page.upload_error).to_contain_text(FILE_TOO_LARGE_MESSAGE)

    @allure.story("Happy Path")
    @allure.title("Accepted document shows no upload error")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P2
    @pytest.mark.uploads
    async def test_accepts_pdf_document(
        self,
        claimant_session,
        claim_submission_page: ClaimSubmissionPage,
        upload_files,
    ):
        await claim_submission_page.navigate_to_claim_submission()
        await claim_submission_page.select_claim_type(ClaimType.AUTO)

        await claim_submission_page.upload_document("police-report", upload_files.path("police-report.pdf"))
        await expect(claim_submission_page.upload_error).to_be_hidden()
