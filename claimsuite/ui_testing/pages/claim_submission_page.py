"""
================================================================================
Claim Submission Page Object (Async / Playwright)
================================================================================

The "File a Claim" screen: claim type selection, incident/vehicle/location/
police report/theft sections, document uploads and submission.

Element conventions:
  - Every form control has a data-testid primary locator and id/name fallbacks
  - Read-only result elements (success banner, claim number, errors, coverage
    warning) are exposed as Playwright Locators so tests can use
    `expect(...)` auto-waiting assertions on them

Portal-side validation failures (missing fields, rejected uploads, coverage
warnings) never raise here; they are read back as rendered text.

================================================================================
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional, Union

import allure
from loguru import logger
from playwright.async_api import Locator

from claimsuite.ui_testing.data.claim_data import (
    ClaimData,
    ClaimSubtype,
    ClaimType,
    IncidentType,
    Location,
    PoliceReport,
    TheftDetails,
    VehicleInfo,
)
from claimsuite.ui_testing.framework.page_base import BasePage
from claimsuite.ui_testing.framework.smart_locator import SmartLocator


# Upload slots on the claim form
DOCUMENT_CATEGORIES = (
    "photos",
    "police-report",
    "repair-estimate",
    "vehicle-registration",
    "keys-photos",
)

# Form field keys used by the portal's field-level validation messages
REQUIRED_FIELDS = ("claimType", "incidentDate", "description")


def _slug(text: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")


def _datetime_local(value: str) -> str:
    """datetime-local inputs normalize away zero seconds; match that format."""
    if len(value) == 19 and value.endswith(":00"):
        return value[:16]
    return value


class ClaimSubmissionPage(BasePage):
    """Claim submission page object (async)."""

    URL_PATH = "/claims/new"
    PAGE_TITLE = "File a Claim"

    # ============================================================
    # Page Elements: claim classification
    # ============================================================

    @property
    def select_claim_type_dropdown(self) -> SmartLocator:
        """Claim type dropdown (Auto/Home/Health/Commercial)."""
        return self.smart_locator(
            primary="[data-testid='select-claim-type']",
            fallbacks=["#claimType", "select[name='claimType']"],
            name="Claim Type Dropdown",
        )

    @property
    def select_claim_subtype_dropdown(self) -> SmartLocator:
        return self.smart_locator(
            primary="[data-testid='select-claim-subtype']",
            fallbacks=["#claimSubtype", "select[name='claimSubtype']"],
            name="Claim Subtype Dropdown",
        )

    @property
    def select_incident_type_dropdown(self) -> SmartLocator:
        return self.smart_locator(
            primary="[data-testid='select-incident-type']",
            fallbacks=["#incidentType", "select[name='incidentType']"],
            name="Incident Type Dropdown",
        )

    # ============================================================
    # Page Elements: incident details
    # ============================================================

    @property
    def input_incident_date(self) -> SmartLocator:
        return self.smart_locator(
            primary="[data-testid='input-incident-date']",
            fallbacks=["#incidentDate", "input[name='incidentDate']"],
            name="Incident Date Input",
        )

    @property
    def input_description(self) -> SmartLocator:
        return self.smart_locator(
            primary="[data-testid='input-description']",
            fallbacks=["#description", "textarea[name='description']"],
            name="Description Input",
        )

    @property
    def input_amount(self) -> SmartLocator:
        return self.smart_locator(
            primary="[data-testid='input-claim-amount']",
            fallbacks=["#claimAmount", "input[name='claimAmount']"],
            name="Claim Amount Input",
        )

    # ============================================================
    # Page Elements: generated per-field locators
    # ============================================================

    def _input(self, testid: str, field_id: str, name: str) -> SmartLocator:
        return self.smart_locator(
            primary=f"[data-testid='{testid}']",
            fallbacks=[f"#{field_id}", f"[name='{field_id}']"],
            name=name,
        )

    def _upload_input(self, category: str) -> SmartLocator:
        return self.smart_locator(
            primary=f"[data-testid='upload-{category}']",
            fallbacks=[
                f"#upload-{category}",
                f"input[type='file'][name='{category}']",
            ],
            name=f"Upload {category}",
        )

    def _security_feature_checkbox(self, feature: str) -> SmartLocator:
        return self.smart_locator(
            primary=f"[data-testid='security-feature-{_slug(feature)}']",
            fallbacks=[
                f"input[type='checkbox'][value='{feature}']",
                f"label:has-text('{feature}') >> input[type='checkbox']",
            ],
            name=f"Security Feature {feature}",
        )

    # ============================================================
    # Page Elements: results (Locators for expect())
    # ============================================================

    @property
    def success_message(self) -> Locator:
        return self.page.locator(
            "[data-testid='success-message'], .alert-success, [role='status'].success"
        ).first

    @property
    def error_message(self) -> Locator:
        return self.page.locator(
            "[data-testid='error-message'], .alert-danger, .form-error-summary"
        ).first

    @property
    def upload_error(self) -> Locator:
        return self.page.locator(
            "[data-testid='upload-error'], .upload-error"
        ).first

    @property
    def coverage_warning(self) -> Locator:
        return self.page.locator(
            "[data-testid='coverage-warning'], .coverage-warning"
        ).first

    @property
    def claim_number_label(self) -> Locator:
        return self.page.locator(
            "[data-testid='claim-number'], .claim-number"
        ).first

    @property
    def max_coverage_label(self) -> Locator:
        return self.page.locator(
            "[data-testid='max-coverage-amount'], .max-coverage-amount"
        ).first

    def field_error(self, field: str) -> Locator:
        """Inline validation message for a form field (e.g. 'claimType')."""
        return self.page.locator(
            f"[data-testid='error-{field}'], #{field}-error, "
            f"[data-field='{field}'] .field-error"
        ).first

    def _upload_result(self, category: str) -> Locator:
        return self.page.locator(
            f"[data-testid='upload-status-{category}'], "
            f"[data-testid='upload-error'], .upload-error"
        ).first

    # ============================================================
    # Page Actions
    # ============================================================

    @allure.step("Navigate to claim submission")
    async def navigate_to_claim_submission(self) -> "ClaimSubmissionPage":
        """Open the claim form."""
        await self.navigate()
        await self.wait_for_page_load()
        return self

    async def select_claim_type(self, claim_type: Union[ClaimType, str]) -> None:
        """
        Select the claim type.

        Args:
            claim_type: One of Auto, Home, Health, Commercial

        Raises:
            ValueError: If the claim type is not supported
        """
        resolved = ClaimType.parse(claim_type)
        await self.select_field(self.select_claim_type_dropdown, resolved.value)

    async def select_claim_subtype(self, subtype: Union[ClaimSubtype, str]) -> None:
        await self.select_field(self.select_claim_subtype_dropdown, subtype)

    async def select_incident_type(self, incident_type: Union[IncidentType, str]) -> None:
        await self.select_field(self.select_incident_type_dropdown, incident_type)

    @allure.step("Enter incident details")
    async def enter_incident_details(self, claim: ClaimData) -> None:
        """Fill incident date, description and amount (unset values are skipped)."""
        await self.fill_field(self.input_incident_date, claim.incident_date)
        await self.fill_field(self.input_description, claim.description)
        if claim.amount is not None:
            await self.enter_claim_amount(claim.amount)

    async def enter_claim_amount(self, amount: float) -> None:
        """Fill the claim amount with two decimals and leave the field."""
        await self.fill_field(self.input_amount, f"{amount:.2f}")
        # Coverage checks run on blur
        locator = await self.input_amount.locate(timeout=self.timeout)
        await locator.blur()

    @allure.step("Enter vehicle information")
    async def enter_vehicle_information(self, vehicle: VehicleInfo) -> None:
        await self.fill_field(self._input("input-vehicle-year", "vehicleYear", "Vehicle Year"), vehicle.year)
        await self.fill_field(self._input("input-vehicle-make", "vehicleMake", "Vehicle Make"), vehicle.make)
        await self.fill_field(self._input("input-vehicle-model", "vehicleModel", "Vehicle Model"), vehicle.model)
        await self.fill_field(self._input("input-vehicle-vin", "vin", "VIN"), vehicle.vin)
        if vehicle.license_plate:
            await self.fill_field(
                self._input("input-license-plate", "licensePlate", "License Plate"),
                vehicle.license_plate,
            )

    @allure.step("Enter location details")
    async def enter_location_details(self, location: Location) -> None:
        await self.fill_field(
            self._input("input-incident-address", "incidentAddress", "Incident Address"),
            location.address,
        )
        if location.coordinates is not None:
            await self.fill_field(
                self._input("input-latitude", "latitude", "Latitude"),
                location.coordinates.lat,
            )
            await self.fill_field(
                self._input("input-longitude", "longitude", "Longitude"),
                location.coordinates.lng,
            )

    @allure.step("Enter police report information")
    async def enter_police_report_info(self, report: PoliceReport) -> None:
        await self.fill_field(
            self._input("input-police-report-number", "policeReportNumber", "Police Report Number"),
            report.report_number,
        )
        if report.officer_name:
            await self.fill_field(
                self._input("input-officer-name", "officerName", "Officer Name"),
                report.officer_name,
            )
        if report.department:
            await self.fill_field(
                self._input("input-police-department", "policeDepartment", "Police Department"),
                report.department,
            )

    @allure.step("Enter theft details")
    async def enter_theft_details(self, theft: TheftDetails) -> None:
        await self.fill_field(
            self._input("input-time-discovered", "timeDiscovered", "Time Discovered"),
            _datetime_local(theft.time_discovered),
        )
        await self.fill_field(
            self._input("input-last-seen-time", "lastSeenTime", "Last Seen Time"),
            _datetime_local(theft.last_seen_time),
        )
        await self.select_field(
            self._input("select-keys-status", "keysStatus", "Keys Status"),
            theft.keys_status,
        )
        for feature in theft.security_features:
            with allure.step(f"Check security feature: {feature}"):
                checkbox = await self._security_feature_checkbox(feature).locate(timeout=self.timeout)
                await checkbox.check()

    @allure.step("Fill claim form")
    async def fill_claim_form(self, claim: ClaimData) -> None:
        """Fill every section present in the claim record, in screen order."""
        if claim.claim_type is not None:
            await self.select_claim_type(claim.claim_type)
        if claim.subtype is not None:
            await self.select_claim_subtype(claim.subtype)
        if claim.incident_type is not None:
            await self.select_incident_type(claim.incident_type)
        await self.enter_incident_details(claim)
        if claim.vehicle_info is not None:
            await self.enter_vehicle_information(claim.vehicle_info)
        if claim.location is not None:
            await self.enter_location_details(claim.location)
        if claim.police_report is not None:
            await self.enter_police_report_info(claim.police_report)
        if claim.theft_details is not None:
            await self.enter_theft_details(claim.theft_details)

    @allure.step("Upload {category}: {file_path}")
    async def upload_document(self, category: str, file_path: Union[str, Path]) -> None:
        """
        Attach a document to an upload slot and wait for the portal's verdict.

        The wait ends when the slot shows either an uploaded state or an
        upload error; a rejected file is reported through `upload_error`.

        Args:
            category: Upload slot (photos, police-report, repair-estimate,
                vehicle-registration, keys-photos)
            file_path: Local file to upload

        Raises:
            ValueError: Unknown upload slot
            FileNotFoundError: The file does not exist
        """
        if category not in DOCUMENT_CATEGORIES:
            raise ValueError(
                f"Unknown document category: {category!r}. "
                f"Expected one of: {', '.join(DOCUMENT_CATEGORIES)}"
            )
        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(f"Upload file not found: {path}")

        await self._upload_input(category).set_input_files(None, str(path), timeout=self.timeout)
        await self._upload_result(category).wait_for(state="visible", timeout=self.timeout)
        logger.debug(f"Uploaded {path.name} to slot {category}")

    @allure.step("Submit claim")
    async def submit_claim(self) -> None:
        """Click submit and wait for the portal to settle."""
        await self.click("submit_claim_button")
        await self.wait_for_page_load()

    # ============================================================
    # Read-only Accessors
    # ============================================================

    async def get_field_error(self, field: str) -> str:
        locator = self.field_error(field)
        await locator.wait_for(state="visible", timeout=self.timeout)
        return (await locator.inner_text()).strip()

    async def get_upload_error(self) -> str:
        await self.upload_error.wait_for(state="visible", timeout=self.timeout)
        return (await self.upload_error.inner_text()).strip()

    async def get_coverage_warning(self) -> str:
        await self.coverage_warning.wait_for(state="visible", timeout=self.timeout)
        return (await self.coverage_warning.inner_text()).strip()

    async def get_claim_number(self) -> str:
        """
        Return the generated claim number shown after submission.

        The label may include a caption ("Claim #: AUTO0000000001"); only the
        token after the last colon/hash/whitespace is returned.
        """
        await self.claim_number_label.wait_for(state="visible", timeout=self.timeout)
        text = (await self.claim_number_label.inner_text()).strip()
        claim_number = re.split(r"[\s:#]+", text)[-1]
        logger.info(f"Claim number: {claim_number}")
        return claim_number

    async def get_max_coverage_amount(self) -> Optional[float]:
        """
        Return the maximum coverage shown next to the coverage warning.

        "$20,000.00" -> 20000.0. None when the label has no number.
        """
        await self.max_coverage_label.wait_for(state="visible", timeout=self.timeout)
        text = await self.max_coverage_label.inner_text()
        match = re.search(r"\d[\d,]*(?:\.\d+)?", text)
        if match is None:
            return None
        return float(match.group(0).replace(",", ""))


__all__ = [
    "ClaimSubmissionPage",
    "DOCUMENT_CATEGORIES",
    "REQUIRED_FIELDS",
]
