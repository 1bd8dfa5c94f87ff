"""
================================================================================
Claim Data Factory
================================================================================

Builds the ClaimData records used by the claim submission scenarios.

Each builder returns a fresh instance so tests can mutate their copy freely.
Keyword overrides replace top-level fields:

    factory = ClaimFactory()
    claim = factory.auto_collision(amount=7500.00)

================================================================================
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from .claim_data import (
    ClaimData,
    ClaimSubtype,
    ClaimType,
    Coordinates,
    IncidentType,
    Location,
    PoliceReport,
    TheftDetails,
    VehicleInfo,
)


class ClaimFactory:
    """Factory for auto claim fixtures."""

    def auto_collision(self, **overrides: Any) -> ClaimData:
        """Rear-end collision, $5,000, 2020 Toyota Camry."""
        claim = ClaimData(
            claim_type=ClaimType.AUTO,
            subtype=ClaimSubtype.COLLISION,
            incident_date="2023-12-01",
            description="Rear-end collision at intersection of Main St and Oak Ave",
            amount=5000.00,
            vehicle_info=VehicleInfo(
                year=2020,
                make="Toyota",
                model="Camry",
                vin="1HGBH41JXMN109186",
                license_plate="ABC123",
            ),
            location=Location(
                address="123 Main St, Anytown, ST 12345",
                coordinates=Coordinates(lat=40.7128, lng=-74.0060),
            ),
            police_report=PoliceReport(
                report_number="PR2023120001",
                officer_name="Officer Smith",
                department="Anytown Police Department",
            ),
        )
        return replace(claim, **overrides)

    def auto_theft(self, **overrides: Any) -> ClaimData:
        """Comprehensive theft claim, $25,000, 2022 Honda Accord."""
        claim = ClaimData(
            claim_type=ClaimType.AUTO,
            subtype=ClaimSubtype.COMPREHENSIVE,
            incident_type=IncidentType.THEFT,
            incident_date="2023-11-25",
            description="Vehicle stolen from parking garage",
            amount=25000.00,
            vehicle_info=VehicleInfo(
                year=2022,
                make="Honda",
                model="Accord",
                vin="1HGCV1F3XMA123456",
                license_plate="XYZ789",
            ),
            location=Location(
                address="456 Business Plaza, Downtown, ST 12345",
                coordinates=Coordinates(lat=40.7589, lng=-73.9851),
            ),
            police_report=PoliceReport(
                report_number="PR2023112501",
                officer_name="Detective Johnson",
                department="Metro Police Department",
            ),
            theft_details=TheftDetails(
                time_discovered="2023-11-25T08:30:00",
                last_seen_time="2023-11-24T18:00:00",
                keys_status="With owner",
                security_features=["Alarm system", "GPS tracking", "Immobilizer"],
            ),
        )
        return replace(claim, **overrides)

    def comprehensive_vandalism(self, amount: float = 15000.00, **overrides: Any) -> ClaimData:
        """Partial comprehensive claim used for coverage checks (no submission)."""
        claim = ClaimData(
            claim_type=ClaimType.AUTO,
            subtype=ClaimSubtype.COMPREHENSIVE,
            incident_type=IncidentType.VANDALISM,
            amount=amount,
        )
        return replace(claim, **overrides)

    def empty(self) -> ClaimData:
        """Claim with every field unset (required-field validation)."""
        return ClaimData()


__all__ = ["ClaimFactory"]
