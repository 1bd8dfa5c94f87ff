"""
================================================================================
Claim Test Data Models
================================================================================

Transient fixture records consumed by the claim Page Objects.

A ClaimData instance lives for one test case: it is built as a literal (or via
ClaimFactory), handed to ClaimSubmissionPage and discarded at test end.
Nothing here is persisted or shared between tests.

================================================================================
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Pattern, Union


class ClaimType(str, Enum):
    """Claim types offered by the portal's claim type dropdown."""
    AUTO = "Auto"
    HOME = "Home"
    HEALTH = "Health"
    COMMERCIAL = "Commercial"

    @classmethod
    def parse(cls, value: Union[str, "ClaimType"]) -> "ClaimType":
        """
        Resolve a claim type from its label (case-insensitive).

        Raises:
            ValueError: If the value is not a supported claim type
        """
        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value.lower() == str(value).strip().lower():
                return member
        raise ValueError(
            f"Unsupported claim type: {value!r}. "
            f"Expected one of: {', '.join(m.value for m in cls)}"
        )


class ClaimSubtype(str, Enum):
    """Auto claim subtypes."""
    COLLISION = "Collision"
    COMPREHENSIVE = "Comprehensive"
    LIABILITY = "Liability"


class IncidentType(str, Enum):
    """Incident types for comprehensive claims."""
    THEFT = "Theft"
    VANDALISM = "Vandalism"
    WEATHER = "Weather"
    FIRE = "Fire"
    GLASS = "Glass"


class ClaimStatus(str, Enum):
    """Status labels rendered by the portal (Draft -> ... -> Settled/Closed)."""
    DRAFT = "Draft"
    SUBMITTED = "Submitted"
    UNDER_REVIEW = "Under Review"
    INVESTIGATION = "Investigation"
    SETTLED = "Settled"
    CLOSED = "Closed"


# SIU flag shown on the claim details page for claims routed to investigation
SIU_PENDING = "Pending SIU Review"


# =============================================================================
# Records
# =============================================================================

@dataclass
class Credentials:
    """Username/password pair for a test role. Read-only during a run."""
    role: str
    username: str
    password: str = field(repr=False)


@dataclass
class Coordinates:
    lat: float
    lng: float


@dataclass
class VehicleInfo:
    year: int
    make: str
    model: str
    vin: str
    license_plate: str = ""


@dataclass
class Location:
    address: str
    coordinates: Optional[Coordinates] = None


@dataclass
class PoliceReport:
    report_number: str
    officer_name: str = ""
    department: str = ""


@dataclass
class TheftDetails:
    """
    Theft-specific fields.

    Times are the portal's datetime-local format (YYYY-MM-DDTHH:MM:SS).
    """
    time_discovered: str
    last_seen_time: str
    keys_status: str
    security_features: List[str] = field(default_factory=list)


@dataclass
class ClaimData:
    """
    A single test claim.

    Only `claim_type` is needed to start the form; every other section is
    optional and is filled only when present.
    """
    claim_type: Optional[Union[ClaimType, str]] = None
    subtype: Optional[Union[ClaimSubtype, str]] = None
    incident_type: Optional[Union[IncidentType, str]] = None
    incident_date: Optional[str] = None
    description: Optional[str] = None
    amount: Optional[float] = None
    vehicle_info: Optional[VehicleInfo] = None
    location: Optional[Location] = None
    police_report: Optional[PoliceReport] = None
    theft_details: Optional[TheftDetails] = None

    @property
    def is_theft(self) -> bool:
        return _label(self.incident_type) == IncidentType.THEFT.value


# =============================================================================
# Claim Number Contract
# =============================================================================

# Prefix per (claim type, subtype) as observed on the portal
CLAIM_NUMBER_PREFIXES = {
    (ClaimType.AUTO.value, ClaimSubtype.COLLISION.value): "AUTO",
    (ClaimType.AUTO.value, ClaimSubtype.LIABILITY.value): "AUTO",
    (ClaimType.AUTO.value, ClaimSubtype.COMPREHENSIVE.value): "COMP",
}

CLAIM_NUMBER_DIGITS = 10


def _label(value: Optional[Union[Enum, str]]) -> Optional[str]:
    if isinstance(value, Enum):
        return value.value
    return value


def claim_number_pattern(claim: ClaimData) -> Pattern[str]:
    """
    Return the regex a generated claim number must match for this claim.

    Auto/Collision -> ^AUTO\\d{10}$, Auto/Comprehensive -> ^COMP\\d{10}$.

    Raises:
        ValueError: For claim type/subtype combinations without a known prefix
    """
    key = (_label(claim.claim_type), _label(claim.subtype))
    prefix = CLAIM_NUMBER_PREFIXES.get(key)
    if prefix is None:
        raise ValueError(f"No claim number format known for {key[0]}/{key[1]}")
    return re.compile(rf"^{prefix}\d{{{CLAIM_NUMBER_DIGITS}}}$")


def is_valid_claim_number(claim_number: str, claim: ClaimData) -> bool:
    """Check a portal-generated claim number against the claim's format."""
    return bool(claim_number_pattern(claim).match(claim_number or ""))


__all__ = [
    "ClaimType",
    "ClaimSubtype",
    "IncidentType",
    "ClaimStatus",
    "SIU_PENDING",
    "Credentials",
    "Coordinates",
    "VehicleInfo",
    "Location",
    "PoliceReport",
    "TheftDetails",
    "ClaimData",
    "claim_number_pattern",
    "is_valid_claim_number",
]
