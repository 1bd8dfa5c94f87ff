"""
================================================================================
Test Data
================================================================================

Fixture records and builders for the claims portal scenarios:
    - claim_data: ClaimData records, enums, claim number formats
    - claim_factory: ready-made auto claims
    - upload_files: on-disk upload documents (valid, invalid type, oversized)

================================================================================
"""

from .claim_data import (
    ClaimData,
    ClaimStatus,
    ClaimSubtype,
    ClaimType,
    Coordinates,
    Credentials,
    IncidentType,
    Location,
    PoliceReport,
    SIU_PENDING,
    TheftDetails,
    VehicleInfo,
    claim_number_pattern,
    is_valid_claim_number,
)
from .claim_factory import ClaimFactory
from .upload_files import UploadFileFactory

__all__ = [
    "ClaimData",
    "ClaimStatus",
    "ClaimSubtype",
    "ClaimType",
    "Coordinates",
    "Credentials",
    "IncidentType",
    "Location",
    "PoliceReport",
    "SIU_PENDING",
    "TheftDetails",
    "VehicleInfo",
    "claim_number_pattern",
    "is_valid_claim_number",
    "ClaimFactory",
    "UploadFileFactory",
]
