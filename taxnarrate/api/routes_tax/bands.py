"""
Band Table Routes.

Read-only view of the registered band tables.
"""
from __future__ import annotations

from fastapi import APIRouter

from taxnarrate.models.schemas import BandTableOut, TaxBandOut
from taxnarrate.services.tax_engine import get_policy, registered_versions

router = APIRouter()


@router.get("/bands", response_model=list[str])
def list_law_versions():
    return [version.value for version in registered_versions()]


@router.get("/bands/{law_version}", response_model=BandTableOut)
def band_table(law_version: str):
    # Unknown versions raise UnknownLawVersionError -> 404 via the error handlers
    policy = get_policy(law_version)
    return BandTableOut(
        law_version=policy.version,
        description=policy.description,
        bands=[TaxBandOut.model_validate(b) for b in policy.bands],
    )
