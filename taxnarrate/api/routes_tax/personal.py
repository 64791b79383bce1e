"""
Personal Income Tax (PAYE) Routes.

Handles the individual calculator: 2026 breakdown, 2025 figure and the
year-over-year comparison.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter

from taxnarrate.models.schemas import (
    OldLawTaxIn,
    OldLawTaxOut,
    PersonalTaxIn,
    TaxBreakdownOut,
    TaxComparisonOut,
)
from taxnarrate.services.tax_engine import (
    PREVIOUS_LAW,
    compare_laws,
    evaluate_new_law_tax,
    evaluate_old_law_tax,
)

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/personal", response_model=TaxBreakdownOut)
def personal_tax(payload: PersonalTaxIn):
    """Full 2026 PAYE breakdown for an annual gross income."""
    breakdown = evaluate_new_law_tax(payload.annual_gross, payload.annual_rent)
    return TaxBreakdownOut.model_validate(breakdown)


@router.post("/personal/old-law", response_model=OldLawTaxOut)
def personal_tax_old_law(payload: OldLawTaxIn):
    """PAYE under the 2025 rules (CRA), for comparison screens."""
    return OldLawTaxOut(law_version=PREVIOUS_LAW, tax_due=evaluate_old_law_tax(payload.annual_gross))


@router.post("/compare", response_model=TaxComparisonOut)
def compare_tax(payload: PersonalTaxIn):
    comparison = compare_laws(payload.annual_gross, payload.annual_rent)
    logger.debug("Law comparison savings=%s (%s%%)", comparison.savings, comparison.savings_percent)
    return TaxComparisonOut.model_validate(comparison)
