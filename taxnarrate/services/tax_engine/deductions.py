"""Statutory reliefs for each law version.

2026 (Nigeria Tax Act):
- Pension: 8% of gross
- National Housing Fund: 2.5% of basic salary, with basic assumed to be
  25% of gross (an approximation; the real split is employer specific)
- Rent relief: 20% of annual rent paid, capped at ₦500,000

2025 (PITA):
- Consolidated Relief Allowance: the higher of ₦200,000 + 20% of gross
  and 21% of gross. Rent is not considered.

Inputs go through to_money: floats are accepted, non-numeric values count
as zero, and negative figures flow through unchanged.
"""
from __future__ import annotations

from decimal import Decimal

from .bands import Deductions
from .money import AmountLike, Money, ZERO, to_money

PENSION_RATE = Decimal("0.08")
BASIC_SALARY_FRACTION = Decimal("0.25")
HOUSING_FUND_RATE = Decimal("0.025")
RENT_RELIEF_FRACTION = Decimal("0.20")
RENT_RELIEF_CAP = Decimal("500000")

CRA_FIXED_ALLOWANCE = Decimal("200000")
CRA_GROSS_FRACTION = Decimal("0.20")
CRA_MINIMUM_FRACTION = Decimal("0.21")


def compute_rent_relief(annual_rent: AmountLike) -> Money:
    annual_rent = to_money(annual_rent)
    return Money(min(annual_rent * RENT_RELIEF_FRACTION, RENT_RELIEF_CAP))


def compute_deductions(annual_gross: AmountLike, annual_rent: AmountLike = ZERO) -> Deductions:
    """Pension, housing fund and rent relief under the 2026 law."""
    annual_gross = to_money(annual_gross)
    pension = annual_gross * PENSION_RATE
    housing_fund = (annual_gross * BASIC_SALARY_FRACTION) * HOUSING_FUND_RATE
    return Deductions(
        pension=Money(pension),
        housing_fund=Money(housing_fund),
        rent_relief=compute_rent_relief(annual_rent),
    )


def compute_consolidated_relief(annual_gross: AmountLike, annual_rent: AmountLike = ZERO) -> Deductions:
    """Consolidated Relief Allowance under the 2025 law."""
    annual_gross = to_money(annual_gross)
    cra = max(
        CRA_FIXED_ALLOWANCE + annual_gross * CRA_GROSS_FRACTION,
        annual_gross * CRA_MINIMUM_FRACTION,
    )
    return Deductions(consolidated_relief=Money(cra))
