"""Company Income Tax (CIT) on annual turnover.

Companies turning over ₦100M or less are exempt. Above that the 30% rate is
charged on turnover itself, not on profit.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .money import AmountLike, Money, Rate, ZERO, to_money

EXEMPTION_THRESHOLD = Decimal("100000000")
CIT_RATE = Decimal("0.30")


@dataclass(frozen=True)
class CorporateTaxResult:
    is_exempt: bool
    tax_rate: Rate
    tax_due: Money


def evaluate_corporate_tax(annual_turnover: AmountLike) -> CorporateTaxResult:
    turnover = to_money(annual_turnover)
    if turnover <= EXEMPTION_THRESHOLD:
        return CorporateTaxResult(is_exempt=True, tax_rate=Rate(ZERO), tax_due=ZERO)
    return CorporateTaxResult(
        is_exempt=False,
        tax_rate=Rate(CIT_RATE),
        tax_due=Money(turnover * CIT_RATE),
    )
