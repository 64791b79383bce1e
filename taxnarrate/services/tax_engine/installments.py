"""Splitting an annual liability into payment installments.

No rounding happens here; callers round for display.
"""
from __future__ import annotations

from dataclasses import dataclass

from .money import MONTHS_PER_YEAR, QUARTERS_PER_YEAR, AmountLike, Money, to_money


@dataclass(frozen=True)
class PaymentPlan:
    plan: str
    label: str
    amount: Money
    payments_per_year: int


def monthly_installment(annual_tax: AmountLike) -> Money:
    return Money(to_money(annual_tax) / MONTHS_PER_YEAR)


def quarterly_installment(annual_tax: AmountLike) -> Money:
    return Money(to_money(annual_tax) / QUARTERS_PER_YEAR)


def payment_plans(annual_tax: AmountLike) -> list[PaymentPlan]:
    """Monthly, quarterly and one-time options for the same annual tax."""
    annual = to_money(annual_tax)
    return [
        PaymentPlan("monthly", "Monthly", monthly_installment(annual), MONTHS_PER_YEAR),
        PaymentPlan("quarterly", "Quarterly", quarterly_installment(annual), QUARTERS_PER_YEAR),
        PaymentPlan("annual", "Annual", annual, 1),
    ]
