"""Late payment penalty: simple daily accrual at 10% per annum."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .money import DAYS_PER_YEAR, AmountLike, Money, to_money

ANNUAL_PENALTY_RATE = Decimal("0.10")


@dataclass(frozen=True)
class PenaltyResult:
    daily_penalty_rate: Money
    total_penalty: Money
    total_amount_due: Money


def compute_penalty(amount: AmountLike, days_overdue: int) -> PenaltyResult:
    principal = to_money(amount)
    daily = principal * ANNUAL_PENALTY_RATE / DAYS_PER_YEAR
    total_penalty = daily * int(days_overdue)
    return PenaltyResult(
        daily_penalty_rate=Money(daily),
        total_penalty=Money(total_penalty),
        total_amount_due=Money(principal + total_penalty),
    )
