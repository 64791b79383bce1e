"""Old law vs new law comparison."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .bands import CURRENT_LAW, PREVIOUS_LAW, LawVersion, TaxPolicy
from .money import AmountLike, Money, ZERO, to_money
from .personal import evaluate_with_policy
from .policies import get_policy


@dataclass(frozen=True)
class TaxComparison:
    tax_under_old_law: Money
    tax_under_new_law: Money
    savings: Money
    savings_percent: Decimal


PolicyLike = TaxPolicy | LawVersion | str


def _resolve(policy: PolicyLike) -> TaxPolicy:
    if isinstance(policy, TaxPolicy):
        return policy
    return get_policy(policy)


def compare(
    annual_gross: AmountLike,
    annual_rent: AmountLike,
    old_law: PolicyLike,
    new_law: PolicyLike,
) -> TaxComparison:
    """Evaluate the same income under two laws and return the delta.

    A positive ``savings`` means the new law charges less. Each side applies
    its own deduction policy, so rent only counts where that law allows it.
    Either side may be a registered law version or a ``TaxPolicy`` built by
    the caller; the latter is used as given without touching the registry.
    """
    gross = to_money(annual_gross)
    rent = to_money(annual_rent)
    old_tax = evaluate_with_policy(gross, rent, _resolve(old_law)).tax_due
    new_tax = evaluate_with_policy(gross, rent, _resolve(new_law)).tax_due
    savings = Money(old_tax - new_tax)
    savings_percent = savings / old_tax * 100 if old_tax > 0 else ZERO
    return TaxComparison(
        tax_under_old_law=old_tax,
        tax_under_new_law=new_tax,
        savings=savings,
        savings_percent=savings_percent,
    )


def compare_laws(annual_gross: AmountLike, annual_rent: AmountLike = 0) -> TaxComparison:
    return compare(annual_gross, annual_rent, PREVIOUS_LAW, CURRENT_LAW)
