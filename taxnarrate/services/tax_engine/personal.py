"""Personal income tax (PAYE) evaluation.

``evaluate_tax`` runs a law version's deduction policy and band table over
an annual gross income and returns a ``TaxBreakdown`` value object.
``evaluate_new_law_tax`` and ``evaluate_old_law_tax`` are the entry points
the calculator screens use.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from .bands import CURRENT_LAW, PREVIOUS_LAW, LawVersion, TaxPolicy
from .money import AmountLike, Money, Rate, ZERO, to_money
from .policies import get_policy
from .progressive import BandResult, evaluate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TaxBreakdown:
    law_version: LawVersion
    gross_income: Money
    pension_deduction: Money
    housing_fund_deduction: Money
    rent_relief: Money
    consolidated_relief: Money
    taxable_income: Money
    tax_due: Money
    effective_rate: Rate
    bands: tuple[BandResult, ...]

    @property
    def total_deductions(self) -> Money:
        return Money(
            self.pension_deduction
            + self.housing_fund_deduction
            + self.rent_relief
            + self.consolidated_relief
        )


def effective_rate(tax_due: Money, gross_income: Money) -> Rate:
    if gross_income > 0:
        return Rate(tax_due / gross_income)
    return Rate(ZERO)


def evaluate_with_policy(annual_gross: Money, annual_rent: Money, policy: TaxPolicy) -> TaxBreakdown:
    deductions = policy.deductions(annual_gross, annual_rent)
    taxable_income = Money(max(annual_gross - deductions.total, ZERO))
    result = evaluate(taxable_income, policy.bands)
    return TaxBreakdown(
        law_version=policy.version,
        gross_income=annual_gross,
        pension_deduction=deductions.pension,
        housing_fund_deduction=deductions.housing_fund,
        rent_relief=deductions.rent_relief,
        consolidated_relief=deductions.consolidated_relief,
        taxable_income=taxable_income,
        tax_due=result.tax_due,
        effective_rate=effective_rate(result.tax_due, annual_gross),
        bands=result.band_results,
    )


def evaluate_tax(
    annual_gross: AmountLike,
    annual_rent: AmountLike = 0,
    law_version: LawVersion | str = CURRENT_LAW,
) -> TaxBreakdown:
    policy = get_policy(law_version)
    return evaluate_with_policy(to_money(annual_gross), to_money(annual_rent), policy)


def evaluate_new_law_tax(annual_gross: AmountLike, annual_rent: AmountLike = 0) -> TaxBreakdown:
    return evaluate_tax(annual_gross, annual_rent, CURRENT_LAW)


def evaluate_old_law_tax(annual_gross: AmountLike) -> Money:
    return evaluate_tax(annual_gross, 0, PREVIOUS_LAW).tax_due
