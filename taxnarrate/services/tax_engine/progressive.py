"""Marginal (progressive) band evaluation.

Income is sliced across the bands in ascending order: each band taxes only
the part of income that falls inside it, so no naira is taxed twice and
total tax is continuous across band edges.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from taxnarrate.utils.currency import whole_naira

from .bands import TaxBand
from .money import AmountLike, Money, Rate, ZERO, to_money

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BandResult:
    label: str
    rate: Rate
    taxable_amount_in_band: Money
    tax_amount_in_band: Money


@dataclass(frozen=True)
class BandEvaluation:
    tax_due: Money
    band_results: tuple[BandResult, ...]


def band_label(tax_band: TaxBand) -> str:
    if tax_band.upper_bound is None:
        return f"Above {whole_naira(tax_band.lower_bound)}"
    return f"{whole_naira(tax_band.lower_bound)} - {whole_naira(tax_band.upper_bound)}"


def evaluate(taxable_income: AmountLike, bands: Sequence[TaxBand]) -> BandEvaluation:
    """Apply ``bands`` to ``taxable_income``.

    Zero, negative or non-numeric income yields no tax and no band results.
    Bands whose slice is empty are left out of the results.
    """
    taxable_income = to_money(taxable_income)
    remaining = taxable_income
    tax_due = ZERO
    results: list[BandResult] = []

    for tax_band in bands:
        if remaining <= 0:
            break
        width = tax_band.width
        amount_in_band = remaining if width is None else min(remaining, width)
        tax_in_band = amount_in_band * tax_band.rate
        if amount_in_band > 0:
            results.append(
                BandResult(
                    label=band_label(tax_band),
                    rate=tax_band.rate,
                    taxable_amount_in_band=Money(amount_in_band),
                    tax_amount_in_band=Money(tax_in_band),
                )
            )
        tax_due = Money(tax_due + tax_in_band)
        remaining = remaining - amount_in_band

    logger.debug("Evaluated taxable income %s across %d bands: tax %s", taxable_income, len(results), tax_due)
    return BandEvaluation(tax_due=tax_due, band_results=tuple(results))
