"""Band tables and tax policies for each supported law version.

A ``TaxPolicy`` pairs a version's marginal bands with the function that
turns gross income into reliefs, so a new law is a data addition: build
the policy and call ``register_policy``.

Bands are (lower, upper, rate) with ``upper=None`` for the open top band.
Tables are validated when registered.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Callable, Optional

from taxnarrate.core.exceptions import InvalidBandTableError, UnknownLawVersionError

from .money import Money, Rate, ZERO, to_money, to_rate

logger = logging.getLogger(__name__)


class LawVersion(str, Enum):
    PAYE_2025 = "2025"  # Personal Income Tax Act with Consolidated Relief Allowance
    NTA_2026 = "2026"   # Nigeria Tax Act 2025, effective January 2026


@dataclass(frozen=True)
class TaxBand:
    lower_bound: Money
    upper_bound: Optional[Money]
    rate: Rate

    @property
    def is_unbounded(self) -> bool:
        return self.upper_bound is None

    @property
    def width(self) -> Optional[Money]:
        if self.upper_bound is None:
            return None
        return Money(self.upper_bound - self.lower_bound)


def band(lower, upper, rate) -> TaxBand:
    return TaxBand(
        lower_bound=to_money(lower),
        upper_bound=None if upper is None else to_money(upper),
        rate=to_rate(rate),
    )


@dataclass(frozen=True)
class Deductions:
    """Reliefs subtracted from gross income before the bands apply."""

    pension: Money = ZERO
    housing_fund: Money = ZERO
    rent_relief: Money = ZERO
    consolidated_relief: Money = ZERO

    @property
    def total(self) -> Money:
        return Money(self.pension + self.housing_fund + self.rent_relief + self.consolidated_relief)


DeductionPolicy = Callable[[Money, Money], Deductions]


@dataclass(frozen=True)
class TaxPolicy:
    version: LawVersion
    bands: tuple[TaxBand, ...]
    deductions: DeductionPolicy
    description: str = ""


# 2026 PAYE bands (Nigeria Tax Act) - first ₦800,000 is tax free
BANDS_2026: tuple[TaxBand, ...] = (
    band(0, 800_000, "0"),
    band(800_000, 1_600_000, "0.15"),
    band(1_600_000, 3_200_000, "0.18"),
    band(3_200_000, 6_400_000, "0.21"),
    band(6_400_000, None, "0.25"),
)

# 2025 PAYE bands, applied after Consolidated Relief Allowance
BANDS_2025: tuple[TaxBand, ...] = (
    band(0, 300_000, "0.07"),
    band(300_000, 600_000, "0.11"),
    band(600_000, 1_100_000, "0.15"),
    band(1_100_000, 1_600_000, "0.19"),
    band(1_600_000, 3_200_000, "0.21"),
    band(3_200_000, None, "0.24"),
)

CURRENT_LAW = LawVersion.NTA_2026
PREVIOUS_LAW = LawVersion.PAYE_2025

_POLICIES: dict[LawVersion, TaxPolicy] = {}


def validate_bands(version: str, bands: tuple[TaxBand, ...]) -> None:
    """Check the table starts at zero, is contiguous and ends unbounded."""
    if not bands:
        raise InvalidBandTableError(version, "table is empty")
    if bands[0].lower_bound != 0:
        raise InvalidBandTableError(version, "first band must start at 0")
    for index, current in enumerate(bands):
        if not (Decimal("0") <= current.rate < Decimal("1")):
            raise InvalidBandTableError(version, f"band {index} rate {current.rate} outside [0, 1)")
        is_last = index == len(bands) - 1
        if current.upper_bound is None:
            if not is_last:
                raise InvalidBandTableError(version, f"band {index} is unbounded but not last")
            continue
        if is_last:
            raise InvalidBandTableError(version, "last band must be unbounded")
        if current.upper_bound <= current.lower_bound:
            raise InvalidBandTableError(version, f"band {index} upper bound must exceed lower bound")
        if bands[index + 1].lower_bound != current.upper_bound:
            raise InvalidBandTableError(version, f"gap or overlap between bands {index} and {index + 1}")


def register_policy(policy: TaxPolicy) -> TaxPolicy:
    validate_bands(policy.version.value, policy.bands)
    _POLICIES[policy.version] = policy
    logger.debug("Registered tax policy %s with %d bands", policy.version.value, len(policy.bands))
    return policy


def get_policy(version: LawVersion | str) -> TaxPolicy:
    try:
        key = LawVersion(version)
        return _POLICIES[key]
    except (ValueError, KeyError):
        raise UnknownLawVersionError(
            getattr(version, "value", str(version)),
            available=[v.value for v in _POLICIES],
        ) from None


def registered_versions() -> list[LawVersion]:
    return sorted(_POLICIES, key=lambda v: v.value)
