"""Tests for band tables and the law-version policy registry."""
from decimal import Decimal

import pytest

from taxnarrate.core.exceptions import InvalidBandTableError, UnknownLawVersionError
from taxnarrate.services.tax_engine import (
    BANDS_2025,
    BANDS_2026,
    CURRENT_LAW,
    PREVIOUS_LAW,
    Deductions,
    LawVersion,
    TaxPolicy,
    get_policy,
    registered_versions,
    validate_bands,
)
from taxnarrate.services.tax_engine.bands import band


def test_both_law_versions_registered():
    assert registered_versions() == [LawVersion.PAYE_2025, LawVersion.NTA_2026]
    assert CURRENT_LAW == LawVersion.NTA_2026
    assert PREVIOUS_LAW == LawVersion.PAYE_2025


@pytest.mark.parametrize("bands", [BANDS_2025, BANDS_2026])
def test_builtin_tables_are_contiguous_and_open_ended(bands):
    assert bands[0].lower_bound == 0
    for current, nxt in zip(bands, bands[1:]):
        assert current.upper_bound == nxt.lower_bound
        assert current.lower_bound < nxt.lower_bound
    assert bands[-1].upper_bound is None
    assert all(Decimal("0") <= b.rate < Decimal("1") for b in bands)


def test_2026_table_values():
    expected = [
        (Decimal("0"), Decimal("800000"), Decimal("0")),
        (Decimal("800000"), Decimal("1600000"), Decimal("0.15")),
        (Decimal("1600000"), Decimal("3200000"), Decimal("0.18")),
        (Decimal("3200000"), Decimal("6400000"), Decimal("0.21")),
        (Decimal("6400000"), None, Decimal("0.25")),
    ]
    assert [(b.lower_bound, b.upper_bound, b.rate) for b in BANDS_2026] == expected


def test_get_policy_accepts_plain_string():
    assert get_policy("2026").version == LawVersion.NTA_2026
    assert get_policy(LawVersion.PAYE_2025).bands == BANDS_2025


def test_get_policy_unknown_version():
    with pytest.raises(UnknownLawVersionError) as exc_info:
        get_policy("1999")
    err = exc_info.value
    assert err.code == "TAX300"
    assert err.status_code == 404
    assert err.details["available"] == ["2025", "2026"]


@pytest.mark.parametrize(
    "bands,reason",
    [
        ((), "empty"),
        ((band(100, None, "0.1"),), "start at 0"),
        ((band(0, 100, "0.1"), band(150, None, "0.2")), "gap or overlap"),
        ((band(0, 100, "0.1"), band(50, None, "0.2")), "gap or overlap"),
        ((band(0, 100, "0.1"), band(100, 200, "0.2")), "last band must be unbounded"),
        ((band(0, None, "0.1"), band(100, None, "0.2")), "unbounded but not last"),
        ((band(0, 100, "1.0"), band(100, None, "0.2")), "outside [0, 1)"),
        ((band(0, 0, "0.1"), band(0, None, "0.2")), "must exceed lower bound"),
    ],
)
def test_validate_bands_rejects_malformed_tables(bands, reason):
    with pytest.raises(InvalidBandTableError) as exc_info:
        validate_bands("test", bands)
    assert reason in exc_info.value.message
    assert exc_info.value.code == "TAX301"


def test_policy_is_immutable():
    policy = get_policy(CURRENT_LAW)
    with pytest.raises(AttributeError):
        policy.bands = ()  # type: ignore[misc]
    with pytest.raises(AttributeError):
        policy.bands[0].rate = Decimal("0.5")  # type: ignore[misc]


def test_deductions_total_sums_every_relief():
    d = Deductions(
        pension=Decimal("1"),
        housing_fund=Decimal("2"),
        rent_relief=Decimal("3"),
        consolidated_relief=Decimal("4"),
    )
    assert d.total == Decimal("10")


def test_tax_policy_holds_deduction_callable():
    policy = TaxPolicy(version=LawVersion.NTA_2026, bands=BANDS_2026, deductions=lambda g, r: Deductions())
    assert policy.deductions(Decimal("1"), Decimal("0")).total == 0
