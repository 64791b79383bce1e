"""Tests for the payroll aggregator."""
import logging
from decimal import Decimal

from taxnarrate.services.payroll_service import (
    Department,
    Employee,
    EmployeeStatus,
    PayrollService,
    aggregate_payroll,
    recalculate_employee,
    summarize_departments,
    summarize_salary_tiers,
)
from taxnarrate.services.tax_engine import LawVersion, evaluate_new_law_tax


def _roster() -> list[Employee]:
    return [
        Employee(id="E1", name="Ada", monthly_salary=Decimal("500000"), annual_rent=Decimal("1200000"),
                 department="Engineering"),
        Employee(id="E2", name="Bola", monthly_salary=Decimal("250000"), department="Sales"),
        Employee(id="E3", name="Chidi", monthly_salary=Decimal("300000"), department="Engineering",
                 status=EmployeeStatus.INACTIVE),
        Employee(id="E4", name="Dayo", monthly_salary=Decimal("50000"), department="Catering"),
    ]


def test_recalculate_employee_matches_annualised_breakdown():
    result = recalculate_employee(Decimal("500000"), Decimal("1200000"))
    expected = evaluate_new_law_tax(Decimal("6000000"), Decimal("1200000")).tax_due
    assert result.annual_tax == expected
    assert result.monthly_tax == expected / 12


def test_recalculate_employee_zero_salary():
    result = recalculate_employee(0)
    assert result.annual_tax == 0
    assert result.monthly_tax == 0


def test_aggregate_totals_cover_active_employees_only():
    summary = aggregate_payroll(_roster())
    by_id = {e.id: e for e in summary.employees}

    active = [by_id["E1"], by_id["E2"], by_id["E4"]]
    assert summary.totals.active_count == 3
    assert summary.totals.monthly_salary == Decimal("800000")
    assert summary.totals.annual_tax == sum(e.annual_tax for e in active)
    assert summary.totals.monthly_tax == sum(e.monthly_tax for e in active)
    assert summary.totals.average_monthly_salary == Decimal("800000") / 3


def test_inactive_employee_still_listed_with_tax():
    summary = aggregate_payroll(_roster())
    assert set(summary.per_employee) == {"E1", "E2", "E3", "E4"}
    inactive = next(e for e in summary.employees if e.id == "E3")
    assert inactive.annual_tax == summary.per_employee["E3"].tax_due > 0


def test_employee_taxes_refreshed_without_mutating_input():
    roster = _roster()
    summary = aggregate_payroll(roster)
    assert all(e.annual_tax == 0 for e in roster)
    refreshed = summary.employees[0]
    assert refreshed.annual_tax == summary.per_employee["E1"].tax_due
    assert refreshed.monthly_tax == refreshed.annual_tax / 12


def test_low_salary_employee_pays_nothing():
    summary = aggregate_payroll(_roster())
    # ₦600k a year sits inside the tax-free band
    assert summary.per_employee["E4"].tax_due == 0


def test_unknown_department_filed_under_other():
    summary = aggregate_payroll(_roster())
    assert next(e for e in summary.employees if e.id == "E4").department == Department.OTHER


def test_department_breakdown_sorted_by_cost():
    summary = aggregate_payroll(_roster())
    names = [d.department for d in summary.departments]
    assert names == [Department.ENGINEERING, Department.SALES, Department.OTHER]
    engineering = summary.departments[0]
    # Inactive Chidi is left out
    assert engineering.employee_count == 1
    assert engineering.total_monthly_salary == Decimal("500000")
    assert engineering.total_monthly_cost == engineering.total_monthly_salary + engineering.total_monthly_tax
    assert engineering.average_salary == Decimal("500000")


def test_department_ties_break_by_name():
    roster = [
        Employee(id="1", name="A", monthly_salary=50_000, department="Sales"),
        Employee(id="2", name="B", monthly_salary=50_000, department="Legal"),
    ]
    assert [d.department for d in summarize_departments(roster)] == [Department.LEGAL, Department.SALES]


def test_empty_roster():
    summary = aggregate_payroll([])
    assert summary.totals.active_count == 0
    assert summary.totals.monthly_salary == 0
    assert summary.totals.average_monthly_salary == 0
    assert summary.departments == []
    assert summary.per_employee == {}


def test_service_can_run_previous_law():
    service = PayrollService(LawVersion.PAYE_2025)
    summary = service.aggregate(_roster())
    assert summary.law_version == LawVersion.PAYE_2025
    assert summary.per_employee["E1"].consolidated_relief > 0


def test_employee_coerces_plain_numbers():
    e = Employee(id="x", name="X", monthly_salary=100000.5, status="inactive")
    assert e.monthly_salary == Decimal("100000.5")
    assert e.annual_gross == Decimal("1200006.0")
    assert e.is_active is False


def test_salary_tiers_for_roster():
    summary = aggregate_payroll(_roster())
    tiers = {t.name: t for t in summary.salary_tiers}
    assert list(tiers) == ["< ₦200k", "₦200k-500k", "₦500k-1M"]
    assert tiers["< ₦200k"].employee_count == 1
    # E3 is inactive and must not land in this tier
    assert tiers["₦200k-500k"].employee_count == 1
    bola = next(e for e in summary.employees if e.id == "E2")
    assert tiers["₦200k-500k"].total_monthly_cost == bola.monthly_salary + bola.monthly_tax
    assert tiers["₦500k-1M"].max_salary == Decimal("1000000")


def test_salary_tier_lower_bounds_are_inclusive():
    employees = [
        Employee(id="a", name="A", monthly_salary=Decimal("200000")),
        Employee(id="b", name="B", monthly_salary=Decimal("1000000")),
        Employee(id="c", name="C", monthly_salary=Decimal("199999.99")),
    ]
    tiers = {t.name: t.employee_count for t in summarize_salary_tiers(employees)}
    assert tiers == {"< ₦200k": 1, "₦200k-500k": 1, "> ₦1M": 1}
    top = summarize_salary_tiers(employees)[-1]
    assert top.max_salary is None


def test_salary_tiers_empty_when_no_active_employees():
    employees = [Employee(id="x", name="X", monthly_salary=Decimal("300000"), status="inactive")]
    assert summarize_salary_tiers(employees) == []
    assert aggregate_payroll([]).salary_tiers == []


def test_aggregate_logs_law_version_and_counts(caplog):
    with caplog.at_level(logging.INFO, logger="taxnarrate.services.payroll_service"):
        aggregate_payroll(_roster())
    record = next(r for r in caplog.records if r.getMessage().startswith("Payroll aggregated"))
    assert record.law_version == "2026"
    assert record.employee_count == 4
    assert record.active_count == 3
