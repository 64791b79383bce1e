from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from decimal import Decimal
from enum import Enum
from typing import Iterable

from taxnarrate.services.tax_engine import (
    CURRENT_LAW,
    LawVersion,
    Money,
    TaxBreakdown,
    ZERO,
    evaluate_with_policy,
    get_policy,
    to_money,
)
from taxnarrate.services.tax_engine.money import MONTHS_PER_YEAR, AmountLike

logger = logging.getLogger(__name__)


class EmployeeStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class Department(str, Enum):
    ENGINEERING = "Engineering"
    SALES = "Sales"
    MARKETING = "Marketing"
    FINANCE = "Finance"
    HUMAN_RESOURCES = "Human Resources"
    OPERATIONS = "Operations"
    CUSTOMER_SUPPORT = "Customer Support"
    LEGAL = "Legal"
    EXECUTIVE = "Executive"
    OTHER = "Other"

    @classmethod
    def parse(cls, value: str | Department | None) -> Department:
        """Map free text onto a department; unknown names become Other."""
        if isinstance(value, Department):
            return value
        try:
            return cls((value or "").strip())
        except ValueError:
            return cls.OTHER


@dataclass
class Employee:
    """Roster entry owned by the business dashboard.

    ``monthly_tax`` and ``annual_tax`` are derived; the payroll service
    hands back refreshed copies instead of editing these in place.
    """

    id: str
    name: str
    monthly_salary: Money
    annual_rent: Money = ZERO
    monthly_tax: Money = ZERO
    annual_tax: Money = ZERO
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    department: Department = Department.OTHER
    nin: str | None = None

    def __post_init__(self) -> None:
        self.monthly_salary = to_money(self.monthly_salary)
        self.annual_rent = to_money(self.annual_rent)
        self.monthly_tax = to_money(self.monthly_tax)
        self.annual_tax = to_money(self.annual_tax)
        self.status = EmployeeStatus(self.status)
        self.department = Department.parse(self.department)

    @property
    def is_active(self) -> bool:
        return self.status == EmployeeStatus.ACTIVE

    @property
    def annual_gross(self) -> Money:
        return Money(self.monthly_salary * MONTHS_PER_YEAR)


@dataclass(frozen=True)
class EmployeeTax:
    monthly_tax: Money
    annual_tax: Money


@dataclass(frozen=True)
class PayrollTotals:
    monthly_salary: Money = ZERO
    monthly_tax: Money = ZERO
    annual_tax: Money = ZERO
    active_count: int = 0

    @property
    def average_monthly_salary(self) -> Money:
        if self.active_count == 0:
            return ZERO
        return Money(self.monthly_salary / self.active_count)


@dataclass(frozen=True)
class DepartmentSummary:
    department: Department
    employee_count: int
    total_monthly_salary: Money
    total_monthly_tax: Money

    @property
    def total_monthly_cost(self) -> Money:
        return Money(self.total_monthly_salary + self.total_monthly_tax)

    @property
    def average_salary(self) -> Money:
        return Money(self.total_monthly_salary / self.employee_count)


@dataclass(frozen=True)
class SalaryTierSummary:
    name: str
    min_salary: Money
    max_salary: Money | None
    employee_count: int
    total_monthly_cost: Money


# (name, lower bound inclusive, upper bound exclusive) on monthly salary
SALARY_TIERS: tuple[tuple[str, Decimal, Decimal | None], ...] = (
    ("< ₦200k", Decimal("0"), Decimal("200000")),
    ("₦200k-500k", Decimal("200000"), Decimal("500000")),
    ("₦500k-1M", Decimal("500000"), Decimal("1000000")),
    ("> ₦1M", Decimal("1000000"), None),
)


@dataclass(frozen=True)
class PayrollSummary:
    law_version: LawVersion
    per_employee: dict[str, TaxBreakdown]
    employees: list[Employee]
    totals: PayrollTotals
    departments: list[DepartmentSummary] = field(default_factory=list)
    salary_tiers: list[SalaryTierSummary] = field(default_factory=list)


class PayrollService:
    """Runs PAYE for each employee on a roster and sums the active ones."""

    def __init__(self, law_version: LawVersion | str = CURRENT_LAW):
        self.policy = get_policy(law_version)

    def breakdown_for(self, monthly_salary: AmountLike, annual_rent: AmountLike = 0) -> TaxBreakdown:
        annual_gross = Money(to_money(monthly_salary) * MONTHS_PER_YEAR)
        return evaluate_with_policy(annual_gross, to_money(annual_rent), self.policy)

    def recalculate_employee(self, monthly_salary: AmountLike, annual_rent: AmountLike = 0) -> EmployeeTax:
        annual_tax = self.breakdown_for(monthly_salary, annual_rent).tax_due
        return EmployeeTax(monthly_tax=Money(annual_tax / MONTHS_PER_YEAR), annual_tax=annual_tax)

    def aggregate(self, employees: Iterable[Employee]) -> PayrollSummary:
        per_employee: dict[str, TaxBreakdown] = {}
        updated: list[Employee] = []
        monthly_salary = monthly_tax = annual_tax = ZERO
        active_count = 0

        for employee in employees:
            breakdown = self.breakdown_for(employee.monthly_salary, employee.annual_rent)
            refreshed = replace(
                employee,
                annual_tax=breakdown.tax_due,
                monthly_tax=Money(breakdown.tax_due / MONTHS_PER_YEAR),
            )
            if employee.id in per_employee:
                logger.warning("Duplicate employee id %s on roster; last entry wins", employee.id)
            per_employee[employee.id] = breakdown
            updated.append(refreshed)

            if not refreshed.is_active:
                continue
            active_count += 1
            monthly_salary = Money(monthly_salary + refreshed.monthly_salary)
            monthly_tax = Money(monthly_tax + refreshed.monthly_tax)
            annual_tax = Money(annual_tax + refreshed.annual_tax)

        totals = PayrollTotals(
            monthly_salary=monthly_salary,
            monthly_tax=monthly_tax,
            annual_tax=annual_tax,
            active_count=active_count,
        )
        logger.info(
            "Payroll aggregated: %d employees (%d active), monthly tax %s, annual tax %s",
            len(updated),
            active_count,
            monthly_tax,
            annual_tax,
            extra={
                "law_version": self.policy.version.value,
                "employee_count": len(updated),
                "active_count": active_count,
            },
        )
        return PayrollSummary(
            law_version=self.policy.version,
            per_employee=per_employee,
            employees=updated,
            totals=totals,
            departments=summarize_departments(updated),
            salary_tiers=summarize_salary_tiers(updated),
        )


def summarize_departments(employees: Iterable[Employee]) -> list[DepartmentSummary]:
    """Per-department salary and tax over active employees, costliest first."""
    grouped: dict[Department, list[Employee]] = {}
    for employee in employees:
        if employee.is_active:
            grouped.setdefault(employee.department, []).append(employee)

    summaries = [
        DepartmentSummary(
            department=department,
            employee_count=len(members),
            total_monthly_salary=Money(sum((m.monthly_salary for m in members), Decimal("0"))),
            total_monthly_tax=Money(sum((m.monthly_tax for m in members), Decimal("0"))),
        )
        for department, members in grouped.items()
    ]
    summaries.sort(key=lambda s: (-s.total_monthly_cost, s.department.value))
    return summaries


def summarize_salary_tiers(employees: Iterable[Employee]) -> list[SalaryTierSummary]:
    """Head count and monthly cost (salary plus PAYE) per salary band.

    Only active employees are counted and empty tiers are left out.
    """
    counts = [0] * len(SALARY_TIERS)
    costs = [ZERO] * len(SALARY_TIERS)
    for employee in employees:
        if not employee.is_active:
            continue
        for index, (_, lower, upper) in enumerate(SALARY_TIERS):
            if employee.monthly_salary >= lower and (upper is None or employee.monthly_salary < upper):
                counts[index] += 1
                costs[index] = Money(costs[index] + employee.monthly_salary + employee.monthly_tax)
                break

    return [
        SalaryTierSummary(
            name=name,
            min_salary=Money(lower),
            max_salary=Money(upper) if upper is not None else None,
            employee_count=counts[index],
            total_monthly_cost=costs[index],
        )
        for index, (name, lower, upper) in enumerate(SALARY_TIERS)
        if counts[index] > 0
    ]

def aggregate_payroll(employees: Iterable[Employee]) -> PayrollSummary:
    return PayrollService().aggregate(employees)


def recalculate_employee(monthly_salary: AmountLike, annual_rent: AmountLike = 0) -> EmployeeTax:
    return PayrollService().recalculate_employee(monthly_salary, annual_rent)


def get_payroll_service() -> PayrollService:
    return PayrollService()
