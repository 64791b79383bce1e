"""Payroll request/response schemas."""
from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from taxnarrate.services.payroll_service import Department, EmployeeStatus
from taxnarrate.services.tax_engine import LawVersion

from .tax import TaxBreakdownOut


class RecalculateIn(BaseModel):
    monthly_salary: Decimal = Field(..., ge=0, description="Monthly gross salary in Naira")
    annual_rent: Decimal = Field(Decimal("0"), ge=0, description="Annual rent paid in Naira")


class EmployeeTaxOut(BaseModel):
    monthly_tax: Decimal
    annual_tax: Decimal

    model_config = {"from_attributes": True}


class EmployeeIn(BaseModel):
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=120)
    monthly_salary: Decimal = Field(..., ge=0)
    annual_rent: Decimal = Field(Decimal("0"), ge=0)
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    department: str | None = Field(None, description="Unknown departments are filed under Other")
    nin: str | None = Field(None, pattern=r"^\d{11}$", description="11-digit National Identification Number")


class EmployeeOut(BaseModel):
    id: str
    name: str
    monthly_salary: Decimal
    annual_rent: Decimal
    monthly_tax: Decimal
    annual_tax: Decimal
    status: EmployeeStatus
    department: Department
    nin: str | None

    model_config = {"from_attributes": True}


class PayrollSummaryIn(BaseModel):
    employees: list[EmployeeIn]


class PayrollTotalsOut(BaseModel):
    monthly_salary: Decimal
    monthly_tax: Decimal
    annual_tax: Decimal
    active_count: int
    average_monthly_salary: Decimal

    model_config = {"from_attributes": True}


class DepartmentSummaryOut(BaseModel):
    department: Department
    employee_count: int
    total_monthly_salary: Decimal
    total_monthly_tax: Decimal
    total_monthly_cost: Decimal
    average_salary: Decimal

    model_config = {"from_attributes": True}


class SalaryTierSummaryOut(BaseModel):
    name: str
    min_salary: Decimal
    max_salary: Decimal | None
    employee_count: int
    total_monthly_cost: Decimal

    model_config = {"from_attributes": True}


class PayrollSummaryOut(BaseModel):
    law_version: LawVersion
    employees: list[EmployeeOut]
    per_employee: dict[str, TaxBreakdownOut]
    totals: PayrollTotalsOut
    departments: list[DepartmentSummaryOut]
    salary_tiers: list[SalaryTierSummaryOut]

    model_config = {"from_attributes": True}
