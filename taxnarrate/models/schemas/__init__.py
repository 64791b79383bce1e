"""Pydantic schemas for API requests and responses.

Sub-modules:
- tax: personal, corporate, installment and penalty calculator schemas
- payroll: employee roster and payroll summary schemas
"""
from .tax import (
    BandResultOut,
    BandTableOut,
    CorporateTaxIn,
    CorporateTaxOut,
    InstallmentIn,
    InstallmentOut,
    OldLawTaxIn,
    OldLawTaxOut,
    PaymentPlanOut,
    PenaltyIn,
    PenaltyOut,
    PersonalTaxIn,
    TaxBandOut,
    TaxBreakdownOut,
    TaxComparisonOut,
)
from .payroll import (
    DepartmentSummaryOut,
    EmployeeIn,
    EmployeeOut,
    EmployeeTaxOut,
    PayrollSummaryIn,
    PayrollSummaryOut,
    PayrollTotalsOut,
    RecalculateIn,
    SalaryTierSummaryOut,
)

__all__ = [
    # Tax
    "PersonalTaxIn",
    "OldLawTaxIn",
    "CorporateTaxIn",
    "InstallmentIn",
    "PenaltyIn",
    "BandResultOut",
    "TaxBreakdownOut",
    "OldLawTaxOut",
    "TaxComparisonOut",
    "CorporateTaxOut",
    "PaymentPlanOut",
    "InstallmentOut",
    "PenaltyOut",
    "TaxBandOut",
    "BandTableOut",
    # Payroll
    "RecalculateIn",
    "EmployeeTaxOut",
    "EmployeeIn",
    "EmployeeOut",
    "PayrollSummaryIn",
    "PayrollTotalsOut",
    "DepartmentSummaryOut",
    "SalaryTierSummaryOut",
    "PayrollSummaryOut",
]
