"""Tax calculator request/response schemas."""
from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from taxnarrate.services.tax_engine import LawVersion


class PersonalTaxIn(BaseModel):
    annual_gross: Decimal = Field(..., ge=0, description="Annual gross income in Naira")
    annual_rent: Decimal = Field(Decimal("0"), ge=0, description="Annual rent paid in Naira")


class OldLawTaxIn(BaseModel):
    annual_gross: Decimal = Field(..., ge=0, description="Annual gross income in Naira")


class CorporateTaxIn(BaseModel):
    annual_turnover: Decimal = Field(..., ge=0, description="Annual gross turnover in Naira")


class InstallmentIn(BaseModel):
    annual_tax: Decimal = Field(..., ge=0, description="Annual tax liability in Naira")


class PenaltyIn(BaseModel):
    amount: Decimal = Field(..., ge=0, description="Overdue tax in Naira")
    days_overdue: int = Field(..., ge=0, description="Whole days past the due date")


class BandResultOut(BaseModel):
    label: str
    rate: Decimal
    taxable_amount_in_band: Decimal
    tax_amount_in_band: Decimal

    model_config = {"from_attributes": True}


class TaxBreakdownOut(BaseModel):
    law_version: LawVersion
    gross_income: Decimal
    pension_deduction: Decimal
    housing_fund_deduction: Decimal
    rent_relief: Decimal
    consolidated_relief: Decimal
    total_deductions: Decimal
    taxable_income: Decimal
    tax_due: Decimal
    effective_rate: Decimal
    bands: list[BandResultOut]

    model_config = {"from_attributes": True}


class OldLawTaxOut(BaseModel):
    law_version: LawVersion
    tax_due: Decimal


class TaxComparisonOut(BaseModel):
    tax_under_old_law: Decimal
    tax_under_new_law: Decimal
    savings: Decimal
    savings_percent: Decimal

    model_config = {"from_attributes": True}


class CorporateTaxOut(BaseModel):
    is_exempt: bool
    tax_rate: Decimal
    tax_due: Decimal

    model_config = {"from_attributes": True}


class PaymentPlanOut(BaseModel):
    plan: str
    label: str
    amount: Decimal
    payments_per_year: int

    model_config = {"from_attributes": True}


class InstallmentOut(BaseModel):
    annual_tax: Decimal
    monthly: Decimal
    quarterly: Decimal
    plans: list[PaymentPlanOut]


class PenaltyOut(BaseModel):
    daily_penalty_rate: Decimal
    total_penalty: Decimal
    total_amount_due: Decimal

    model_config = {"from_attributes": True}


class TaxBandOut(BaseModel):
    lower_bound: Decimal
    upper_bound: Decimal | None
    rate: Decimal

    model_config = {"from_attributes": True}


class BandTableOut(BaseModel):
    law_version: LawVersion
    description: str
    bands: list[TaxBandOut]
