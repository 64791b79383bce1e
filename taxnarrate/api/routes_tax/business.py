"""
Business Tax Routes.

Company Income Tax, installment plans and late-payment penalties.
"""
from __future__ import annotations

from fastapi import APIRouter

from taxnarrate.models.schemas import (
    CorporateTaxIn,
    CorporateTaxOut,
    InstallmentIn,
    InstallmentOut,
    PaymentPlanOut,
    PenaltyIn,
    PenaltyOut,
)
from taxnarrate.services.tax_engine import (
    compute_penalty,
    evaluate_corporate_tax,
    monthly_installment,
    payment_plans,
    quarterly_installment,
)

router = APIRouter()


@router.post("/corporate", response_model=CorporateTaxOut)
def corporate_tax(payload: CorporateTaxIn):
    """CIT on turnover; ₦100M and below is exempt."""
    return CorporateTaxOut.model_validate(evaluate_corporate_tax(payload.annual_turnover))


@router.post("/installments", response_model=InstallmentOut)
def installments(payload: InstallmentIn):
    return InstallmentOut(
        annual_tax=payload.annual_tax,
        monthly=monthly_installment(payload.annual_tax),
        quarterly=quarterly_installment(payload.annual_tax),
        plans=[PaymentPlanOut.model_validate(plan) for plan in payment_plans(payload.annual_tax)],
    )


@router.post("/penalty", response_model=PenaltyOut)
def penalty(payload: PenaltyIn):
    return PenaltyOut.model_validate(compute_penalty(payload.amount, payload.days_overdue))
