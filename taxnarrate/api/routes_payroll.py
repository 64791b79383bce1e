from typing import Annotated, TypeAlias

from fastapi import APIRouter, Depends

from taxnarrate.models import schemas
from taxnarrate.services.payroll_service import Employee, PayrollService, get_payroll_service

router = APIRouter()

PayrollServiceDep: TypeAlias = Annotated[PayrollService, Depends(get_payroll_service)]


@router.post("/employees/recalculate", response_model=schemas.EmployeeTaxOut)
def recalculate_employee(payload: schemas.RecalculateIn, svc: PayrollServiceDep):
    """Monthly and annual PAYE for one salary, as shown on the employee form."""
    result = svc.recalculate_employee(payload.monthly_salary, payload.annual_rent)
    return schemas.EmployeeTaxOut.model_validate(result)


@router.post("/summary", response_model=schemas.PayrollSummaryOut)
def payroll_summary(payload: schemas.PayrollSummaryIn, svc: PayrollServiceDep):
    employees = [Employee(**item.model_dump()) for item in payload.employees]
    summary = svc.aggregate(employees)
    return schemas.PayrollSummaryOut.model_validate(summary)
