# payrollhub/modules/payroll/routes/payroll_run_routes.py

"""
Payroll run endpoints.

Running payroll for a period that already has a record recomputes it in
place from the employee's current basic salary.
"""

from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from payrollhub.core.auth import Actor, get_current_actor
from payrollhub.core.database import get_db
from ..schemas.payroll_schemas import (
    PayrollBatchResult,
    PayrollPeriodRequest,
    PayrollRunRequest,
    SalaryPeriodRecordOut,
)
from ..services.payroll_ledger import PayrollLedger

router = APIRouter()


@router.post("/runs", response_model=SalaryPeriodRecordOut)
async def run_payroll(
    request: PayrollRunRequest,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_current_actor),
):
    """
    Compute and store one employee's salary record for a period.

    ## Request Body
    - **employee_id**: Employee to pay
    - **month**: Salary month, 1-12
    - **year**: Salary year

    ## Error Responses
    - **404**: Employee not found
    - **409**: Period record could not be written
    - **422**: Month or year out of range
    """
    record = PayrollLedger(db).run_payroll(
        request.employee_id, request.month, request.year, actor=actor.username
    )
    return SalaryPeriodRecordOut.model_validate(record)


@router.post("/runs/batch", response_model=PayrollBatchResult)
async def run_payroll_for_period(
    request: PayrollPeriodRequest,
    db: Session = Depends(get_db),
):
    """
    Run payroll for every employee in a period.

    Per-employee failures are reported in ``failed`` and do not abort the
    batch.
    """
    return PayrollLedger(db).run_payroll_for_period(request.month, request.year)


@router.get("/records", response_model=List[SalaryPeriodRecordOut])
async def list_period_records(
    month: int = Query(..., ge=1, le=12),
    year: int = Query(..., gt=0),
    db: Session = Depends(get_db),
):
    return PayrollLedger(db).list_by_period(month, year)


@router.get("/employees/{employee_id}/records", response_model=List[SalaryPeriodRecordOut])
async def list_employee_records(employee_id: int, db: Session = Depends(get_db)):
    """Salary records for one employee, most recent period first."""
    return PayrollLedger(db).list_by_employee(employee_id)
