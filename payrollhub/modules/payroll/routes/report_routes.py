# payrollhub/modules/payroll/routes/report_routes.py

from enum import Enum

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from payrollhub.core.database import get_db
from ..schemas.payroll_schemas import DepartmentReport, Payslip
from ..services.report_formatter import ReportFormatter
from ..services.report_service import ReportService

router = APIRouter()


class ReportFormat(str, Enum):
    JSON = "json"
    TEXT = "text"


@router.get("/payslips/{employee_id}/{year}/{month}", response_model=Payslip)
async def get_payslip(
    employee_id: int,
    year: int,
    month: int,
    format: ReportFormat = Query(ReportFormat.JSON),
    db: Session = Depends(get_db),
):
    """
    Payslip for one employee and period.

    ## Query Parameters
    - **format**: ``json`` (default) or ``text`` for the printable layout

    ## Error Responses
    - **404**: No salary record for the employee and period
    """
    payslip = ReportService(db).get_payslip(employee_id, month, year)
    if format == ReportFormat.TEXT:
        return PlainTextResponse(ReportFormatter().render_payslip(payslip))
    return payslip


@router.get("/reports/departments/{department_id}", response_model=DepartmentReport)
async def get_department_report(
    department_id: int,
    month: int = Query(..., ge=1, le=12),
    year: int = Query(..., gt=0),
    format: ReportFormat = Query(ReportFormat.JSON),
    db: Session = Depends(get_db),
):
    """
    Department salary report for a period, highest net salary first.

    ## Error Responses
    - **404**: Department not found
    """
    report = ReportService(db).get_department_report(department_id, month, year)
    if format == ReportFormat.TEXT:
        return PlainTextResponse(ReportFormatter().render_department_report(report))
    return report
