# payrollhub/modules/payroll/schemas/payroll_schemas.py

"""
Pydantic schemas for payroll module API endpoints.

Provides request/response models for:
- Salary component breakdowns
- Payroll runs and period records
- Payslips and department reports
- Tax calculations
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SalaryComponents(BaseModel):
    """Monthly salary breakdown derived from a basic salary"""

    basic: Decimal
    hra: Decimal
    bonus: Decimal
    gross: Decimal
    tax: Decimal
    net: Decimal

    model_config = ConfigDict(frozen=True)


# Payroll Run Schemas


class PayrollRunRequest(BaseModel):
    """Request to compute payroll for one employee and period"""

    employee_id: int
    month: int = Field(..., description="Salary month, 1-12")
    year: int = Field(..., description="Salary year")


class PayrollPeriodRequest(BaseModel):
    """Request to compute payroll for every employee in a period"""

    month: int = Field(..., description="Salary month, 1-12")
    year: int = Field(..., description="Salary year")


class SalaryPeriodRecordOut(BaseModel):
    """Stored payroll line for one employee and period"""

    id: int
    employee_id: int
    salary_month: int
    salary_year: int
    basic_salary: Decimal
    hra: Decimal
    bonus: Decimal
    tax: Decimal
    gross_salary: Decimal
    net_salary: Decimal
    pay_date: datetime

    model_config = ConfigDict(from_attributes=True)


class PayrollRunFailure(BaseModel):
    employee_id: int
    code: str
    message: str


class PayrollBatchResult(BaseModel):
    """Outcome of a payroll run over all employees"""

    month: int = Field(..., ge=1, le=12)
    year: int
    processed: List[SalaryPeriodRecordOut] = Field(default_factory=list)
    failed: List[PayrollRunFailure] = Field(default_factory=list)

    @property
    def success_count(self) -> int:
        return len(self.processed)


# Reporting Schemas


class Payslip(BaseModel):
    """Period record joined with employee and department names"""

    employee_id: int
    employee_name: str
    department_name: str
    designation: Optional[str] = None
    month: int = Field(..., ge=1, le=12)
    year: int
    basic_salary: Decimal
    hra: Decimal
    bonus: Decimal
    gross_salary: Decimal
    tax: Decimal
    net_salary: Decimal


class DepartmentReportRow(BaseModel):
    employee_id: int
    employee_name: str
    designation: Optional[str] = None
    basic_salary: Decimal
    hra: Decimal
    bonus: Decimal
    tax: Decimal
    gross_salary: Decimal
    net_salary: Decimal


class DepartmentReport(BaseModel):
    """Department salary listing for one period, highest net first"""

    department_id: int
    department_name: str
    month: int = Field(..., ge=1, le=12)
    year: int
    rows: List[DepartmentReportRow] = Field(default_factory=list)
    employee_count: int = 0
    total_net_salary: Decimal = Decimal("0.00")
    average_net_salary: Optional[Decimal] = None


# Tax Calculation Schemas


class TaxCalculationResponse(BaseModel):
    monthly_gross: Decimal
    annual_income: Decimal
    annual_tax: Decimal
    monthly_tax: Decimal


class TaxBracketOut(BaseModel):
    lower_limit: Decimal
    upper_limit: Optional[Decimal] = None
    base_tax: Decimal
    rate: Decimal

    model_config = ConfigDict(from_attributes=True)
