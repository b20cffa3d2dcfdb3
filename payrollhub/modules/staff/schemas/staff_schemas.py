from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..enums.staff_enums import SalaryChangeType


class DepartmentBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)
    location: Optional[str] = Field(None, max_length=100)
    manager_id: Optional[int] = None


class DepartmentCreate(DepartmentBase):
    pass


class DepartmentOut(DepartmentBase):
    id: int
    model_config = ConfigDict(from_attributes=True)


class EmployeeBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: Optional[str] = Field(None, max_length=100)
    phone: Optional[str] = Field(None, max_length=15)
    hire_date: date
    department_id: int
    designation: Optional[str] = Field(None, max_length=50)
    # Positivity is checked by EmployeeService so API and direct callers
    # receive the same ValidationFailure
    basic_salary: Decimal = Field(..., max_digits=10, decimal_places=2)


class EmployeeCreate(EmployeeBase):
    pass


class EmployeeUpdate(BaseModel):
    """Partial update; omitted fields keep their current value."""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[str] = Field(None, max_length=100)
    phone: Optional[str] = Field(None, max_length=15)
    hire_date: Optional[date] = None
    department_id: Optional[int] = None
    designation: Optional[str] = Field(None, max_length=50)
    basic_salary: Optional[Decimal] = Field(None, max_digits=10, decimal_places=2)


class EmployeeOut(EmployeeBase):
    id: int
    model_config = ConfigDict(from_attributes=True)


class SalaryAuditEntryOut(BaseModel):
    id: int
    employee_id: int
    old_salary: Optional[Decimal] = None
    new_salary: Decimal
    changed_by: str
    change_date: datetime
    change_type: SalaryChangeType
    model_config = ConfigDict(from_attributes=True)


class SalaryAuditListResponse(BaseModel):
    entries: List[SalaryAuditEntryOut]
    limit: int
