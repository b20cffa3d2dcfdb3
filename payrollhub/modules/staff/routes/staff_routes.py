# payrollhub/modules/staff/routes/staff_routes.py

"""
Employee, department and salary-audit endpoints.

Writes take the acting principal from the X-Actor header so that salary
audit entries record who made the change.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from payrollhub.core.auth import Actor, get_current_actor
from payrollhub.core.config import settings
from payrollhub.core.database import get_db
from ..schemas.staff_schemas import (
    DepartmentCreate,
    DepartmentOut,
    EmployeeCreate,
    EmployeeOut,
    EmployeeUpdate,
    SalaryAuditEntryOut,
    SalaryAuditListResponse,
)
from ..services.department_service import DepartmentService
from ..services.employee_service import EmployeeService
from ..services.salary_audit_recorder import SalaryAuditRecorder

router = APIRouter(prefix="/api/staff", tags=["Staff"])


@router.post(
    "/departments", response_model=DepartmentOut, status_code=status.HTTP_201_CREATED
)
async def add_department(data: DepartmentCreate, db: Session = Depends(get_db)):
    return DepartmentService(db).create(data)


@router.get("/departments", response_model=List[DepartmentOut])
async def list_departments(db: Session = Depends(get_db)):
    return DepartmentService(db).list()


@router.get("/departments/{department_id}", response_model=DepartmentOut)
async def get_department(department_id: int, db: Session = Depends(get_db)):
    return DepartmentService(db).require(department_id)


@router.post(
    "/employees", response_model=EmployeeOut, status_code=status.HTTP_201_CREATED
)
async def add_employee(
    data: EmployeeCreate,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_current_actor),
):
    """
    Add an employee.

    The initial basic salary is recorded in the salary audit trail as a
    CREATE entry.

    ## Error Responses
    - **422**: Non-positive salary, unknown department or duplicate email
    """
    return EmployeeService(db).create(data, actor.username)


@router.get("/employees", response_model=List[EmployeeOut])
async def list_employees(
    department_id: Optional[int] = Query(None, description="Filter by department"),
    db: Session = Depends(get_db),
):
    return EmployeeService(db).list(department_id=department_id)


@router.get("/employees/{employee_id}", response_model=EmployeeOut)
async def get_employee(employee_id: int, db: Session = Depends(get_db)):
    return EmployeeService(db).require(employee_id)


@router.patch("/employees/{employee_id}", response_model=EmployeeOut)
async def update_employee(
    employee_id: int,
    data: EmployeeUpdate,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_current_actor),
):
    """
    Update an employee.

    A change to the basic salary is recorded as an UPDATE audit entry;
    writing the same salary again records nothing.

    ## Error Responses
    - **404**: Employee not found
    - **422**: Invalid field values
    """
    return EmployeeService(db).update(employee_id, data, actor.username)


@router.get("/salary-audit", response_model=SalaryAuditListResponse)
async def list_salary_audit(
    limit: int = Query(
        settings.audit_default_limit, ge=1, le=settings.audit_max_limit
    ),
    employee_id: Optional[int] = Query(None),
    db: Session = Depends(get_db),
):
    """Salary audit entries, newest first."""
    entries = SalaryAuditRecorder(db).list_entries(limit=limit, employee_id=employee_id)
    return SalaryAuditListResponse(
        entries=[SalaryAuditEntryOut.model_validate(e) for e in entries],
        limit=limit,
    )
