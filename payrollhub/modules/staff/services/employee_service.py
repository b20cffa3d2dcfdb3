# payrollhub/modules/staff/services/employee_service.py

"""
Employee store.

This is the only write path for employee rows. Every create, and every
update that changes the basic salary, writes its salary audit entry in
the same transaction as the employee row.
"""

import logging
from decimal import Decimal
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from payrollhub.core.error_schemas import PayrollErrorCodes
from payrollhub.core.exceptions import (
    ConstraintViolation,
    NotFoundError,
    UnexpectedStoreError,
    ValidationFailure,
)
from payrollhub.core.money import to_money
from ..models.staff_models import Department, Employee
from ..schemas.staff_schemas import EmployeeCreate, EmployeeUpdate
from .salary_audit_recorder import SalaryAuditRecorder

logger = logging.getLogger(__name__)

# Columns that may not be cleared by an update
_REQUIRED_FIELDS = ("name", "hire_date", "department_id", "basic_salary")


class EmployeeService:
    def __init__(self, db: Session, audit_recorder: Optional[SalaryAuditRecorder] = None):
        self.db = db
        self.audit_recorder = audit_recorder or SalaryAuditRecorder(db)

    def get(self, employee_id: int) -> Optional[Employee]:
        return self.db.get(Employee, employee_id)

    def require(self, employee_id: int) -> Employee:
        employee = self.get(employee_id)
        if employee is None:
            raise NotFoundError(
                "Employee", employee_id, code=PayrollErrorCodes.EMPLOYEE_NOT_FOUND
            )
        return employee

    def list(self, department_id: Optional[int] = None) -> List[Employee]:
        query = self.db.query(Employee)
        if department_id is not None:
            query = query.filter(Employee.department_id == department_id)
        return query.order_by(Employee.id).all()

    def create(self, data: EmployeeCreate, actor: str) -> Employee:
        """
        Add an employee and audit the initial basic salary.

        Raises:
            ValidationFailure: non-positive salary, unknown department or
                an email already in use; nothing is written
            ConstraintViolation: a concurrent writer took the email first
            UnexpectedStoreError: store failure; employee and audit rolled back
        """
        basic_salary = self._validate_salary(data.basic_salary)
        self._validate_department(data.department_id)
        self._validate_email_available(data.email)

        employee = Employee(
            name=data.name,
            email=data.email,
            phone=data.phone,
            hire_date=data.hire_date,
            department_id=data.department_id,
            designation=data.designation,
            basic_salary=basic_salary,
        )

        try:
            self.db.add(employee)
            self.db.flush()
            self.audit_recorder.record_creation(employee, actor)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Employee insert rejected by constraint: {e.orig}")
            raise ConstraintViolation(
                f"Employee violates a uniqueness constraint: {e.orig}",
                constraint="email",
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to add employee {data.name!r}: {e}", exc_info=True)
            raise UnexpectedStoreError(str(e), operation="create employee")

        self.db.refresh(employee)
        logger.info(f"Employee {employee.id} ({employee.name}) added by {actor}")
        return employee

    def update(self, employee_id: int, data: EmployeeUpdate, actor: str) -> Employee:
        """
        Apply a partial update, auditing the basic salary when it changes.

        An update that leaves the basic salary as it was produces no audit
        entry.
        """
        employee = (
            self.db.query(Employee)
            .filter(Employee.id == employee_id)
            .with_for_update()
            .first()
        )
        if employee is None:
            raise NotFoundError(
                "Employee", employee_id, code=PayrollErrorCodes.EMPLOYEE_NOT_FOUND
            )

        changes = self._collect_changes(data)

        if "basic_salary" in changes:
            changes["basic_salary"] = self._validate_salary(changes["basic_salary"])
        if "department_id" in changes and changes["department_id"] != employee.department_id:
            self._validate_department(changes["department_id"])
        if "email" in changes and changes["email"] != employee.email:
            self._validate_email_available(changes["email"], exclude_id=employee.id)

        old_salary = employee.basic_salary

        try:
            for field, value in changes.items():
                setattr(employee, field, value)
            self.db.flush()
            entry = self.audit_recorder.record_update(employee, old_salary, actor)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Employee {employee_id} update rejected by constraint: {e.orig}")
            raise ConstraintViolation(
                f"Employee violates a uniqueness constraint: {e.orig}",
                constraint="email",
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to update employee {employee_id}: {e}", exc_info=True)
            raise UnexpectedStoreError(str(e), operation="update employee")

        self.db.refresh(employee)
        if entry is None:
            logger.info(f"Employee {employee_id} updated by {actor}; basic salary unchanged")
        else:
            logger.info(f"Employee {employee_id} updated by {actor}; basic salary changed")
        return employee

    def _collect_changes(self, data: EmployeeUpdate) -> Dict[str, Any]:
        changes = data.model_dump(exclude_unset=True)
        for field in _REQUIRED_FIELDS:
            if field in changes and changes[field] is None:
                raise ValidationFailure(f"{field} cannot be cleared", field=field)
        return changes

    def _validate_salary(self, basic_salary: Decimal) -> Decimal:
        if basic_salary is None or basic_salary <= 0:
            raise ValidationFailure(
                "Basic salary must be greater than zero",
                field="basic_salary",
                code=PayrollErrorCodes.INVALID_AMOUNT,
            )
        return to_money(basic_salary)

    def _validate_department(self, department_id: int) -> None:
        if self.db.get(Department, department_id) is None:
            raise ValidationFailure(
                f"Department ID {department_id} does not exist",
                field="department_id",
                code=PayrollErrorCodes.MISSING_DEPARTMENT,
            )

    def _validate_email_available(
        self, email: Optional[str], exclude_id: Optional[int] = None
    ) -> None:
        if not email:
            return
        query = self.db.query(Employee.id).filter(Employee.email == email)
        if exclude_id is not None:
            query = query.filter(Employee.id != exclude_id)
        if query.first() is not None:
            raise ValidationFailure(
                f"Email {email} is already in use",
                field="email",
                code=PayrollErrorCodes.DUPLICATE_EMAIL,
            )
