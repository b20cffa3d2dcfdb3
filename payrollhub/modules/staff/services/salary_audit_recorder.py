# payrollhub/modules/staff/services/salary_audit_recorder.py

"""
Audit trail for basic-salary assignments.

The recorder never commits. EmployeeService calls it after flushing the
employee row and before committing, so the audit row and the employee
write land in the same transaction or not at all.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from payrollhub.core.config import settings
from payrollhub.core.money import to_money
from ..enums.staff_enums import SalaryChangeType
from ..models.salary_audit_models import SalaryAuditEntry
from ..models.staff_models import Employee

logger = logging.getLogger(__name__)


class SalaryAuditRecorder:
    """Appends immutable SalaryAuditEntry rows for salary assignments."""

    def __init__(self, db: Session):
        self.db = db

    def record_creation(self, employee: Employee, actor: str) -> SalaryAuditEntry:
        """
        Record the initial basic salary of a newly created employee.

        Args:
            employee: Flushed employee row (its id must already be assigned)
            actor: Principal performing the write

        Returns:
            The pending CREATE entry
        """
        return self._append(
            employee=employee,
            old_salary=None,
            change_type=SalaryChangeType.CREATE,
            actor=actor,
        )

    def record_update(
        self, employee: Employee, old_salary: Decimal, actor: str
    ) -> Optional[SalaryAuditEntry]:
        """
        Record a basic-salary change on an existing employee.

        Returns None without writing anything when the salary is unchanged.
        """
        if to_money(old_salary) == to_money(employee.basic_salary):
            return None

        return self._append(
            employee=employee,
            old_salary=old_salary,
            change_type=SalaryChangeType.UPDATE,
            actor=actor,
        )

    def list_entries(
        self, limit: Optional[int] = None, employee_id: Optional[int] = None
    ) -> List[SalaryAuditEntry]:
        """Return audit entries newest first."""
        limit = limit or settings.audit_default_limit

        query = self.db.query(SalaryAuditEntry)
        if employee_id is not None:
            query = query.filter(SalaryAuditEntry.employee_id == employee_id)

        return (
            query.order_by(
                SalaryAuditEntry.change_date.desc(), SalaryAuditEntry.id.desc()
            )
            .limit(limit)
            .all()
        )

    def _append(
        self,
        employee: Employee,
        old_salary: Optional[Decimal],
        change_type: SalaryChangeType,
        actor: str,
    ) -> SalaryAuditEntry:
        if employee.id is None:
            raise RuntimeError("Employee must be flushed before its salary is audited")

        entry = SalaryAuditEntry(
            employee_id=employee.id,
            old_salary=to_money(old_salary) if old_salary is not None else None,
            new_salary=to_money(employee.basic_salary),
            changed_by=actor,
            change_date=datetime.utcnow(),
            change_type=change_type,
        )
        self.db.add(entry)
        self.db.flush()

        logger.info(
            f"Salary audit {change_type.value} for employee {employee.id}: "
            f"{entry.old_salary} -> {entry.new_salary} by {actor}"
        )
        return entry
