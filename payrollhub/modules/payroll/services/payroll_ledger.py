# payrollhub/modules/payroll/services/payroll_ledger.py

"""
Payroll ledger: one computed salary record per employee and period.

A payroll run reads the employee's committed basic salary, derives the
salary components and writes them with a single conditional upsert keyed
on (employee_id, salary_month, salary_year). Re-running a period rewrites
the existing row in place, so its id is stable across runs.
"""

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from payrollhub.core.error_schemas import PayrollErrorCodes
from payrollhub.core.exceptions import (
    ConstraintViolation,
    NotFoundError,
    PayrollException,
    UnexpectedStoreError,
    ValidationFailure,
)
from payrollhub.modules.staff.models.staff_models import Employee
from ..models.payroll_models import SalaryPeriodRecord
from ..schemas.payroll_schemas import (
    PayrollBatchResult,
    PayrollRunFailure,
    SalaryComponents,
    SalaryPeriodRecordOut,
)
from .salary_computer import SalaryComputer

logger = logging.getLogger(__name__)

_NATIVE_UPSERT_INSERTS = {
    "sqlite": sqlite_insert,
    "postgresql": postgresql_insert,
}

_PERIOD_KEY = ("employee_id", "salary_month", "salary_year")


def validate_period(month: int, year: int) -> None:
    """Raise ValidationFailure unless month is 1-12 and year is positive."""
    if month is None or not 1 <= month <= 12:
        raise ValidationFailure(
            f"Salary month must be between 1 and 12, got {month}",
            field="month",
            code=PayrollErrorCodes.INVALID_PERIOD,
        )
    if year is None or year <= 0:
        raise ValidationFailure(
            f"Salary year must be a positive integer, got {year}",
            field="year",
            code=PayrollErrorCodes.INVALID_PERIOD,
        )


class PayrollLedger:
    """Runs payroll and reads back the stored period records."""

    def __init__(self, db: Session, salary_computer: Optional[SalaryComputer] = None):
        self.db = db
        self.salary_computer = salary_computer or SalaryComputer()

    def run_payroll(
        self, employee_id: int, month: int, year: int, *, actor: Optional[str] = None
    ) -> SalaryPeriodRecord:
        """
        Compute and store the salary record for one employee and period.

        Args:
            employee_id: Employee to pay
            month: Salary month, 1-12
            year: Salary year, positive
            actor: Principal requesting the run, used for logging only

        Returns:
            The created or rewritten SalaryPeriodRecord

        Raises:
            ValidationFailure: month or year out of range; nothing is written
            NotFoundError: employee does not exist; nothing is written
            ConstraintViolation: the period row could not be written after a retry
            UnexpectedStoreError: store failure; the transaction was rolled back
        """
        validate_period(month, year)

        try:
            return self._run_once(employee_id, month, year, actor)
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(
                f"Uniqueness conflict writing payroll for employee {employee_id} "
                f"{month:02d}/{year}, retrying: {e.orig}"
            )

        try:
            return self._run_once(employee_id, month, year, actor)
        except IntegrityError as e:
            self.db.rollback()
            logger.error(
                f"Payroll for employee {employee_id} {month:02d}/{year} "
                f"still conflicts after retry: {e.orig}"
            )
            raise ConstraintViolation(
                f"Salary record for employee {employee_id} in {month:02d}/{year} "
                "could not be written",
                constraint="uq_salary_details_employee_period",
            )

    def run_payroll_for_period(self, month: int, year: int) -> PayrollBatchResult:
        """
        Run payroll for every employee in one period.

        A failure for one employee is recorded in the result and does not
        stop the others.
        """
        validate_period(month, year)

        employee_ids = [
            row.id for row in self.db.query(Employee.id).order_by(Employee.id).all()
        ]
        result = PayrollBatchResult(month=month, year=year)

        for employee_id in employee_ids:
            try:
                record = self.run_payroll(employee_id, month, year)
            except PayrollException as e:
                result.failed.append(
                    PayrollRunFailure(
                        employee_id=employee_id, code=e.code, message=e.message
                    )
                )
                continue
            result.processed.append(SalaryPeriodRecordOut.model_validate(record))

        logger.info(
            f"Payroll batch {month:02d}/{year}: {len(result.processed)} processed, "
            f"{len(result.failed)} failed"
        )
        return result

    def find(self, employee_id: int, month: int, year: int) -> Optional[SalaryPeriodRecord]:
        return (
            self.db.query(SalaryPeriodRecord)
            .filter(
                SalaryPeriodRecord.employee_id == employee_id,
                SalaryPeriodRecord.salary_month == month,
                SalaryPeriodRecord.salary_year == year,
            )
            .first()
        )

    def list_by_period(self, month: int, year: int) -> List[SalaryPeriodRecord]:
        return (
            self.db.query(SalaryPeriodRecord)
            .filter(
                SalaryPeriodRecord.salary_month == month,
                SalaryPeriodRecord.salary_year == year,
            )
            .order_by(SalaryPeriodRecord.employee_id)
            .all()
        )

    def list_by_employee(self, employee_id: int) -> List[SalaryPeriodRecord]:
        """Records for one employee, most recent period first."""
        return (
            self.db.query(SalaryPeriodRecord)
            .filter(SalaryPeriodRecord.employee_id == employee_id)
            .order_by(
                SalaryPeriodRecord.salary_year.desc(),
                SalaryPeriodRecord.salary_month.desc(),
            )
            .all()
        )

    def _run_once(
        self, employee_id: int, month: int, year: int, actor: Optional[str]
    ) -> SalaryPeriodRecord:
        try:
            basic_salary = (
                self.db.query(Employee.basic_salary)
                .filter(Employee.id == employee_id)
                .scalar()
            )
            if basic_salary is None:
                self.db.rollback()
                raise NotFoundError(
                    "Employee", employee_id, code=PayrollErrorCodes.EMPLOYEE_NOT_FOUND
                )

            components = self.salary_computer.compute(basic_salary)
            existing_id = self._existing_id(employee_id, month, year)
            record = self._upsert(employee_id, month, year, components)
            self.db.commit()
        except (NotFoundError, IntegrityError):
            raise
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(
                f"Payroll for employee {employee_id} {month:02d}/{year} failed: {e}",
                exc_info=True,
            )
            raise UnexpectedStoreError(str(e), operation="payroll run")

        action = "created" if existing_id is None else "updated"
        logger.info(
            f"Payroll {action} for employee {employee_id} {month:02d}/{year}"
            f"{f' by {actor}' if actor else ''}: gross {components.gross}, "
            f"tax {components.tax}, net {components.net}"
        )
        return record

    def _existing_id(self, employee_id: int, month: int, year: int) -> Optional[int]:
        return (
            self.db.query(SalaryPeriodRecord.id)
            .filter(
                SalaryPeriodRecord.employee_id == employee_id,
                SalaryPeriodRecord.salary_month == month,
                SalaryPeriodRecord.salary_year == year,
            )
            .scalar()
        )

    def _upsert(
        self, employee_id: int, month: int, year: int, components: SalaryComponents
    ) -> SalaryPeriodRecord:
        values = {
            "basic_salary": components.basic,
            "hra": components.hra,
            "bonus": components.bonus,
            "tax": components.tax,
            "gross_salary": components.gross,
            "net_salary": components.net,
            "pay_date": datetime.utcnow(),
        }

        insert = _NATIVE_UPSERT_INSERTS.get(self.db.get_bind().dialect.name)
        if insert is not None:
            stmt = insert(SalaryPeriodRecord.__table__).values(
                employee_id=employee_id,
                salary_month=month,
                salary_year=year,
                **values,
            )
            stmt = stmt.on_conflict_do_update(
                index_elements=list(_PERIOD_KEY),
                set_={**values, "updated_at": func.now()},
            )
            self.db.execute(stmt)
        else:
            self._locked_upsert(employee_id, month, year, values)

        return (
            self.db.query(SalaryPeriodRecord)
            .filter(
                SalaryPeriodRecord.employee_id == employee_id,
                SalaryPeriodRecord.salary_month == month,
                SalaryPeriodRecord.salary_year == year,
            )
            .populate_existing()
            .one()
        )

    def _locked_upsert(self, employee_id: int, month: int, year: int, values: dict) -> None:
        # Dialects without ON CONFLICT: a concurrent insert of the same key
        # surfaces as IntegrityError and is retried by run_payroll
        record = (
            self.db.query(SalaryPeriodRecord)
            .filter(
                SalaryPeriodRecord.employee_id == employee_id,
                SalaryPeriodRecord.salary_month == month,
                SalaryPeriodRecord.salary_year == year,
            )
            .with_for_update()
            .first()
        )
        if record is None:
            record = SalaryPeriodRecord(
                employee_id=employee_id, salary_month=month, salary_year=year
            )
            self.db.add(record)
        for field, value in values.items():
            setattr(record, field, value)
        self.db.flush()
