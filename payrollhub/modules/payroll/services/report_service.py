# payrollhub/modules/payroll/services/report_service.py

import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from payrollhub.core.error_schemas import PayrollErrorCodes
from payrollhub.core.exceptions import NotFoundError
from payrollhub.core.money import to_money
from payrollhub.modules.staff.models.staff_models import Department, Employee
from ..models.payroll_models import SalaryPeriodRecord
from ..schemas.payroll_schemas import DepartmentReport, DepartmentReportRow, Payslip
from .payroll_ledger import validate_period

logger = logging.getLogger(__name__)


class ReportService:
    """Read-side views over stored period records."""

    def __init__(self, db: Session):
        self.db = db

    def get_payslip(self, employee_id: int, month: int, year: int) -> Payslip:
        """
        Period record for one employee joined with employee and department
        names.

        Raises:
            ValidationFailure: month or year out of range
            NotFoundError: no record exists for the employee and period
        """
        validate_period(month, year)

        row = (
            self.db.query(SalaryPeriodRecord, Employee, Department)
            .join(Employee, SalaryPeriodRecord.employee_id == Employee.id)
            .join(Department, Employee.department_id == Department.id)
            .filter(
                SalaryPeriodRecord.employee_id == employee_id,
                SalaryPeriodRecord.salary_month == month,
                SalaryPeriodRecord.salary_year == year,
            )
            .first()
        )
        if row is None:
            raise NotFoundError(
                "Salary record",
                f"employee {employee_id} for {month}/{year}",
                code=PayrollErrorCodes.RECORD_NOT_FOUND,
            )

        record, employee, department = row
        return Payslip(
            employee_id=employee.id,
            employee_name=employee.name,
            department_name=department.name,
            designation=employee.designation,
            month=record.salary_month,
            year=record.salary_year,
            basic_salary=record.basic_salary,
            hra=record.hra,
            bonus=record.bonus,
            gross_salary=record.gross_salary,
            tax=record.tax,
            net_salary=record.net_salary,
        )

    def get_department_report(
        self, department_id: int, month: int, year: int
    ) -> DepartmentReport:
        """
        Department salary listing for one period, highest net salary first.

        An existing department with no records for the period yields an
        empty report whose average is None.
        """
        validate_period(month, year)

        department = self.db.get(Department, department_id)
        if department is None:
            raise NotFoundError(
                "Department", department_id, code=PayrollErrorCodes.DEPARTMENT_NOT_FOUND
            )

        results = (
            self.db.query(SalaryPeriodRecord, Employee)
            .join(Employee, SalaryPeriodRecord.employee_id == Employee.id)
            .filter(
                Employee.department_id == department_id,
                SalaryPeriodRecord.salary_month == month,
                SalaryPeriodRecord.salary_year == year,
            )
            .order_by(SalaryPeriodRecord.net_salary.desc(), Employee.id)
            .all()
        )

        rows = [
            DepartmentReportRow(
                employee_id=employee.id,
                employee_name=employee.name,
                designation=employee.designation,
                basic_salary=record.basic_salary,
                hra=record.hra,
                bonus=record.bonus,
                tax=record.tax,
                gross_salary=record.gross_salary,
                net_salary=record.net_salary,
            )
            for record, employee in results
        ]

        total = to_money(sum((row.net_salary for row in rows), Decimal("0")))
        average = to_money(total / len(rows)) if rows else None

        logger.debug(
            f"Department report {department_id} {month:02d}/{year}: {len(rows)} rows"
        )
        return DepartmentReport(
            department_id=department.id,
            department_name=department.name,
            month=month,
            year=year,
            rows=rows,
            employee_count=len(rows),
            total_net_salary=total,
            average_net_salary=average,
        )
