# payrollhub/modules/payroll/services/report_formatter.py

"""Plain-text rendering of payslips and department reports."""

import calendar
from decimal import Decimal
from typing import List, Optional

from ..schemas.payroll_schemas import DepartmentReport, Payslip

RULE = "=" * 40
DIVIDER = "-" * 40


def format_amount(amount: Optional[Decimal]) -> str:
    if amount is None:
        return "Rs. -"
    return f"Rs. {amount:,.2f}"


def period_label(month: int, year: int) -> str:
    return f"{calendar.month_name[month]} {year}"


class ReportFormatter:
    """Renders report models in the fixed-width text layout."""

    @staticmethod
    def _earning(label: str, amount: Decimal) -> str:
        return f"  {label + ':':<17}{format_amount(amount)}"

    def render_payslip(self, payslip: Payslip) -> str:
        lines: List[str] = [
            RULE,
            "           PAYSLIP",
            RULE,
            f"Employee ID: {payslip.employee_id}",
            f"Employee Name: {payslip.employee_name}",
            f"Department: {payslip.department_name}",
            f"Designation: {payslip.designation or ''}",
            f"Month: {period_label(payslip.month, payslip.year)}",
            DIVIDER,
            "EARNINGS:",
            self._earning("Basic Salary", payslip.basic_salary),
            self._earning("HRA", payslip.hra),
            self._earning("Bonus", payslip.bonus),
            self._earning("Gross Salary", payslip.gross_salary),
            DIVIDER,
            "DEDUCTIONS:",
            self._earning("Tax", payslip.tax),
            DIVIDER,
            f"{'NET SALARY:':<19}{format_amount(payslip.net_salary)}",
            RULE,
        ]
        return "\n".join(lines)

    def render_department_report(self, report: DepartmentReport) -> str:
        lines: List[str] = [
            RULE,
            "   DEPARTMENT SALARY REPORT",
            RULE,
            f"Department: {report.department_name}",
            f"Month: {period_label(report.month, report.year)}",
            DIVIDER,
            f"{'Emp ID':<10}{'Name':<25}{'Designation':<20}{'Net Salary':<15}",
            DIVIDER,
        ]
        for row in report.rows:
            lines.append(
                f"{str(row.employee_id):<10}{row.employee_name:<25}"
                f"{(row.designation or ''):<20}{format_amount(row.net_salary):<15}"
            )
        lines.extend([
            DIVIDER,
            f"Total Employees: {report.employee_count}",
            f"Total Net Salary: {format_amount(report.total_net_salary)}",
            f"Average Net Salary: {format_amount(report.average_net_salary)}",
            RULE,
        ])
        return "\n".join(lines)
