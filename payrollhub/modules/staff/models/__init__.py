from .staff_models import Department, Employee
from .salary_audit_models import SalaryAuditEntry

__all__ = [
    "Department",
    "Employee",
    "SalaryAuditEntry",
]
