from .department_service import DepartmentService
from .employee_service import EmployeeService
from .salary_audit_recorder import SalaryAuditRecorder

__all__ = ["DepartmentService", "EmployeeService", "SalaryAuditRecorder"]
