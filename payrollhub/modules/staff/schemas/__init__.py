from .staff_schemas import (
    DepartmentCreate,
    DepartmentOut,
    EmployeeCreate,
    EmployeeOut,
    EmployeeUpdate,
    SalaryAuditEntryOut,
    SalaryAuditListResponse,
)

__all__ = [
    "DepartmentCreate",
    "DepartmentOut",
    "EmployeeCreate",
    "EmployeeOut",
    "EmployeeUpdate",
    "SalaryAuditEntryOut",
    "SalaryAuditListResponse",
]
