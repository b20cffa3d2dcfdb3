from .payroll_schemas import (
    DepartmentReport,
    DepartmentReportRow,
    PayrollBatchResult,
    PayrollPeriodRequest,
    PayrollRunFailure,
    PayrollRunRequest,
    Payslip,
    SalaryComponents,
    SalaryPeriodRecordOut,
    TaxBracketOut,
    TaxCalculationResponse,
)

__all__ = [
    "DepartmentReport",
    "DepartmentReportRow",
    "PayrollBatchResult",
    "PayrollPeriodRequest",
    "PayrollRunFailure",
    "PayrollRunRequest",
    "Payslip",
    "SalaryComponents",
    "SalaryPeriodRecordOut",
    "TaxBracketOut",
    "TaxCalculationResponse",
]
