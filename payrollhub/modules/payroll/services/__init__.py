from .payroll_ledger import PayrollLedger
from .report_formatter import ReportFormatter
from .report_service import ReportService
from .salary_computer import SalaryComputer
from .tax_calculator import DEFAULT_TAX_BRACKETS, TaxBracket, TaxCalculator, calculate_tax

__all__ = [
    "DEFAULT_TAX_BRACKETS",
    "PayrollLedger",
    "ReportFormatter",
    "ReportService",
    "SalaryComputer",
    "TaxBracket",
    "TaxCalculator",
    "calculate_tax",
]
