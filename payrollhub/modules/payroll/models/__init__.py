from .payroll_models import SalaryPeriodRecord

__all__ = ["SalaryPeriodRecord"]
