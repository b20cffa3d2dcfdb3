"""
PayrollHub - monthly employee payroll service.

Salary derivation from a basic-salary figure, tiered tax withholding,
idempotent per-period payroll runs, payslip and department reporting, and
an append-only audit trail of basic-salary changes.
"""

__version__ = "1.0.0"
