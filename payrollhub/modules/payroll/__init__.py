# payrollhub/modules/payroll/__init__.py

"""
Payroll module: tax, salary computation, payroll runs and reports.
"""
