# payrollhub/modules/staff/__init__.py

"""
Staff module: departments, employees and the salary audit trail.
"""
