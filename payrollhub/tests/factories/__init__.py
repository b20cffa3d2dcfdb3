# payrollhub/tests/factories/__init__.py

"""
Shared test factories for PayrollHub.
"""

from .base import BaseFactory, bind_session
from .staff import DepartmentFactory, EmployeeFactory

__all__ = [
    "BaseFactory",
    "DepartmentFactory",
    "EmployeeFactory",
    "bind_session",
]
