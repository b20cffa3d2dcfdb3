from .staff_enums import SalaryChangeType

__all__ = ["SalaryChangeType"]
