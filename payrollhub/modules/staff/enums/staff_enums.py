from enum import Enum


class SalaryChangeType(str, Enum):
    CREATE = "CREATE"
    UPDATE = "UPDATE"
