# payrollhub/core/error_schemas.py

"""
Error response schemas for structured error handling.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorDetail(BaseModel):
    """Detailed error information"""

    field: Optional[str] = None
    message: str
    code: Optional[str] = None


class ErrorResponse(BaseModel):
    """Standardized error response"""

    error: str = Field(..., description="Error type or category")
    message: str = Field(..., description="Human-readable error message")
    code: str = Field(..., description="Machine-readable error code")
    details: Optional[List[ErrorDetail]] = Field(
        None, description="Additional error details"
    )
    timestamp: datetime = Field(default_factory=datetime.utcnow)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "ValidationFailure",
                "message": "Basic salary must be greater than zero",
                "code": "PAYROLL_INVALID_AMOUNT",
                "details": [
                    {
                        "field": "basic_salary",
                        "message": "Basic salary must be greater than zero",
                        "code": "PAYROLL_INVALID_AMOUNT",
                    }
                ],
                "timestamp": "2024-01-31T12:00:00Z",
            }
        }
    )


class PayrollErrorCodes:
    """Centralized error codes"""

    # Validation errors
    INVALID_AMOUNT = "PAYROLL_INVALID_AMOUNT"
    INVALID_PERIOD = "PAYROLL_INVALID_PERIOD"
    DUPLICATE_EMAIL = "PAYROLL_DUPLICATE_EMAIL"
    MISSING_DEPARTMENT = "PAYROLL_MISSING_DEPARTMENT"
    INVALID_DATA_FORMAT = "PAYROLL_INVALID_DATA_FORMAT"

    # Lookup errors
    EMPLOYEE_NOT_FOUND = "PAYROLL_EMPLOYEE_NOT_FOUND"
    DEPARTMENT_NOT_FOUND = "PAYROLL_DEPARTMENT_NOT_FOUND"
    RECORD_NOT_FOUND = "PAYROLL_RECORD_NOT_FOUND"

    # Store errors
    DUPLICATE_RECORD = "PAYROLL_DUPLICATE_RECORD"
    DATABASE_ERROR = "PAYROLL_DATABASE_ERROR"
