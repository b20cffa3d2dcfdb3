"""
Domain exceptions and the handlers that turn them into API responses.

Services raise these before any write (validation, lookups) or after a
rollback (store failures); routes let them propagate and the registered
handlers render a consistent JSON body.
"""

import logging
from typing import Any, List, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse

from .error_schemas import ErrorDetail, ErrorResponse, PayrollErrorCodes

logger = logging.getLogger(__name__)


class PayrollException(Exception):
    """Base exception for the payroll service"""

    def __init__(
        self,
        message: str,
        code: str = PayrollErrorCodes.DATABASE_ERROR,
        details: Optional[List[ErrorDetail]] = None,
        status_code: int = 400,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or []
        self.status_code = status_code


class NotFoundError(PayrollException):
    """Employee, department or period record absent"""

    def __init__(
        self,
        resource: str,
        identifier: Any,
        code: str = PayrollErrorCodes.RECORD_NOT_FOUND,
    ):
        super().__init__(
            message=f"{resource} with identifier {identifier} not found",
            code=code,
            status_code=status.HTTP_404_NOT_FOUND,
        )
        self.resource = resource
        self.identifier = identifier


class ValidationFailure(PayrollException):
    """Input rejected before any write"""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        code: str = PayrollErrorCodes.INVALID_DATA_FORMAT,
        details: Optional[List[ErrorDetail]] = None,
    ):
        if field and not details:
            details = [ErrorDetail(field=field, message=message, code=code)]
        super().__init__(
            message=message,
            code=code,
            details=details,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )
        self.field = field


class ConstraintViolation(PayrollException):
    """Uniqueness conflict the store could not resolve"""

    def __init__(self, message: str, constraint: Optional[str] = None):
        details = []
        if constraint:
            details.append(ErrorDetail(field=constraint, message=message))
        super().__init__(
            message=message,
            code=PayrollErrorCodes.DUPLICATE_RECORD,
            details=details,
            status_code=status.HTTP_409_CONFLICT,
        )


class UnexpectedStoreError(PayrollException):
    """Underlying store failure; the unit of work has been rolled back"""

    def __init__(self, message: str, operation: Optional[str] = None):
        if operation:
            message = f"Database {operation}: {message}"
        super().__init__(
            message=message,
            code=PayrollErrorCodes.DATABASE_ERROR,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


async def handle_payroll_exception(
    request: Request, exc: PayrollException
) -> JSONResponse:
    """Render a PayrollException as an ErrorResponse body"""
    if exc.status_code >= 500:
        logger.error(f"{type(exc).__name__} at {request.url.path}: {exc.message}")
    else:
        logger.warning(f"{type(exc).__name__} at {request.url.path}: {exc.message}")

    body = ErrorResponse(
        error=type(exc).__name__,
        message=exc.message,
        code=exc.code,
        details=exc.details or None,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(mode="json"),
    )


def register_exception_handlers(app):
    """Register all exception handlers with the FastAPI app"""
    app.add_exception_handler(PayrollException, handle_payroll_exception)
