# payrollhub/modules/payroll/routes/payroll_routes.py

"""
Main payroll routes combining all payroll module endpoints.

This router aggregates:
- Payroll runs and stored period records
- Payslips and department reports
- Tax calculations
"""

from datetime import datetime

from fastapi import APIRouter

from .payroll_run_routes import router as payroll_run_router
from .report_routes import router as report_router
from .tax_calculation_routes import router as tax_calculation_router

router = APIRouter(prefix="/api/payroll", tags=["Payroll"])

router.include_router(payroll_run_router, tags=["Payroll Runs"])
router.include_router(report_router, tags=["Payroll Reports"])
router.include_router(tax_calculation_router, prefix="/tax", tags=["Payroll Tax"])


@router.get("/health")
async def payroll_health_check():
    """
    Health check endpoint for payroll module.

    Returns:
        dict: Health status of payroll module
    """
    return {
        "status": "healthy",
        "module": "payroll",
        "timestamp": datetime.utcnow().isoformat(),
    }
