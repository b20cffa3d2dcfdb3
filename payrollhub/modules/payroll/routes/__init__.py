from .payroll_routes import router as payroll_router

__all__ = ["payroll_router"]
