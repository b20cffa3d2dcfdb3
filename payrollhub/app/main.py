from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from payrollhub import __version__
from payrollhub.app.startup import configure_logging, run_startup_checks
from payrollhub.core.config import settings
from payrollhub.core.exceptions import register_exception_handlers
from payrollhub.modules.payroll.routes import payroll_router
from payrollhub.modules.staff.routes import staff_router

configure_logging()

app = FastAPI(
    title="PayrollHub - Employee Payroll API",
    description="""
    Monthly payroll for employees and departments.

    ## Features
    - Employee and department records with a salary audit trail
    - Idempotent payroll runs per employee and period
    - Payslips and department salary reports
    - Tiered income tax calculation

    ## Actor
    Write requests may send an `X-Actor` header naming who made the change;
    it is recorded on salary audit entries.
    """,
    version=__version__,
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(staff_router)
app.include_router(payroll_router)


@app.on_event("startup")
async def startup_event():
    run_startup_checks()


@app.get("/")
def read_root():
    return {"message": "PayrollHub API", "version": __version__}
