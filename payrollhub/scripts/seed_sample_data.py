#!/usr/bin/env python3
"""
Seed sample data for PayrollHub manual testing.

Creates the tables, six departments and thirteen employees, then runs
payroll for the current month. Safe to re-run: existing departments and
employees (matched by name and email) are left as they are, and the
payroll run recomputes the current period in place.

    python -m payrollhub.scripts.seed_sample_data
"""

import logging
from datetime import date
from decimal import Decimal

from sqlalchemy.orm import Session

from payrollhub.app.startup import configure_logging
from payrollhub.core.database import Base, SessionLocal, engine
from payrollhub.modules.payroll.models import SalaryPeriodRecord  # noqa: F401
from payrollhub.modules.payroll.services.payroll_ledger import PayrollLedger
from payrollhub.modules.staff.models import Department, Employee
from payrollhub.modules.staff.schemas import DepartmentCreate, EmployeeCreate
from payrollhub.modules.staff.services import DepartmentService, EmployeeService

logger = logging.getLogger(__name__)

SEED_ACTOR = "seed-script"

DEPARTMENTS = [
    ("Human Resources", "Mumbai"),
    ("Information Technology", "Bangalore"),
    ("Finance", "Delhi"),
    ("Marketing", "Pune"),
    ("Operations", "Hyderabad"),
    ("Sales", "Chennai"),
]

# (name, email, phone, hire date, department, designation, basic salary)
EMPLOYEES = [
    ("Rajesh Kumar", "rajesh.kumar@company.com", "9876543210", date(2023, 1, 15),
     "Information Technology", "Software Engineer", "50000"),
    ("Priya Sharma", "priya.sharma@company.com", "9876543211", date(2023, 2, 20),
     "Information Technology", "Senior Developer", "75000"),
    ("Amit Patel", "amit.patel@company.com", "9876543212", date(2022, 6, 10),
     "Information Technology", "Tech Lead", "100000"),
    ("Sunita Reddy", "sunita.reddy@company.com", "9876543213", date(2023, 3, 5),
     "Human Resources", "HR Executive", "35000"),
    ("Vikram Singh", "vikram.singh@company.com", "9876543214", date(2022, 8, 15),
     "Human Resources", "HR Manager", "80000"),
    ("Anjali Desai", "anjali.desai@company.com", "9876543215", date(2023, 4, 1),
     "Finance", "Accountant", "40000"),
    ("Rohit Gupta", "rohit.gupta@company.com", "9876543216", date(2022, 5, 20),
     "Finance", "Finance Manager", "85000"),
    ("Neha Verma", "neha.verma@company.com", "9876543217", date(2023, 5, 10),
     "Marketing", "Marketing Executive", "38000"),
    ("Karan Malhotra", "karan.malhotra@company.com", "9876543218", date(2022, 9, 1),
     "Marketing", "Marketing Manager", "78000"),
    ("Deepak Joshi", "deepak.joshi@company.com", "9876543219", date(2023, 6, 15),
     "Operations", "Operations Executive", "32000"),
    ("Meera Nair", "meera.nair@company.com", "9876543220", date(2022, 7, 10),
     "Operations", "Operations Manager", "72000"),
    ("Arjun Iyer", "arjun.iyer@company.com", "9876543221", date(2023, 7, 1),
     "Sales", "Sales Executive", "36000"),
    ("Kavita Rao", "kavita.rao@company.com", "9876543222", date(2022, 10, 15),
     "Sales", "Sales Manager", "76000"),
]


def create_departments(db: Session) -> dict:
    """Create sample departments, returning them keyed by name."""
    logger.info("Creating departments...")
    service = DepartmentService(db)
    departments = {d.name: d for d in service.list()}

    for name, location in DEPARTMENTS:
        if name in departments:
            continue
        departments[name] = service.create(DepartmentCreate(name=name, location=location))

    return departments


def create_employees(db: Session, departments: dict) -> None:
    logger.info("Creating employees...")
    service = EmployeeService(db)

    for name, email, phone, hire_date, dept_name, designation, salary in EMPLOYEES:
        if db.query(Employee.id).filter(Employee.email == email).first():
            continue
        service.create(
            EmployeeCreate(
                name=name,
                email=email,
                phone=phone,
                hire_date=hire_date,
                department_id=departments[dept_name].id,
                designation=designation,
                basic_salary=Decimal(salary),
            ),
            actor=SEED_ACTOR,
        )


def run_current_payroll(db: Session) -> None:
    today = date.today()
    logger.info(f"Running payroll for {today.month:02d}/{today.year}...")
    result = PayrollLedger(db).run_payroll_for_period(today.month, today.year)
    for failure in result.failed:
        logger.warning(f"Payroll failed for employee {failure.employee_id}: {failure.message}")


def main():
    configure_logging()
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        departments = create_departments(db)
        create_employees(db, departments)
        run_current_payroll(db)
        logger.info(
            f"Seed complete: {db.query(Department).count()} departments, "
            f"{db.query(Employee).count()} employees"
        )
    finally:
        db.close()


if __name__ == "__main__":
    main()
