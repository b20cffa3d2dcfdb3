# payrollhub/conftest.py

from datetime import date
from decimal import Decimal
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from payrollhub.core.database import Base, build_engine, get_db

# Register every mapped table on Base.metadata
from payrollhub.modules.payroll.models import SalaryPeriodRecord  # noqa: F401
from payrollhub.modules.staff.models import Department, Employee, SalaryAuditEntry  # noqa: F401
from payrollhub.modules.staff.schemas import EmployeeCreate
from payrollhub.modules.staff.services import EmployeeService
from payrollhub.tests.factories import DepartmentFactory, bind_session


@pytest.fixture
def engine():
    """Fresh in-memory database per test."""
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine) -> Generator[Session, None, None]:
    """Create a test database session."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    bind_session(session)

    yield session

    bind_session(None)
    session.close()


@pytest.fixture
def client(db_session: Session):
    """Create a test client whose requests use the test session."""
    from payrollhub.app.main import app

    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def department(db_session):
    return DepartmentFactory(name="Information Technology", location="Bangalore")


@pytest.fixture
def create_employee(db_session, department):
    """Create employees through EmployeeService so their salary is audited."""
    counter = {"n": 0}

    def _create(basic_salary="30000", department_id=None, actor="tester", **fields):
        counter["n"] += 1
        data = EmployeeCreate(
            name=fields.pop("name", f"Employee {counter['n']}"),
            email=fields.pop("email", f"employee{counter['n']}@company.com"),
            hire_date=fields.pop("hire_date", date(2023, 1, 15)),
            department_id=department_id or department.id,
            designation=fields.pop("designation", "Software Engineer"),
            basic_salary=Decimal(str(basic_salary)),
            **fields,
        )
        return EmployeeService(db_session).create(data, actor)

    return _create
