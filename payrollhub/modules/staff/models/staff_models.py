from sqlalchemy import (
    CheckConstraint, Column, Date, ForeignKey, Index, Integer, Numeric, String
)
from sqlalchemy.orm import relationship

from payrollhub.core.database import Base
from payrollhub.core.mixins import TimestampMixin


class Department(Base, TimestampMixin):
    __tablename__ = "departments"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), nullable=False)
    location = Column(String(100), nullable=True)
    # Not a foreign key: a manager may be assigned before or after hiring
    manager_id = Column(Integer, nullable=True)

    employees = relationship("Employee", back_populates="department")


class Employee(Base, TimestampMixin):
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(100), unique=True, nullable=True)
    phone = Column(String(15), nullable=True)
    hire_date = Column(Date, nullable=False)
    department_id = Column(Integer, ForeignKey("departments.id"), nullable=False)
    designation = Column(String(50), nullable=True)
    basic_salary = Column(Numeric(10, 2), nullable=False)

    department = relationship("Department", back_populates="employees")
    salary_audit_entries = relationship("SalaryAuditEntry", back_populates="employee")

    __table_args__ = (
        CheckConstraint("basic_salary > 0", name="ck_employees_basic_salary_positive"),
        Index("idx_emp_dept", "department_id"),
        Index("idx_emp_email", "email"),
        Index("idx_emp_hire_date", "hire_date"),
    )

    def __repr__(self):
        return f"<Employee id={self.id} name={self.name} email={self.email}>"
