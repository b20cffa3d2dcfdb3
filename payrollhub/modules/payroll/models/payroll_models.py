from sqlalchemy import (
    CheckConstraint, Column, DateTime, ForeignKey, Index, Integer, Numeric,
    UniqueConstraint
)
from sqlalchemy.orm import relationship

from payrollhub.core.database import Base
from payrollhub.core.mixins import TimestampMixin


class SalaryPeriodRecord(Base, TimestampMixin):
    """
    Computed payroll line for one (employee, month, year).

    Derived amounts are written together by PayrollLedger and never edited
    one at a time: gross = basic + hra + bonus, net = gross - tax.
    """
    __tablename__ = "salary_details"

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False)
    salary_month = Column(Integer, nullable=False)
    salary_year = Column(Integer, nullable=False)

    basic_salary = Column(Numeric(10, 2), nullable=False)
    hra = Column(Numeric(10, 2), default=0, nullable=False)
    bonus = Column(Numeric(10, 2), default=0, nullable=False)
    tax = Column(Numeric(10, 2), default=0, nullable=False)
    gross_salary = Column(Numeric(10, 2), nullable=False)
    net_salary = Column(Numeric(10, 2), nullable=False)
    pay_date = Column(DateTime, nullable=False)

    employee = relationship("Employee")

    __table_args__ = (
        UniqueConstraint(
            "employee_id", "salary_month", "salary_year",
            name="uq_salary_details_employee_period",
        ),
        CheckConstraint(
            "salary_month BETWEEN 1 AND 12", name="ck_salary_details_month_range"
        ),
        Index("idx_salary_emp", "employee_id"),
        Index("idx_salary_month_year", "salary_month", "salary_year"),
        Index("idx_salary_composite", "employee_id", "salary_year", "salary_month"),
    )
