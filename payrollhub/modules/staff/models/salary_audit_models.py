from sqlalchemy import Column, DateTime, Enum, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import relationship

from payrollhub.core.database import Base
from ..enums.staff_enums import SalaryChangeType


class SalaryAuditEntry(Base):
    """
    Append-only record of a basic-salary assignment.

    One row per employee creation and one per update that changes the
    basic salary. Rows are written by SalaryAuditRecorder inside the same
    transaction as the employee write and are never modified afterwards.
    """
    __tablename__ = "salary_audit"

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False, index=True)
    old_salary = Column(Numeric(10, 2), nullable=True)
    new_salary = Column(Numeric(10, 2), nullable=False)
    changed_by = Column(String(100), nullable=False)
    change_date = Column(DateTime, nullable=False, index=True)
    change_type = Column(
        Enum(SalaryChangeType, name="salary_change_type"), nullable=False
    )

    employee = relationship("Employee", back_populates="salary_audit_entries")

    __table_args__ = (
        Index("idx_salary_audit_employee_date", "employee_id", "change_date"),
    )
