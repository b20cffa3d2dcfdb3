import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from payrollhub.core.error_schemas import PayrollErrorCodes
from payrollhub.core.exceptions import NotFoundError, UnexpectedStoreError
from ..models.staff_models import Department
from ..schemas.staff_schemas import DepartmentCreate

logger = logging.getLogger(__name__)


class DepartmentService:
    def __init__(self, db: Session):
        self.db = db

    def get(self, department_id: int) -> Optional[Department]:
        return self.db.get(Department, department_id)

    def require(self, department_id: int) -> Department:
        department = self.get(department_id)
        if department is None:
            raise NotFoundError(
                "Department", department_id, code=PayrollErrorCodes.DEPARTMENT_NOT_FOUND
            )
        return department

    def list(self) -> List[Department]:
        return self.db.query(Department).order_by(Department.id).all()

    def create(self, data: DepartmentCreate) -> Department:
        department = Department(
            name=data.name,
            location=data.location,
            manager_id=data.manager_id,
        )
        try:
            self.db.add(department)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to add department {data.name!r}: {e}", exc_info=True)
            raise UnexpectedStoreError(str(e), operation="create department")

        self.db.refresh(department)
        logger.info(f"Department {department.id} ({department.name}) added")
        return department
