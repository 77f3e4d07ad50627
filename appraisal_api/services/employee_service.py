"""
Employee Service Layer

Keyed CRUD over the employee table. Writes go through the validation gate
first and report NotModified when the statement touches no rows. Deleting an
employee also deletes its appraisal snapshot in the same transaction.
"""
from typing import List, Optional

from sqlalchemy import delete, insert, update
from sqlalchemy.exc import IntegrityError

from appraisal_api.core.exceptions import ConflictError, NotFoundError, NotModifiedError
from appraisal_api.models.appraisal import Appraisal
from appraisal_api.models.employee import Employee
from appraisal_api.schemas.employee import EmployeeCreate, EmployeeResponse, EmployeeUpdate
from appraisal_api.services.base import BaseService
from appraisal_api.services.validation import ensure_valid


class EmployeeService(BaseService):

    def _find(self, emp_id: int) -> Optional[Employee]:
        return self.db.query(Employee).filter(Employee.emp_id == emp_id).first()

    def get(self, emp_id: int) -> Optional[EmployeeResponse]:
        with self._storage("fetching employee"):
            row = self._find(emp_id)
        return EmployeeResponse.model_validate(row) if row else None

    def list(self) -> List[EmployeeResponse]:
        with self._storage("fetching all employees"):
            rows = self.db.query(Employee).order_by(Employee.emp_id).all()
        return [EmployeeResponse.model_validate(row) for row in rows]

    def add(self, data: EmployeeCreate) -> EmployeeResponse:
        with self._storage("adding employee"):
            if self._find(data.emp_id) is not None:
                raise ConflictError("Employee already exists")

            ensure_valid(self.db, data.band, data.review)

            try:
                inserted = self._execute(
                    insert(Employee).values({
                        Employee.emp_id: data.emp_id,
                        Employee.emp_name: data.emp_name,
                        Employee.review: data.review,
                        Employee.band: data.band,
                        Employee.salary: data.salary,
                    })
                )
            except IntegrityError:
                # Lost a race with a concurrent insert of the same id
                raise ConflictError("Employee already exists")
            if inserted == 0:
                raise NotModifiedError("Employee creation failed")

            self.db.commit()

        self._logger.info(f"Employee {data.emp_id} added", extra={"emp_id": data.emp_id})
        return self.get(data.emp_id)

    def update(self, emp_id: int, data: EmployeeUpdate) -> EmployeeResponse:
        with self._storage("updating employee"):
            if self._find(emp_id) is None:
                raise NotFoundError("Employee not found")

            ensure_valid(self.db, data.band, data.review)

            updated = self._execute(
                update(Employee)
                .where(Employee.emp_id == emp_id)
                .values({
                    Employee.emp_name: data.emp_name,
                    Employee.review: data.review,
                    Employee.band: data.band,
                    Employee.salary: data.salary,
                })
            )
            if updated == 0:
                raise NotModifiedError("Update failed")

            self.db.commit()

        self._logger.info(f"Employee {emp_id} updated", extra={"emp_id": emp_id})
        return self.get(emp_id)

    def delete(self, emp_id: int) -> EmployeeResponse:
        """
        Delete an employee and, if present, its appraisal.

        Both deletes share one transaction: if either affects zero rows the
        whole operation is rolled back and reported as NotModified.
        """
        with self._storage("deleting employee"):
            row = self._find(emp_id)
            if row is None:
                raise NotFoundError("Employee not found")
            snapshot = EmployeeResponse.model_validate(row)

            deleted = self._execute(delete(Employee).where(Employee.emp_id == emp_id))
            if deleted == 0:
                raise NotModifiedError("Delete failed")

            has_appraisal = (
                self.db.query(Appraisal.emp_id).filter(Appraisal.emp_id == emp_id).first()
                is not None
            )
            if has_appraisal:
                removed = self._execute(delete(Appraisal).where(Appraisal.emp_id == emp_id))
                if removed == 0:
                    raise NotModifiedError("Delete failed")

            self.db.commit()

        self._logger.info(
            f"Employee {emp_id} deleted",
            extra={"emp_id": emp_id, "appraisal_removed": has_appraisal},
        )
        return snapshot
