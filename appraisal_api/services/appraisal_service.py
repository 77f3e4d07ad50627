"""
Appraisal Service Layer

Creates, recomputes and removes appraisal snapshots.

Per employee the lifecycle is:
- no appraisal -> create -> appraisal stored
- appraisal stored -> update -> recomputed in place
- appraisal stored -> delete (direct, or employee delete) -> no appraisal

Creating over an existing appraisal is a conflict; updating or deleting a
missing one is not-found. The figures are always recomputed from the band and
review multipliers current at request time, never carried over.
"""
from typing import List, Optional

from sqlalchemy import delete, insert, update
from sqlalchemy.exc import IntegrityError

from appraisal_api.core.exceptions import ConflictError, NotFoundError, NotModifiedError
from appraisal_api.models.appraisal import Appraisal
from appraisal_api.schemas.appraisal import AppraisalResponse
from appraisal_api.schemas.employee import EmployeeCreate
from appraisal_api.services.base import BaseService
from appraisal_api.services.calculator import compute
from appraisal_api.services.validation import ensure_valid


class AppraisalService(BaseService):

    def _find(self, emp_id: int) -> Optional[Appraisal]:
        return self.db.query(Appraisal).filter(Appraisal.emp_id == emp_id).first()

    def _snapshot(self, employee: EmployeeCreate) -> dict:
        """Validate references and build the full appraisal row for an employee."""
        refs = ensure_valid(self.db, employee.band, employee.review)
        figures = compute(employee.salary, refs.band.band_mul, refs.review.rev_mul)
        return {
            "emp_id": employee.emp_id,
            "emp_name": employee.emp_name,
            "emp_review": employee.review,
            "emp_band": employee.band,
            "current_salary": employee.salary,
            "appraisal_percentage": figures.appraisal_percentage,
            "appraised_salary": figures.appraised_salary,
        }

    def get(self, emp_id: int) -> Optional[AppraisalResponse]:
        with self._storage("fetching appraisal"):
            row = self._find(emp_id)
        return AppraisalResponse.model_validate(row) if row else None

    def list(self) -> List[AppraisalResponse]:
        with self._storage("fetching all appraisals"):
            rows = self.db.query(Appraisal).order_by(Appraisal.emp_id).all()
        return [AppraisalResponse.model_validate(row) for row in rows]

    def create(self, employee: EmployeeCreate) -> AppraisalResponse:
        with self._storage("creating appraisal"):
            if self._find(employee.emp_id) is not None:
                raise ConflictError("Appraisal already exists")

            values = self._snapshot(employee)

            try:
                inserted = self._execute(insert(Appraisal).values(**values))
            except IntegrityError:
                # A concurrent create for the same employee committed first
                raise ConflictError("Appraisal already exists")
            if inserted == 0:
                raise NotModifiedError("Appraisal creation failed")

            self.db.commit()

        self._logger.info(
            f"Appraisal created for employee {employee.emp_id}",
            extra={
                "emp_id": employee.emp_id,
                "appraisal_percentage": values["appraisal_percentage"],
            },
        )
        return AppraisalResponse(**values)

    def update(self, employee: EmployeeCreate) -> AppraisalResponse:
        with self._storage("updating appraisal"):
            if self._find(employee.emp_id) is None:
                raise NotFoundError("Appraisal does not exist")

            values = self._snapshot(employee)

            updated = self._execute(
                update(Appraisal)
                .where(Appraisal.emp_id == employee.emp_id)
                .values(**{k: v for k, v in values.items() if k != "emp_id"})
            )
            if updated == 0:
                raise NotModifiedError("Update failed")

            self.db.commit()

        self._logger.info(
            f"Appraisal recomputed for employee {employee.emp_id}",
            extra={
                "emp_id": employee.emp_id,
                "appraisal_percentage": values["appraisal_percentage"],
            },
        )
        return AppraisalResponse(**values)

    def delete(self, emp_id: int) -> AppraisalResponse:
        with self._storage("deleting appraisal"):
            row = self._find(emp_id)
            if row is None:
                raise NotFoundError("Appraisal not found")
            snapshot = AppraisalResponse.model_validate(row)

            deleted = self._execute(delete(Appraisal).where(Appraisal.emp_id == emp_id))
            if deleted == 0:
                raise NotModifiedError("Delete failed")

            self.db.commit()

        self._logger.info(f"Appraisal for employee {emp_id} deleted", extra={"emp_id": emp_id})
        return snapshot
