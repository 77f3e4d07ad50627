"""
Appraisal Router

Create and update take the employee data to snapshot in the request body;
the appraisal figures are computed server-side from the current band and
review multipliers.
"""
from typing import List

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.orm import Session

from appraisal_api.core.exceptions import NotFoundError
from appraisal_api.database import get_db
from appraisal_api.schemas.base import MAX_ID
from appraisal_api.schemas.appraisal import AppraisalResponse
from appraisal_api.schemas.employee import EmployeeCreate
from appraisal_api.services.appraisal_service import AppraisalService

router = APIRouter(
    prefix="/appraisal",
    tags=["Appraisals"],
)


@router.get("/{emp_id}", response_model=AppraisalResponse)
def get_appraisal_by_id(emp_id: int = Path(..., ge=0, le=MAX_ID), db: Session = Depends(get_db)):
    appraisal = AppraisalService(db).get(emp_id)
    if appraisal is None:
        raise NotFoundError("Appraisal not found")
    return appraisal


@router.get("", response_model=List[AppraisalResponse])
def get_all_appraisals(db: Session = Depends(get_db)):
    appraisals = AppraisalService(db).list()
    if not appraisals:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return appraisals


@router.post("", response_model=AppraisalResponse, status_code=status.HTTP_201_CREATED)
def add_appraisal(employee: EmployeeCreate, db: Session = Depends(get_db)):
    return AppraisalService(db).create(employee)


@router.put("", response_model=AppraisalResponse)
def update_appraisal(employee: EmployeeCreate, db: Session = Depends(get_db)):
    """Recompute an existing appraisal from the supplied employee data."""
    return AppraisalService(db).update(employee)


@router.delete("/{emp_id}", response_model=AppraisalResponse)
def delete_appraisal(emp_id: int = Path(..., ge=0, le=MAX_ID), db: Session = Depends(get_db)):
    return AppraisalService(db).delete(emp_id)
