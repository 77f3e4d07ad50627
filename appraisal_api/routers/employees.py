"""
Employee Router

Handles HTTP endpoints for the employee table.
All business logic is delegated to the employee service layer.
"""
from typing import List

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.orm import Session

from appraisal_api.core.exceptions import NotFoundError
from appraisal_api.database import get_db
from appraisal_api.schemas.base import MAX_ID
from appraisal_api.schemas.employee import EmployeeCreate, EmployeeResponse, EmployeeUpdate
from appraisal_api.services.employee_service import EmployeeService

router = APIRouter(
    prefix="/employee",
    tags=["Employees"],
)


@router.get("/{emp_id}", response_model=EmployeeResponse)
def get_employee_by_id(emp_id: int = Path(..., ge=0, le=MAX_ID), db: Session = Depends(get_db)):
    employee = EmployeeService(db).get(emp_id)
    if employee is None:
        raise NotFoundError("Employee not found")
    return employee


@router.get("", response_model=List[EmployeeResponse])
def get_all_employees(db: Session = Depends(get_db)):
    employees = EmployeeService(db).list()
    if not employees:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return employees


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
def add_employee(employee: EmployeeCreate, db: Session = Depends(get_db)):
    """
    Add an employee.

    409 if the id is taken, 400 if the band or review does not exist.
    """
    return EmployeeService(db).add(employee)


@router.put("/{emp_id}", response_model=EmployeeResponse)
def update_employee(
    employee: EmployeeUpdate,
    emp_id: int = Path(..., ge=0, le=MAX_ID),
    db: Session = Depends(get_db),
):
    return EmployeeService(db).update(emp_id, employee)


@router.delete("/{emp_id}", response_model=EmployeeResponse)
def delete_employee(emp_id: int = Path(..., ge=0, le=MAX_ID), db: Session = Depends(get_db)):
    """Delete an employee together with its appraisal, returning the removed employee."""
    return EmployeeService(db).delete(emp_id)
