from pydantic import Field
from appraisal_api.schemas.base import MAX_ID, CamelModel


class EmployeeBase(CamelModel):
    """Fields shared by every employee payload."""
    emp_name: str = Field(..., min_length=1)
    review: int = Field(..., ge=0, le=MAX_ID)
    band: str = Field(..., min_length=1)
    salary: float = Field(..., ge=0)


class EmployeeCreate(EmployeeBase):
    """
    Body for POST /employee, POST /appraisal and PUT /appraisal.
    The appraisal endpoints take the employee data they snapshot.
    """
    emp_id: int = Field(..., ge=0, le=MAX_ID)


class EmployeeUpdate(EmployeeBase):
    """Schema for replacing an employee. The id comes from the path."""
    pass


class EmployeeResponse(EmployeeBase):
    emp_id: int
