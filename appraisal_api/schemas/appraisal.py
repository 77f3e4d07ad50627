from appraisal_api.schemas.base import CamelModel


class AppraisalResponse(CamelModel):
    """Stored appraisal snapshot."""
    emp_id: int
    emp_name: str
    emp_review: int
    emp_band: str
    current_salary: float
    appraisal_percentage: float
    appraised_salary: float
