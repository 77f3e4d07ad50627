from typing import NamedTuple


class AppraisalFigures(NamedTuple):
    appraisal_percentage: float
    appraised_salary: float


def compute(salary: float, band_mul: float, rev_mul: float) -> AppraisalFigures:
    """
    Compute an appraisal from the current salary and the two multipliers.

    The percentage is the product of the band and review multipliers and is
    not clamped; callers are expected to pass multipliers that already went
    through the validation gate.
    """
    appraisal_percentage = band_mul * rev_mul
    appraised_salary = salary + (salary * appraisal_percentage)
    return AppraisalFigures(appraisal_percentage, appraised_salary)
