import pytest
from appraisal_api.services.calculator import compute

def test_reference_scenario():
    """Band 0.10 x review 0.05 on 100000 gives 0.5% and 100500."""
    result = compute(100000, 0.10, 0.05)
    assert result.appraisal_percentage == pytest.approx(0.005)
    assert result.appraised_salary == pytest.approx(100500)

@pytest.mark.parametrize("salary, band_mul, rev_mul", [
    (0, 0.10, 0.05),
    (1, 1.0, 1.0),
    (52000.5, 0.15, 0.25),
    (250000, 0.2, 0.5),
])
def test_increase_is_salary_times_both_multipliers(salary, band_mul, rev_mul):
    percentage, appraised = compute(salary, band_mul, rev_mul)
    assert percentage == pytest.approx(band_mul * rev_mul)
    assert appraised == pytest.approx(salary * (1 + band_mul * rev_mul))
    assert appraised - salary == pytest.approx(salary * band_mul * rev_mul)

def test_zero_salary_stays_zero():
    assert compute(0, 0.3, 0.3).appraised_salary == 0

def test_percentage_is_not_clamped():
    assert compute(1000, 2.0, 3.0).appraisal_percentage == pytest.approx(6.0)
