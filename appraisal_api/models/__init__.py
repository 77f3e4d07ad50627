# Models package
# Importing modules here ensures they are registered with SQLAlchemy Base
from . import band, review, employee, appraisal

# Explicit class exports for cleaner imports
from .band import Band
from .review import Review
from .employee import Employee
from .appraisal import Appraisal

__all__ = [
    "Band",
    "Review",
    "Employee",
    "Appraisal",
]
