"""
Appraisal snapshot model.

An appraisal copies the employee fields it was computed from (name, review,
band, salary) instead of referencing the live employee row. There is no
foreign key to ``employee`` and nothing refreshes the row when band or review
multipliers change afterwards; only an explicit update recomputes it.
"""
from sqlalchemy import Column, Integer, String, Float
from appraisal_api.database import Base


class Appraisal(Base):
    __tablename__ = "appraisal"

    # Primary key doubles as the "one appraisal per employee" constraint
    emp_id = Column(Integer, primary_key=True, autoincrement=False)
    emp_name = Column(String, nullable=False)
    emp_review = Column(Integer, nullable=False)
    emp_band = Column(String, nullable=False)
    current_salary = Column(Float, nullable=False)
    appraisal_percentage = Column(Float, nullable=False)
    appraised_salary = Column(Float, nullable=False)

    def __repr__(self):
        return f"<Appraisal {self.emp_id}: {self.current_salary} -> {self.appraised_salary}>"
