from sqlalchemy import Column, Integer, String, Float
from appraisal_api.database import Base


class Employee(Base):
    __tablename__ = "employee"

    emp_id = Column(Integer, primary_key=True, autoincrement=False)
    emp_name = Column(String, nullable=False)
    # Attribute names follow the API payload; column names follow the table
    review = Column("emp_review", Integer, nullable=False)
    band = Column("emp_band", String, nullable=False)
    salary = Column("emp_salary", Float, nullable=False)

    def __repr__(self):
        return f"<Employee {self.emp_id}: {self.emp_name}>"
