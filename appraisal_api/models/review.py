from sqlalchemy import Column, Integer, Float
from appraisal_api.database import Base


class Review(Base):
    """Performance rating reference data. Read-only to the application."""
    __tablename__ = "review"

    rev_id = Column(Integer, primary_key=True, autoincrement=False)
    rev_mul = Column(Float, nullable=False)

    def __repr__(self):
        return f"<Review {self.rev_id}: {self.rev_mul}>"
