from sqlalchemy import Column, String, Float
from appraisal_api.database import Base


class Band(Base):
    """Salary tier reference data. Seeded outside the API, never written by it."""
    __tablename__ = "band"

    band_id = Column(String, primary_key=True)
    band_mul = Column(Float, nullable=False)

    def __repr__(self):
        return f"<Band {self.band_id}: {self.band_mul}>"
