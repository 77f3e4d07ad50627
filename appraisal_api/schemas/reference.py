from appraisal_api.schemas.base import CamelModel


class BandResponse(CamelModel):
    band_id: str
    band_mul: float


class ReviewResponse(CamelModel):
    rev_id: int
    rev_mul: float
