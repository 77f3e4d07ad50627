from typing import List, Optional

from appraisal_api.models.band import Band
from appraisal_api.models.review import Review
from appraisal_api.schemas.reference import BandResponse, ReviewResponse
from appraisal_api.services.base import BaseService


class ReferenceService(BaseService):
    """Read-only access to band and review reference data."""

    def list_bands(self) -> List[BandResponse]:
        with self._storage("fetching all bands"):
            rows = self.db.query(Band).order_by(Band.band_id).all()
        return [BandResponse.model_validate(row) for row in rows]

    def get_band(self, band_id: str) -> Optional[BandResponse]:
        with self._storage("fetching band"):
            row = self.db.query(Band).filter(Band.band_id == band_id).first()
        return BandResponse.model_validate(row) if row else None

    def list_reviews(self) -> List[ReviewResponse]:
        with self._storage("fetching all reviews"):
            rows = self.db.query(Review).order_by(Review.rev_id).all()
        return [ReviewResponse.model_validate(row) for row in rows]

    def get_review(self, rev_id: int) -> Optional[ReviewResponse]:
        with self._storage("fetching review"):
            row = self.db.query(Review).filter(Review.rev_id == rev_id).first()
        return ReviewResponse.model_validate(row) if row else None
