"""
Validation gate for band and review references.

Every employee or appraisal write that carries band/review fields goes
through here first, so a bad reference is rejected before anything is
computed or written.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.orm import Session

from appraisal_api.core.exceptions import BadRequestError
from appraisal_api.models.band import Band
from appraisal_api.models.review import Review

logger = logging.getLogger(__name__)

INVALID_BAND = "Invalid band ID"
INVALID_REVIEW = "Invalid review ID"


@dataclass(frozen=True)
class ValidationResult:
    reason: Optional[str] = None
    band: Optional[Band] = None
    review: Optional[Review] = None

    @property
    def valid(self) -> bool:
        return self.reason is None


def validate(db: Session, band_id: str, review_id: int) -> ValidationResult:
    """Resolve both references. The band is checked first and the first failure wins."""
    band = db.query(Band).filter(Band.band_id == band_id).first()
    if band is None:
        return ValidationResult(reason=INVALID_BAND)

    review = db.query(Review).filter(Review.rev_id == review_id).first()
    if review is None:
        return ValidationResult(reason=INVALID_REVIEW)

    return ValidationResult(band=band, review=review)


def ensure_valid(db: Session, band_id: str, review_id: int) -> ValidationResult:
    result = validate(db, band_id, review_id)
    if not result.valid:
        logger.warning(
            f"Rejected band/review reference: {result.reason}",
            extra={"band_id": band_id, "review_id": review_id},
        )
        raise BadRequestError(result.reason, details={"band": band_id, "review": review_id})
    return result
