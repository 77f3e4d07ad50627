import logging
from typing import Dict, Optional

from sqlalchemy.orm import Session

from appraisal_api.models.band import Band
from appraisal_api.models.review import Review

logger = logging.getLogger(__name__)

DEFAULT_BANDS: Dict[str, float] = {
    "A1": 0.05,
    "B1": 0.10,
    "C1": 0.15,
    "D1": 0.20,
}

DEFAULT_REVIEWS: Dict[int, float] = {
    1: 0.05,
    2: 0.10,
    3: 0.15,
    4: 0.20,
    5: 0.25,
}


def seed_reference_data(
    db: Session,
    bands: Optional[Dict[str, float]] = None,
    reviews: Optional[Dict[int, float]] = None,
) -> Dict[str, int]:
    """
    Insert band and review rows that are not present yet.
    Existing rows are left alone, so the multipliers already in use never change.
    """
    bands = DEFAULT_BANDS if bands is None else bands
    reviews = DEFAULT_REVIEWS if reviews is None else reviews
    created = {"bands": 0, "reviews": 0}

    try:
        for band_id, band_mul in bands.items():
            if db.get(Band, band_id) is None:
                db.add(Band(band_id=band_id, band_mul=band_mul))
                created["bands"] += 1

        for rev_id, rev_mul in reviews.items():
            if db.get(Review, rev_id) is None:
                db.add(Review(rev_id=rev_id, rev_mul=rev_mul))
                created["reviews"] += 1

        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Error while seeding reference data: {str(e)}", exc_info=True)
        raise

    logger.info(
        f"✓ Reference data seeded: {created['bands']} band(s), {created['reviews']} review(s) added",
        extra=created,
    )
    return created
