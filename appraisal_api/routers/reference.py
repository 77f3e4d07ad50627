"""
Reference Data Router

Read-only band and review endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.orm import Session

from appraisal_api.core.exceptions import NotFoundError
from appraisal_api.database import get_db
from appraisal_api.schemas.base import MAX_ID
from appraisal_api.schemas.reference import BandResponse, ReviewResponse
from appraisal_api.services.reference_service import ReferenceService

router = APIRouter()


@router.get("/review", response_model=List[ReviewResponse], tags=["Reviews"])
def get_all_reviews(db: Session = Depends(get_db)):
    """List every review rating. 204 when the table is empty."""
    reviews = ReferenceService(db).list_reviews()
    if not reviews:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return reviews


@router.get("/review/{rev_id}", response_model=ReviewResponse, tags=["Reviews"])
def get_review(rev_id: int = Path(..., ge=0, le=MAX_ID), db: Session = Depends(get_db)):
    review = ReferenceService(db).get_review(rev_id)
    if review is None:
        raise NotFoundError("Review not found")
    return review


@router.get("/band", response_model=List[BandResponse], tags=["Bands"])
def get_all_bands(db: Session = Depends(get_db)):
    """List every salary band. 204 when the table is empty."""
    bands = ReferenceService(db).list_bands()
    if not bands:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return bands


@router.get("/band/{band_id}", response_model=BandResponse, tags=["Bands"])
def get_band(band_id: str, db: Session = Depends(get_db)):
    band = ReferenceService(db).get_band(band_id)
    if band is None:
        raise NotFoundError("Band not found")
    return band
