from typing import List

from fastapi import APIRouter, Depends, Query

from ...schemas.resume import ErrorResponse, ResumeReview, ResumeReviewCreate
from ...services.review_store import ReviewStore, get_review_store

router = APIRouter(prefix="/resume-reviews", tags=["Resume reviews"])


@router.post(
    "",
    response_model=ResumeReview,
    status_code=201,
    responses={503: {"model": ErrorResponse}},
)
def save_review(
    payload: ResumeReviewCreate,
    store: ReviewStore = Depends(get_review_store),
):
    return store.save(payload)


@router.get("", response_model=List[ResumeReview])
def list_reviews(
    limit: int = Query(20, ge=1, le=100),
    store: ReviewStore = Depends(get_review_store),
):
    return store.list_recent(limit)


@router.get(
    "/{review_id}",
    response_model=ResumeReview,
    responses={404: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
)
def get_review(review_id: str, store: ReviewStore = Depends(get_review_store)):
    return store.get(review_id)
