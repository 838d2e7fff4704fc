# routes/review.py

from fastapi import APIRouter, HTTPException, Depends
from models.review import Review, ReviewCreate, ReviewOut
from models.doctor import DoctorAggregate
from database import get_document_store
from services.review_store import ReviewStore
from services.rating_aggregator import RatingAggregator
from utils.auth import CurrentUser, get_current_user, get_current_user_admin
from utils.errors import StoreError, ValidationError
from typing import List

router = APIRouter()


def get_review_store(store=Depends(get_document_store)):
    return ReviewStore(store)


def get_rating_aggregator(reviews: ReviewStore = Depends(get_review_store)):
    return RatingAggregator(reviews)


# === SUBMIT / UPDATE REVIEW (patient) ===
@router.post("/", response_model=ReviewOut)
async def submit_review(
    review_in: ReviewCreate,
    current_user: CurrentUser = Depends(get_current_user),
    aggregator: RatingAggregator = Depends(get_rating_aggregator)
):
    review = Review(
        doctor_id=review_in.doctor_id,
        patient_id=current_user.id,
        patient_name=current_user.name,
        rating=review_in.rating,
        comment=review_in.comment or ""
    )
    try:
        review_id = aggregator.submit_review(review)
    except ValidationError as e:
        raise HTTPException(400, str(e))
    except StoreError as e:
        raise HTTPException(503, f"Review submission failed: {e}")

    # Both steps succeeded; a failed reload only costs the stored timestamp
    saved = aggregator.reviews.fetch_review(review_id).unwrap_or(None)
    if saved is None:
        saved = review.model_copy(update={"review_id": review_id})
    return ReviewOut.from_review(saved)


# === GET REVIEWS BY DOCTOR (public, newest first) ===
@router.get("/doctor/{doctor_id}", response_model=List[ReviewOut])
async def get_doctor_reviews(doctor_id: str, reviews: ReviewStore = Depends(get_review_store)):
    return [ReviewOut.from_review(r) for r in reviews.list_reviews_for_doctor(doctor_id)]


# === GET MY REVIEW FOR A DOCTOR ===
@router.get("/doctor/{doctor_id}/me", response_model=ReviewOut)
async def get_my_review(
    doctor_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    reviews: ReviewStore = Depends(get_review_store)
):
    review = reviews.find_review_by_patient(doctor_id, current_user.id)
    if not review:
        raise HTTPException(404, "Review not found")
    return ReviewOut.from_review(review)


# === RECOMPUTE DOCTOR RATING (admin only) ===
@router.post("/doctor/{doctor_id}/recompute", response_model=DoctorAggregate)
async def recompute_doctor_rating(
    doctor_id: str,
    current_admin=Depends(get_current_user_admin),
    aggregator: RatingAggregator = Depends(get_rating_aggregator)
):
    try:
        return aggregator.recompute_aggregate(doctor_id)
    except StoreError as e:
        raise HTTPException(503, f"Rating update failed: {e}")
