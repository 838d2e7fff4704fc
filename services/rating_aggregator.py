# services/rating_aggregator.py
"""
Doctor rating aggregation.

Every submission re-reads the doctor's full review set and overwrites the
doctor's `rating` / `reviews_count`; nothing is updated incrementally.
There is no locking between the review write and the recompute: two
concurrent submissions for the same doctor may land their aggregates in
either order.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from models.doctor import DoctorAggregate
from models.review import Review
from services.review_store import ReviewStore
from utils.errors import ValidationError

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 5
EMPTY_RATING = "0.0"


def format_rating(ratings: Iterable[float]) -> str:
    """Arithmetic mean to one fractional digit, halves rounded up. "0.0" when empty."""
    values = [Decimal(str(r)) for r in ratings]
    if not values:
        return EMPTY_RATING
    mean = sum(values, Decimal(0)) / len(values)
    return str(mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def validate_review(review: Review) -> None:
    if not review.doctor_id.strip():
        raise ValidationError("doctor_id is required")
    if not review.patient_id.strip():
        raise ValidationError("patient_id is required")
    if not (MIN_RATING <= review.rating <= MAX_RATING):
        raise ValidationError(f"Invalid rating: {review.rating}. Must be {MIN_RATING}-{MAX_RATING}")


class RatingAggregator:

    def __init__(self, reviews: ReviewStore):
        self.reviews = reviews

    def submit_review(self, review: Review) -> str:
        """
        Store a patient's review, then refresh the doctor's aggregate.

        A review without an id reuses the id of the patient's existing review
        for the same doctor, so resubmitting never creates a duplicate.

        If the recompute fails the review stays written and the StoreError
        propagates; the doctor's displayed rating is then stale until the
        next successful recompute.

        Returns:
            The review identifier.

        Raises:
            ValidationError: bad rating or missing doctor / patient id.
            StoreError: the lookup, the write or the recompute failed.
        """
        validate_review(review)

        if not review.review_id:
            existing = self.reviews.fetch_review_by_patient(review.doctor_id, review.patient_id).unwrap()
            if existing is not None:
                logger.debug(f"Reusing review {existing.review_id} for patient {review.patient_id}")
                review = review.model_copy(update={"review_id": existing.review_id})

        review_id = self.reviews.upsert_review(review)
        self.recompute_aggregate(review.doctor_id)
        return review_id

    def recompute_aggregate(self, doctor_id: str) -> DoctorAggregate:
        """Average every review of `doctor_id` and write rating + count back."""
        reviews = self.reviews.fetch_reviews_for_doctor(doctor_id).unwrap()

        aggregate = DoctorAggregate(
            rating=format_rating(r.rating for r in reviews),
            reviews_count=len(reviews),
        )
        self.reviews.write_doctor_aggregate(doctor_id, aggregate.rating, aggregate.reviews_count)

        logger.info(f"Doctor {doctor_id} rating updated: {aggregate.rating} ({aggregate.reviews_count} reviews)")
        return aggregate
