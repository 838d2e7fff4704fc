# services/review_store.py
"""
Typed access to review documents and the doctor aggregate fields.

Write operations propagate StoreError. The two plain read operations
(`list_reviews_for_doctor`, `find_review_by_patient`) log failures and
degrade to an empty / None result; callers that must tell "no data" apart
from "query failed" use the `fetch_*` variants, which return a Result.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional

from config import DOCTORS_COLLECTION, REVIEWS_COLLECTION
from models.review import Review
from services.document_store import DESC, DocumentStore
from utils.errors import StoreError
from utils.result import Result

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ReviewStore:

    def __init__(
        self,
        store: DocumentStore,
        clock: Callable[[], datetime] = utc_now,
        reviews_collection: str = REVIEWS_COLLECTION,
        doctors_collection: str = DOCTORS_COLLECTION,
    ):
        self.store = store
        self.clock = clock
        self.reviews_collection = reviews_collection
        self.doctors_collection = doctors_collection

    # === WRITE ===

    def upsert_review(self, review: Review) -> str:
        """
        Insert or overwrite a review in a single write.

        An empty `review_id` gets a freshly generated identifier; otherwise
        the supplied one is reused. `timestamp` is always set to now.

        Returns:
            The identifier the review was stored under.
        """
        review_id = review.review_id or self.store.new_id(self.reviews_collection)
        stored = review.model_copy(update={"review_id": review_id, "timestamp": self.clock()})

        try:
            self.store.set(self.reviews_collection, review_id, stored.to_document())
        except StoreError as e:
            logger.error(f"upsert_review {review_id}: {e}")
            raise

        logger.info(f"Review submitted successfully: {review_id}")
        return review_id

    def write_doctor_aggregate(self, doctor_id: str, rating: str, count: int) -> None:
        """Update only `rating` and `reviews_count` on the doctor document."""
        try:
            self.store.update(
                self.doctors_collection,
                doctor_id,
                {"rating": rating, "reviews_count": count},
            )
        except StoreError as e:
            logger.error(f"write_doctor_aggregate {doctor_id}: {e}")
            raise

    # === READ (honest) ===

    def fetch_review(self, review_id: str) -> Result[Optional[Review]]:
        try:
            doc = self.store.get(self.reviews_collection, review_id)
        except StoreError as e:
            return Result.failure(e)
        return Result.success(Review.from_document(doc) if doc else None)

    def fetch_reviews_for_doctor(self, doctor_id: str) -> Result[List[Review]]:
        try:
            docs = self.store.query(
                self.reviews_collection,
                {"doctor_id": doctor_id},
                order_by=("timestamp", DESC),
            )
        except StoreError as e:
            return Result.failure(e)
        return Result.success([Review.from_document(d) for d in docs])

    def fetch_review_by_patient(self, doctor_id: str, patient_id: str) -> Result[Optional[Review]]:
        try:
            docs = self.store.query(
                self.reviews_collection,
                {"doctor_id": doctor_id, "patient_id": patient_id},
                limit=1,
            )
        except StoreError as e:
            return Result.failure(e)
        return Result.success(Review.from_document(docs[0]) if docs else None)

    # === READ (degrading) ===

    def list_reviews_for_doctor(self, doctor_id: str) -> List[Review]:
        """All reviews for `doctor_id`, newest first. [] on failure."""
        return self.fetch_reviews_for_doctor(doctor_id).unwrap_or([])

    def find_review_by_patient(self, doctor_id: str, patient_id: str) -> Optional[Review]:
        """The patient's review of this doctor, or None (also on failure)."""
        return self.fetch_review_by_patient(doctor_id, patient_id).unwrap_or(None)
