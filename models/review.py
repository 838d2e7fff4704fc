# models/review.py
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime, timezone


class Review(BaseModel):
    review_id: str = ""          # "" until the first upsert assigns one
    doctor_id: str
    patient_id: str
    patient_name: str = "Anonymous"
    rating: float                # 1-5, checked by RatingAggregator
    comment: str = ""
    timestamp: Optional[datetime] = None

    @classmethod
    def from_document(cls, doc: dict) -> "Review":
        data = {k: v for k, v in doc.items() if k != "_id"}
        data["review_id"] = str(doc.get("_id", data.get("review_id", "")))
        # Mongo hands back naive UTC unless the client is tz_aware
        timestamp = data.get("timestamp")
        if isinstance(timestamp, datetime) and timestamp.tzinfo is None:
            data["timestamp"] = timestamp.replace(tzinfo=timezone.utc)
        return cls(**data)

    def to_document(self) -> dict:
        return self.model_dump()


class ReviewCreate(BaseModel):
    doctor_id: str
    rating: float = Field(..., ge=1, le=5)
    comment: Optional[str] = ""


class ReviewOut(BaseModel):
    id: str
    doctor_id: str
    patient_id: str
    patient_name: str
    rating: float
    comment: str = ""
    timestamp: Optional[datetime] = None

    @classmethod
    def from_review(cls, review: Review) -> "ReviewOut":
        return cls(
            id=review.review_id,
            doctor_id=review.doctor_id,
            patient_id=review.patient_id,
            patient_name=review.patient_name,
            rating=review.rating,
            comment=review.comment,
            timestamp=review.timestamp,
        )
