# models/doctor.py
from pydantic import BaseModel
from typing import Optional


class DoctorCreate(BaseModel):
    name: str                   # Doctor's display name (required)
    specialty: str              # e.g. dentist, cardiologist, general
    description: Optional[str] = None
    hospital: Optional[str] = None
    phone: Optional[str] = None


class DoctorAggregate(BaseModel):
    rating: str = "0.0"         # one fractional digit, e.g. "4.3"
    reviews_count: int = 0


class DoctorOut(DoctorCreate):
    id: str
    rating: str = "0.0"
    reviews_count: int = 0
