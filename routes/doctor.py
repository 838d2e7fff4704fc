# routes/doctor.py

from fastapi import APIRouter, HTTPException, Depends
from models.doctor import DoctorCreate, DoctorOut
from database import get_document_store
from config import DOCTORS_COLLECTION
from services.document_store import ASC
from utils.auth import get_current_user_admin
from utils.errors import StoreError
from typing import List

router = APIRouter()


def to_doctor_out(doc: dict) -> DoctorOut:
    data = {k: v for k, v in doc.items() if k != "_id"}
    return DoctorOut(id=str(doc["_id"]), **data)


# === CREATE Doctor (ADMIN ONLY) ===
@router.post("/", response_model=DoctorOut)
async def create_doctor(
    doctor_in: DoctorCreate,
    current_admin=Depends(get_current_user_admin),
    store=Depends(get_document_store)
):
    doctor_id = store.new_id(DOCTORS_COLLECTION)
    doc = doctor_in.model_dump()
    # Fresh doctors start with the empty aggregate
    doc["rating"] = "0.0"
    doc["reviews_count"] = 0
    try:
        store.set(DOCTORS_COLLECTION, doctor_id, doc)
    except StoreError as e:
        raise HTTPException(503, f"Could not create doctor: {e}")

    return DoctorOut(id=doctor_id, **doc)


# === GET All Doctors (public) ===
@router.get("/", response_model=List[DoctorOut])
async def get_doctors(store=Depends(get_document_store)):
    try:
        docs = store.query(DOCTORS_COLLECTION, {}, order_by=("name", ASC))
    except StoreError as e:
        raise HTTPException(503, f"Could not load doctors: {e}")
    return [to_doctor_out(d) for d in docs]


# === GET Doctor by ID (public) ===
@router.get("/{doctor_id}", response_model=DoctorOut)
async def get_doctor(doctor_id: str, store=Depends(get_document_store)):
    try:
        doc = store.get(DOCTORS_COLLECTION, doctor_id)
    except StoreError as e:
        raise HTTPException(503, f"Could not load doctor: {e}")
    if not doc:
        raise HTTPException(404, "Doctor not found")
    return to_doctor_out(doc)
