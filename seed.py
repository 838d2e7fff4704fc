# seed.py → wipes doctors + reviews and loads demo data

from database import db, document_store
from config import DOCTORS_COLLECTION, REVIEWS_COLLECTION
from models.review import Review
from services.review_store import ReviewStore
from services.rating_aggregator import RatingAggregator
import random

# === DELETE ALL OLD DATA ===
db[DOCTORS_COLLECTION].delete_many({})
db[REVIEWS_COLLECTION].delete_many({})

print("All old data deleted!\n")

# ================== 1. DOCTORS ==================
doctor_docs = [
    {"name": "Dr. Amelia Hart",   "specialty": "cardiologist", "hospital": "City General",  "phone": "021-888888"},
    {"name": "Dr. Rafi Pratama",  "specialty": "dentist",      "hospital": "Smile Clinic",  "phone": "021-777777"},
    {"name": "Dr. Sara Lindqvist", "specialty": "pediatrician", "hospital": "City General",  "phone": "021-666666"},
    {"name": "Dr. Kenji Mori",    "specialty": "dermatologist", "hospital": "Skin Care Centre", "phone": "021-555555"}
]

doctor_map = {}
for doc in doctor_docs:
    doctor_id = document_store.new_id(DOCTORS_COLLECTION)
    document_store.set(DOCTORS_COLLECTION, doctor_id, {**doc, "rating": "0.0", "reviews_count": 0})
    doctor_map[doc["name"]] = doctor_id

print(f"{len(doctor_map)} doctors created:")
for name in doctor_map:
    print(f"  → {name}: {doctor_map[name]}")

# ================== 2. REVIEWS ==================
patients = [
    ("patient-budi", "Budi Santoso"),
    ("patient-siti", "Siti Nurhaliza"),
    ("patient-ana", "Ana Souza"),
    ("patient-tom", "Tom Becker")
]
comments = [
    "Very thorough and kind.",
    "Waited a long time but the consultation was good.",
    "Explained everything clearly.",
    "",
    "Would book again."
]

aggregator = RatingAggregator(ReviewStore(document_store))

total = 0
for name, doctor_id in doctor_map.items():
    # The last doctor stays without reviews
    if name == doctor_docs[-1]["name"]:
        continue
    for patient_id, patient_name in random.sample(patients, random.randint(1, len(patients))):
        aggregator.submit_review(Review(
            doctor_id=doctor_id,
            patient_id=patient_id,
            patient_name=patient_name,
            rating=random.randint(3, 5),
            comment=random.choice(comments)
        ))
        total += 1

print(f"\n{total} reviews created")

# ================== 3. SUMMARY ==================
for name, doctor_id in doctor_map.items():
    doctor = document_store.get(DOCTORS_COLLECTION, doctor_id)
    print(f"  → {name}: rating {doctor['rating']} ({doctor['reviews_count']} reviews)")

print("\nSeed finished!")
