# config.py
from dotenv import load_dotenv
import os

load_dotenv()

MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
MONGODB_DB = os.getenv("MONGODB_DB", "appointment_booking")

# Collections
REVIEWS_COLLECTION = os.getenv("REVIEWS_COLLECTION", "reviews")
DOCTORS_COLLECTION = os.getenv("DOCTORS_COLLECTION", "doctors")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8000"))
