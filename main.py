# main.py
import logging

from fastapi import FastAPI
from routes import review, doctor
from database import client
from config import LOG_LEVEL, LOG_FORMAT, HOST, PORT
import uvicorn

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

app = FastAPI(title="Appointment Booking Reviews API")

app.include_router(review.router, prefix="/api/reviews")
app.include_router(doctor.router, prefix="/api/doctors")

@app.get("/")
async def root():
    return {"service": app.title, "status": "ok"}

@app.on_event("shutdown")
def shutdown_db_client():
    client.close()

if __name__ == "__main__":
    uvicorn.run("main:app", host=HOST, port=PORT, reload=True)
