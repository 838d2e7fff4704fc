# database.py
from pymongo import MongoClient
from config import MONGODB_URI, MONGODB_DB
from services.document_store import MongoDocumentStore

client = MongoClient(MONGODB_URI, tz_aware=True)
db = client[MONGODB_DB]

document_store = MongoDocumentStore(db)


def get_document_store():
    return document_store
