# services/document_store.py
"""
Collection/document access used by the review core.

`MongoDocumentStore` is the only production implementation; tests swap in
an in-memory one through the same interface.
"""

import logging
from typing import Dict, List, Optional, Tuple

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import PyMongoError

from utils.errors import StoreError

logger = logging.getLogger(__name__)

ASC = "asc"
DESC = "desc"
SORT_DIRECTIONS = {ASC: ASCENDING, DESC: DESCENDING}


class DocumentStore:
    """Documents keyed by (collection, id)."""

    def get(self, collection: str, doc_id: str) -> Optional[Dict]:
        raise NotImplementedError

    def set(self, collection: str, doc_id: str, document: Dict) -> None:
        """Full overwrite; creates the document if it does not exist."""
        raise NotImplementedError

    def update(self, collection: str, doc_id: str, fields: Dict) -> None:
        """Merge `fields` into an existing document."""
        raise NotImplementedError

    def query(
        self,
        collection: str,
        filters: Dict,
        order_by: Optional[Tuple[str, str]] = None,
        limit: Optional[int] = None,
    ) -> List[Dict]:
        """Equality predicates only. `order_by` is (field, "asc" | "desc")."""
        raise NotImplementedError

    def new_id(self, collection: str) -> str:
        raise NotImplementedError


class MongoDocumentStore(DocumentStore):

    def __init__(self, db):
        self.db = db

    def get(self, collection, doc_id):
        try:
            return self.db[collection].find_one({"_id": doc_id})
        except PyMongoError as e:
            raise StoreError(str(e), operation="get") from e

    def set(self, collection, doc_id, document):
        doc = dict(document)
        doc["_id"] = doc_id
        try:
            self.db[collection].replace_one({"_id": doc_id}, doc, upsert=True)
        except PyMongoError as e:
            raise StoreError(str(e), operation="set") from e
        logger.debug(f"set {collection}/{doc_id}")

    def update(self, collection, doc_id, fields):
        try:
            result = self.db[collection].update_one({"_id": doc_id}, {"$set": dict(fields)})
        except PyMongoError as e:
            raise StoreError(str(e), operation="update") from e
        if result.matched_count == 0:
            raise StoreError(f"{collection}/{doc_id} not found", operation="update")
        logger.debug(f"update {collection}/{doc_id}: {sorted(fields)}")

    def query(self, collection, filters, order_by=None, limit=None):
        try:
            cursor = self.db[collection].find(dict(filters))
            if order_by is not None:
                field, direction = order_by
                if direction not in SORT_DIRECTIONS:
                    raise ValueError(f"Unknown sort direction: {direction!r}")
                cursor = cursor.sort(field, SORT_DIRECTIONS[direction])
            if limit is not None:
                cursor = cursor.limit(limit)
            return list(cursor)
        except PyMongoError as e:
            raise StoreError(str(e), operation="query") from e

    def new_id(self, collection):
        return str(ObjectId())

