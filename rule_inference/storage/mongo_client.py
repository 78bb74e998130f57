# ==============================================
# MongoClient
# ==============================================
#
# PURPOSE:
#   Manages the MongoDB connection and answers the same read-only
#   queries as MySQLClient, one collection per model and one
#   document key per field.
#
# CLASS: MongoClient
# ------------------
#   Stateful - holds connection to MongoDB.
#
#   Constructor:
#   ------------
#   - __init__(host, port, database, user=None, password=None)
#
#   Methods:
#   --------
#   - connect() -> None / disconnect() -> None / ping() -> None
#   - count_nulls(collection, key) -> int
#       Missing keys count as null, matching {key: None} semantics.
#   - fetch_values(collection, key, limit, distinct=False) -> list
#   - min_max(collection, key) -> (min, max)
#       $group with $min / $max; nulls are ignored by the operators.
#   - distinct_values(collection, key) -> list
#
#   All driver errors are re-raised as DataStoreError.
#
#   Context Manager:
#   ----------------
#   - __enter__ / __exit__ for `with MongoClient(...) as db:` usage.
#
# ==============================================

from typing import Any, List, Tuple

from pymongo import MongoClient as PyMongoClient
from pymongo.errors import PyMongoError

from .errors import DataStoreError


class MongoClient:
    def __init__(self, host, port, database, user=None, password=None):
        # Store connection params. Don't connect yet.
        self.host = host
        self.port = port
        self.database = database
        self.user = user
        self.password = password
        self.client = None  # Will hold the actual MongoDB client connection

    def connect(self):
        # Establish connection to MongoDB.
        if self.user and self.password:
            uri = f"mongodb://{self.user}:{self.password}@{self.host}:{self.port}/{self.database}"
        else:
            uri = f"mongodb://{self.host}:{self.port}/{self.database}"
        try:
            self.client = PyMongoClient(uri)
            # Test connection
            self.client.admin.command('ping')
        except PyMongoError as e:
            self.client = None
            raise DataStoreError(
                f"Could not connect to MongoDB at {self.host}:{self.port}: {e}"
            ) from e

    def disconnect(self):
        # Close connection.
        if self.client:
            self.client.close()
            self.client = None

    def ping(self) -> None:
        if not self.client:
            raise DataStoreError("Not connected to MongoDB")
        try:
            self.client.admin.command('ping')
        except PyMongoError as e:
            raise DataStoreError(f"MongoDB ping failed: {e}") from e

    def count_nulls(self, collection_name: str, key: str) -> int:
        collection = self._collection(collection_name)
        try:
            return collection.count_documents({key: None})
        except PyMongoError as e:
            raise DataStoreError(f"MongoDB null count failed: {e}") from e

    def fetch_values(self, collection_name: str, key: str, limit: int, distinct: bool = False) -> List[Any]:
        collection = self._collection(collection_name)
        try:
            if distinct:
                pipeline = [
                    {"$match": {key: {"$ne": None}}},
                    {"$group": {"_id": f"${key}"}},
                    {"$limit": limit},
                ]
                return [doc["_id"] for doc in collection.aggregate(pipeline)]
            cursor = collection.find(
                {key: {"$ne": None}},
                {key: 1, "_id": 0}
            ).limit(limit)
            return [self._extract(doc, key) for doc in cursor]
        except PyMongoError as e:
            raise DataStoreError(f"MongoDB sample fetch failed: {e}") from e

    def min_max(self, collection_name: str, key: str) -> Tuple[Any, Any]:
        collection = self._collection(collection_name)
        pipeline = [
            {"$group": {"_id": None, "min_value": {"$min": f"${key}"}, "max_value": {"$max": f"${key}"}}}
        ]
        try:
            results = list(collection.aggregate(pipeline))
        except PyMongoError as e:
            raise DataStoreError(f"MongoDB min/max aggregate failed: {e}") from e
        if not results:
            return None, None
        return results[0].get("min_value"), results[0].get("max_value")

    def distinct_values(self, collection_name: str, key: str) -> List[Any]:
        collection = self._collection(collection_name)
        try:
            return list(collection.distinct(key, {key: {"$ne": None}}))
        except PyMongoError as e:
            raise DataStoreError(f"MongoDB distinct query failed: {e}") from e

    def _collection(self, collection_name: str):
        if not self.client:
            raise DataStoreError("Not connected to MongoDB")
        return self.client[self.database][collection_name]

    @staticmethod
    def _extract(document: dict, key: str) -> Any:
        # Dotted keys address nested documents
        value: Any = document
        for part in key.split("."):
            if not isinstance(value, dict):
                return None
            value = value.get(part)
        return value

    def __enter__(self):
        # For `with MongoClient(...) as db:` usage.
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.disconnect()
