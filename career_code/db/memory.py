"""
In-memory stand-in for the MongoDB collections.

Implements only the slice of the pymongo Collection interface the
services call: find, find_one, insert_one, update_one and
count_documents, with plain equality filters and $set updates.
Used for development (USE_IN_MEMORY_STORE=true) and tests.
"""

import copy
import threading
from typing import Any, Dict, Iterator, List, Optional

from bson import ObjectId
from pymongo.results import InsertOneResult, UpdateResult


def _matches(doc: dict, query: Optional[dict]) -> bool:
    if not query:
        return True
    return all(doc.get(key) == value for key, value in query.items())


class InMemoryCollection:
    """A list of documents behind a lock."""

    def __init__(self, name: str):
        self.name = name
        self._docs: List[dict] = []
        self._lock = threading.Lock()

    def find(self, query: Optional[dict] = None) -> Iterator[dict]:
        with self._lock:
            found = [copy.deepcopy(doc) for doc in self._docs if _matches(doc, query)]
        return iter(found)

    def find_one(self, query: Optional[dict] = None) -> Optional[dict]:
        return next(self.find(query), None)

    def insert_one(self, document: dict) -> InsertOneResult:
        # pymongo also writes the generated _id back into the caller's dict
        if "_id" not in document:
            document["_id"] = ObjectId()
        with self._lock:
            self._docs.append(copy.deepcopy(document))
        return InsertOneResult(document["_id"], True)

    def update_one(self, query: dict, update: Dict[str, Any]) -> UpdateResult:
        unsupported = set(update) - {"$set"}
        if unsupported:
            raise ValueError(f"Unsupported update operators: {sorted(unsupported)}")

        changes = update.get("$set", {})
        matched = modified = 0
        with self._lock:
            for doc in self._docs:
                if not _matches(doc, query):
                    continue
                matched = 1
                if any(doc.get(key, object()) != value for key, value in changes.items()):
                    doc.update(copy.deepcopy(changes))
                    modified = 1
                break

        raw_result = {"n": matched, "nModified": modified, "ok": 1.0, "updatedExisting": bool(matched)}
        return UpdateResult(raw_result, True)

    def count_documents(self, query: Optional[dict] = None) -> int:
        with self._lock:
            return sum(1 for doc in self._docs if _matches(doc, query))


class InMemoryDatabase:
    """Hands out InMemoryCollection instances by name, like a pymongo Database."""

    def __init__(self):
        self._collections: Dict[str, InMemoryCollection] = {}

    def __getitem__(self, name: str) -> InMemoryCollection:
        if name not in self._collections:
            self._collections[name] = InMemoryCollection(name)
        return self._collections[name]

    def reset(self) -> None:
        self._collections.clear()
