"""
Database module - MongoDB connection and the in-memory stand-in.
"""
from career_code.db.mongodb import COLLECTIONS, get_mongo_db, test_mongo_connection
from career_code.db.memory import InMemoryCollection, InMemoryDatabase

__all__ = [
    "COLLECTIONS",
    "get_mongo_db",
    "test_mongo_connection",
    "InMemoryCollection",
    "InMemoryDatabase",
]
