"""
Dependency wiring for the FastAPI app.
"""

from fastapi import Depends

from career_code.core.config import get_settings
from career_code.db.memory import InMemoryDatabase
from career_code.db.mongodb import COLLECTIONS, get_mongo_db
from career_code.services.mongo_service import ApplicationService, JobService

_in_memory_db: InMemoryDatabase = None


def get_in_memory_db() -> InMemoryDatabase:
    """Shared in-memory database so documents persist across requests."""
    global _in_memory_db
    if _in_memory_db is None:
        _in_memory_db = InMemoryDatabase()
    return _in_memory_db


def get_database():
    """The Mongo database, or the in-memory one when USE_IN_MEMORY_STORE is set."""
    if get_settings().use_in_memory_store:
        return get_in_memory_db()
    return get_mongo_db()


def get_job_service(db=Depends(get_database)) -> JobService:
    return JobService(db[COLLECTIONS["jobs"]], db[COLLECTIONS["applications"]])


def get_application_service(db=Depends(get_database)) -> ApplicationService:
    return ApplicationService(db[COLLECTIONS["applications"]], db[COLLECTIONS["jobs"]])
