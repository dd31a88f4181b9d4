"""
MongoDB Connection Utility

Collections:
- jobs: postings created by HR accounts (keyed by hr_email)
- applications: submissions referencing a job by its string id (jobId)

The client is opened once per process and never explicitly closed.
"""
import logging

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from career_code.core.config import get_settings

logger = logging.getLogger(__name__)

# Global client (connection pooling handled internally by pymongo)
_client: MongoClient = None
_db: Database = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client (singleton pattern)"""
    global _client
    if _client is None:
        _client = MongoClient(get_settings().mongo_url)
    return _client


def get_mongo_db() -> Database:
    """Get the career-code database"""
    global _db
    if _db is None:
        client = get_mongo_client()
        _db = client[get_settings().mongodb_db]
    return _db


def test_mongo_connection() -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        client = get_mongo_client()
        # ping command checks connection
        client.admin.command("ping")
        return True
    except PyMongoError as e:
        logger.warning("MongoDB connection failed: %s", e)
        return False


# Collection name constants (avoid typos)
COLLECTIONS = {
    "jobs": "jobs",
    "applications": "applications",
}


def init_mongo_indexes(db: Database = None):
    """
    Create indexes for the lookups the handlers perform.
    Call this once during app startup.
    """
    db = db if db is not None else get_mongo_db()

    # Employer dashboards filter jobs by owner
    db[COLLECTIONS["jobs"]].create_index("hr_email")

    # Applicant listing and per-job listing / counting
    db[COLLECTIONS["applications"]].create_index("applicant")
    db[COLLECTIONS["applications"]].create_index("jobId")

    logger.info("MongoDB indexes created")
