"""
MongoDB Service - data access for the two collections.

Collections:
1. jobs         - postings, owned by the HR account in hr_email
2. applications - submissions, reference a job by jobId (string form of its _id)

Each method performs the store calls for one endpoint and returns the raw
result with ObjectIds rendered as strings. Two listings join per row
(one extra query per document) instead of running an aggregation.
"""

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo.collection import Collection
from pymongo.results import InsertOneResult, UpdateResult

logger = logging.getLogger(__name__)

# Job fields copied onto each application when listing an applicant's applications
JOB_DISPLAY_FIELDS = ("company", "title", "company_logo")


# ============================================================
# HELPERS: Convert store output to JSON-serializable dicts
# ============================================================

def serialize_doc(doc: Optional[dict]) -> Optional[dict]:
    """Convert MongoDB document to JSON-serializable dict."""
    if doc is None:
        return None
    if isinstance(doc.get("_id"), ObjectId):
        doc["_id"] = str(doc["_id"])
    return doc


def serialize_docs(docs) -> List[dict]:
    """Convert MongoDB documents to a JSON-serializable list."""
    return [serialize_doc(doc) for doc in docs]


def serialize_insert(result: InsertOneResult) -> Dict[str, Any]:
    return {
        "acknowledged": result.acknowledged,
        "insertedId": str(result.inserted_id),
    }


def serialize_update(result: UpdateResult) -> Dict[str, Any]:
    return {
        "acknowledged": result.acknowledged,
        "matchedCount": result.matched_count,
        "modifiedCount": result.modified_count,
        "upsertedId": str(result.upserted_id) if result.upserted_id is not None else None,
    }


# ============================================================
# JOBS COLLECTION
# ============================================================

class JobService:
    """
    Handles job postings.
    Needs the applications collection too, for per-job application counts.
    """

    def __init__(self, jobs: Collection, applications: Collection):
        self.collection = jobs
        self.applications = applications

    def list_jobs(self, hr_email: Optional[str] = None) -> List[dict]:
        """All jobs, or only those posted by hr_email when given."""
        query = {}
        if hr_email:
            query["hr_email"] = hr_email
        return serialize_docs(self.collection.find(query))

    def list_with_application_counts(self, hr_email: str) -> List[dict]:
        """
        Jobs posted by hr_email, each with an application_count.

        One count query per job.
        """
        jobs = list(self.collection.find({"hr_email": hr_email}))
        for job in jobs:
            job["application_count"] = self.applications.count_documents({"jobId": str(job["_id"])})
        return serialize_docs(jobs)

    def get_by_id(self, job_id: str) -> Optional[dict]:
        """Fetch one job. Raises bson.errors.InvalidId for a malformed id."""
        doc = self.collection.find_one({"_id": ObjectId(job_id)})
        return serialize_doc(doc)

    def create(self, job: dict) -> Dict[str, Any]:
        result = self.collection.insert_one(job)
        logger.info("Created job %s (%s) for %s", result.inserted_id, job.get("title"), job.get("hr_email"))
        return serialize_insert(result)


# ============================================================
# APPLICATIONS COLLECTION
# ============================================================

class ApplicationService:
    """
    Handles job applications.
    Reads the jobs collection to join display fields at read time.
    """

    def __init__(self, applications: Collection, jobs: Collection):
        self.collection = applications
        self.jobs = jobs

    def list_for_applicant(self, applicant: str) -> List[dict]:
        """
        Applications submitted by applicant, each joined with its job's
        company, title and company_logo.

        One job lookup per application. A dangling jobId raises LookupError.
        """
        applications = list(self.collection.find({"applicant": applicant}))
        for application in applications:
            job_id = application.get("jobId")
            job = self.jobs.find_one({"_id": ObjectId(job_id)})
            if job is None:
                raise LookupError(f"Job {job_id} referenced by application {application['_id']} not found")
            for field in JOB_DISPLAY_FIELDS:
                application[field] = job.get(field)
        return serialize_docs(applications)

    def list_for_job(self, job_id: str) -> List[dict]:
        return serialize_docs(self.collection.find({"jobId": job_id}))

    def create(self, application: dict) -> Dict[str, Any]:
        result = self.collection.insert_one(application)
        logger.info(
            "Created application %s from %s for job %s",
            result.inserted_id, application.get("applicant"), application.get("jobId"),
        )
        return serialize_insert(result)

    def update_status(self, application_id: str, status: Optional[str]) -> Dict[str, Any]:
        """Set the status field. Raises bson.errors.InvalidId for a malformed id."""
        result = self.collection.update_one(
            {"_id": ObjectId(application_id)},
            {"$set": {"status": status}}
        )
        logger.info("Application %s status -> %s (matched=%d)", application_id, status, result.matched_count)
        return serialize_update(result)
