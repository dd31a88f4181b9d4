"""
Job Routes

GET /jobs - List jobs, optionally only those posted by ?email=
GET /jobs/applications - Employer's jobs with application counts (owner only)
GET /jobs/{job_id} - Get one job
POST /jobs - Create a job posting
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query

from career_code.api.dependencies import get_job_service
from career_code.core.auth import require_owner
from career_code.schemas.schemas import InsertResponse
from career_code.services.mongo_service import JobService

router = APIRouter(prefix="/jobs", tags=["Jobs"])


@router.get("")
def list_jobs(
    email: Optional[str] = Query(None, description="Only jobs posted by this HR email"),
    jobs: JobService = Depends(get_job_service)
) -> List[dict]:
    return jobs.list_jobs(hr_email=email)


# Declared before /{job_id} so "applications" is not taken for an id
@router.get("/applications")
def list_jobs_with_application_counts(
    identity: dict = Depends(require_owner),
    jobs: JobService = Depends(get_job_service)
) -> List[dict]:
    """Jobs posted by the verified HR user, each with application_count."""
    return jobs.list_with_application_counts(identity["email"])


@router.get("/{job_id}")
def get_job(job_id: str, jobs: JobService = Depends(get_job_service)) -> Optional[dict]:
    """Get one job; null when it does not exist."""
    return jobs.get_by_id(job_id)


@router.post("", response_model=InsertResponse)
def create_job(job: Dict[str, Any] = Body(...), jobs: JobService = Depends(get_job_service)):
    return jobs.create(job)
