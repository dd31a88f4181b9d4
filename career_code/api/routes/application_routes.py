"""
Application Routes

GET /applications - Applicant's applications joined with job details (owner only)
GET /applications/job/{job_id} - Applications received for one job
POST /applications - Submit an application
PATCH /applications/{application_id} - Update application status
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends

from career_code.api.dependencies import get_application_service
from career_code.core.auth import require_owner
from career_code.schemas.schemas import ApplicationStatusUpdate, InsertResponse, UpdateResponse
from career_code.services.mongo_service import ApplicationService

router = APIRouter(prefix="/applications", tags=["Applications"])


@router.get("")
def list_my_applications(
    identity: dict = Depends(require_owner),
    applications: ApplicationService = Depends(get_application_service)
) -> List[dict]:
    """
    Applications of the verified applicant.

    company, title and company_logo come from the referenced job at read time.
    """
    return applications.list_for_applicant(identity["email"])


@router.get("/job/{job_id}")
def list_job_applications(
    job_id: str,
    applications: ApplicationService = Depends(get_application_service)
) -> List[dict]:
    return applications.list_for_job(job_id)


@router.post("", response_model=InsertResponse)
def create_application(
    application: Dict[str, Any] = Body(...),
    applications: ApplicationService = Depends(get_application_service)
):
    return applications.create(application)


@router.patch("/{application_id}", response_model=UpdateResponse)
def update_application_status(
    application_id: str,
    update: ApplicationStatusUpdate,
    applications: ApplicationService = Depends(get_application_service)
):
    return applications.update_status(application_id, update.status)
