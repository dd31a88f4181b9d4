"""
Schemas module - Request/Response schemas for API endpoints.
"""
from career_code.schemas.schemas import (
    ApplicationStatusUpdate,
    HealthResponse,
    InsertResponse,
    SuccessResponse,
    UpdateResponse,
)

__all__ = [
    "ApplicationStatusUpdate",
    "HealthResponse",
    "InsertResponse",
    "SuccessResponse",
    "UpdateResponse",
]
