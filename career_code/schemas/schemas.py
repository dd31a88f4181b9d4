"""
Pydantic Schemas - Request/Response shapes.

Job and application bodies are free-form documents and are passed to
the store as-is; only the small fixed shapes are declared here.
"""

from typing import Optional

from pydantic import BaseModel


# ============================================================
# AUTH SCHEMAS
# ============================================================

class SuccessResponse(BaseModel):
    success: bool = True


# ============================================================
# STORE RESULT SCHEMAS
# ============================================================

class InsertResponse(BaseModel):
    acknowledged: bool
    insertedId: str


class UpdateResponse(BaseModel):
    acknowledged: bool
    matchedCount: int
    modifiedCount: int
    upsertedId: Optional[str] = None


# ============================================================
# APPLICATION SCHEMAS
# ============================================================

class ApplicationStatusUpdate(BaseModel):
    status: Optional[str] = None


# ============================================================
# HEALTH
# ============================================================

class HealthResponse(BaseModel):
    status: str
    mongodb: str
