"""
Authentication Routes

POST /jwt - Issue a session JWT in an HTTP-only cookie
POST /logout - Clear the session cookie
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Response

from career_code.core.auth import create_access_token
from career_code.core.config import get_settings
from career_code.schemas.schemas import SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Authentication"])


@router.post("/jwt", response_model=SuccessResponse)
async def issue_token(response: Response, claims: Dict[str, Any] = Body(...)):
    """
    Sign the posted claims and set them as the session cookie.

    Clients must send credentials (axios withCredentials / fetch
    credentials: 'include') for the cookie to be stored and returned.
    """
    settings = get_settings()
    token = create_access_token(claims, settings=settings)
    response.set_cookie(
        key=settings.cookie_name,
        value=token,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,
    )
    logger.info("Issued session token for %s", claims.get("email"))
    return SuccessResponse()


@router.post("/logout", response_model=SuccessResponse)
async def logout(response: Response):
    """Drop the session cookie."""
    settings = get_settings()
    response.delete_cookie(
        key=settings.cookie_name,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,
    )
    return SuccessResponse()
