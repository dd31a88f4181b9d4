"""
Authentication Utility - session JWTs and the identity-verification gate.

Provides:
- JWT creation/verification for the session cookie
- Two interchangeable verifiers (session cookie, Firebase ID token)
- FastAPI dependencies for protected routes (401) and owner-only routes (403)
"""

import logging
import threading
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Optional

import firebase_admin
from fastapi import Depends, HTTPException, Query, Request, status
from fastapi.security.utils import get_authorization_scheme_param
from firebase_admin import auth as firebase_auth
from firebase_admin import credentials
from jose import JWTError, jwt

from career_code.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

UNAUTHORIZED_DETAIL = "unauthorized access"
FORBIDDEN_DETAIL = "forbidden access"

# Client claims are signed as-is, so only signature and expiry decide validity
SESSION_DECODE_OPTIONS = {
    "verify_aud": False,
    "verify_sub": False,
    "verify_iat": False,
    "verify_jti": False,
}


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None, settings: Optional[Settings] = None) -> str:
    """
    Sign arbitrary client claims into a session JWT.

    The claims are not checked against anything; whoever calls /jwt
    asserts their own identity.
    """
    settings = settings or get_settings()
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.jwt_expire_minutes))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.jwt_access_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str, settings: Optional[Settings] = None) -> Optional[dict]:
    """Decode and verify JWT token. None when signature or expiry is bad."""
    settings = settings or get_settings()
    try:
        return jwt.decode(
            token,
            settings.jwt_access_secret,
            algorithms=[settings.jwt_algorithm],
            options=SESSION_DECODE_OPTIONS,
        )
    except JWTError:
        return None


# ============================================================
# VERIFIERS
# verify(request) -> identity dict, or None when the request is not authenticated
# ============================================================

class IdentityVerifier(ABC):
    """Base class for the gate strategies."""

    # Headers sent with a 401 from this strategy
    challenge_headers: Optional[dict] = None

    @abstractmethod
    def verify(self, request: Request) -> Optional[dict]:
        ...


class SessionCookieVerifier(IdentityVerifier):
    """Verifies the self-issued JWT stored in the session cookie."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def verify(self, request: Request) -> Optional[dict]:
        token = request.cookies.get(self.settings.cookie_name)
        if not token:
            return None
        claims = decode_token(token, self.settings)
        if claims is None:
            return None
        claims.setdefault("email", None)
        return claims


_firebase_app: Optional[firebase_admin.App] = None
_firebase_lock = threading.Lock()


def get_firebase_app(settings: Optional[Settings] = None) -> firebase_admin.App:
    """Initialize the Firebase Admin app once per process."""
    global _firebase_app
    with _firebase_lock:
        if _firebase_app is None:
            settings = settings or get_settings()
            cred = credentials.Certificate(settings.firebase_credentials_path)
            _firebase_app = firebase_admin.initialize_app(cred)
    return _firebase_app


class FirebaseVerifier(IdentityVerifier):
    """Delegates bearer-token verification to Firebase Authentication."""

    challenge_headers = {"WWW-Authenticate": "Bearer"}

    def __init__(self, settings: Settings):
        self.settings = settings

    def verify(self, request: Request) -> Optional[dict]:
        scheme, token = get_authorization_scheme_param(request.headers.get("Authorization"))
        if scheme.lower() != "bearer" or not token:
            return None
        # Misconfiguration raises here, outside the 401 path
        app = get_firebase_app(self.settings)
        try:
            decoded = firebase_auth.verify_id_token(token, app=app)
        except (ValueError, firebase_auth.InvalidIdTokenError) as e:
            logger.info("Firebase token rejected: %s", e)
            return None
        email = decoded.get("email")
        if not email:
            return None
        return {"email": email, "uid": decoded.get("uid")}


def build_verifier(settings: Settings) -> IdentityVerifier:
    if settings.auth_strategy == "firebase":
        return FirebaseVerifier(settings)
    return SessionCookieVerifier(settings)


def get_verifier() -> IdentityVerifier:
    """FastAPI dependency - the verifier picked by AUTH_STRATEGY."""
    return build_verifier(get_settings())


# ============================================================
# GATES
# ============================================================

def get_current_identity(request: Request, verifier: IdentityVerifier = Depends(get_verifier)) -> dict:
    """
    FastAPI dependency - 401 unless the request carries a valid credential.

    Missing, expired and tampered credentials get the same response.

    Usage:
        @router.get("/protected")
        async def route(identity: dict = Depends(get_current_identity)):
            return identity
    """
    identity = verifier.verify(request)
    if identity is None:
        logger.info("Rejected unauthenticated request to %s", request.url.path)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=UNAUTHORIZED_DETAIL,
            headers=verifier.challenge_headers,
        )
    logger.debug("Verified identity %s for %s", identity.get("email"), request.url.path)
    return identity


async def require_owner(
    email: Optional[str] = Query(None),
    identity: dict = Depends(get_current_identity)
) -> dict:
    """Dependency - 403 unless the verified email matches the ?email= target."""
    if not email or identity.get("email") != email:
        logger.warning("Identity %s denied access to data of %s", identity.get("email"), email)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=FORBIDDEN_DETAIL)
    return identity
