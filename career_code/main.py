"""
Career Code - Main Application

FastAPI backend with:
- MongoDB for jobs and applications
- Session JWT (HTTP-only cookie) or Firebase ID token authentication
- Owner-only listings for HR users and applicants

Run: uvicorn career_code.main:app --reload
"""

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pymongo.errors import PyMongoError

from career_code import __version__
from career_code.api.dependencies import get_database
from career_code.api.routes import api_router
from career_code.core.config import get_settings
from career_code.db.mongodb import init_mongo_indexes, test_mongo_connection
from career_code.schemas.schemas import HealthResponse

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    app = FastAPI(
        title="Career Code",
        description="""
        Job board backend.

        ## Features
        - **Authentication**: session JWT in an HTTP-only cookie, or Firebase ID tokens
        - **Jobs**: HR users post jobs and see application counts
        - **Applications**: applicants apply and track status; HR updates status
        """,
        version=__version__,
    )

    # Cookies only travel cross-origin with credentials enabled and explicit origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    @app.on_event("startup")
    async def startup_event():
        """Ping the store and create indexes. Failures are logged, not fatal."""
        if settings.use_in_memory_store:
            logger.info("Using in-memory store")
            return
        if test_mongo_connection():
            logger.info("Pinged MongoDB deployment at %s", settings.mongodb_db)
        try:
            init_mongo_indexes(get_database())
        except PyMongoError as e:
            logger.warning("MongoDB index initialization failed: %s", e)

    @app.get("/", response_class=PlainTextResponse, tags=["Health"])
    async def root():
        return "Career code cooking"

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    def health_check():
        if settings.use_in_memory_store:
            return HealthResponse(status="healthy", mongodb="in-memory")
        return HealthResponse(
            status="healthy",
            mongodb="connected" if test_mongo_connection() else "disconnected"
        )

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=get_settings().port)
