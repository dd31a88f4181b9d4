"""
API module - FastAPI routers and dependency wiring.

Usage:
    from career_code.api.routes import api_router
    app.include_router(api_router)
"""
