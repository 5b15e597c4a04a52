"""
Exam Coverage Analyzer API
FastAPI application that compares uploaded exam pages against the syllabus

This is the main entry point that wires together all routes and services.
"""

import uuid
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .config import (
    API_TITLE,
    API_DESCRIPTION,
    API_VERSION,
    CORS_ORIGINS,
    LOG_LEVEL,
    LOG_FILE,
    JSON_LOGS,
    SYLLABUS,
    SYLLABUS_NAME,
)
from .core import setup_logging, get_logger, set_request_id, clear_context
from .routes import files_router, analysis_router, credential_router
from .routes.deps import build_default_session
from .services.session import AnalysisSession

logger = get_logger(__name__, service="api")


def create_app(session: Optional[AnalysisSession] = None) -> FastAPI:
    """
    Build the API application.

    Args:
        session: Analysis session to serve; a Gemini-backed one is created when omitted
    """
    setup_logging(
        level=LOG_LEVEL,
        log_file=Path(LOG_FILE) if LOG_FILE else None,
        use_json=JSON_LOGS,
    )

    app = FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=API_VERSION,
    )
    app.state.session = session if session is not None else build_default_session()

    logger.info("Starting Exam Coverage Analyzer API", extra={
        "log_level": LOG_LEVEL,
        "json_logs": JSON_LOGS,
        "credential_required": app.state.session.credential_required,
    })

    @app.middleware("http")
    async def add_request_correlation(request: Request, call_next):
        """Attach a correlation ID to every request and its log lines."""
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        set_request_id(request_id)
        path = request.url.path

        logger.info(f"{request.method} {path}", extra={
            "method": request.method,
            "path": path,
        })

        try:
            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id
            response.headers.setdefault("X-Content-Type-Options", "nosniff")

            logger.info(f"Response: {response.status_code}", extra={
                "status_code": response.status_code,
                "method": request.method,
                "path": path,
            })
            return response
        finally:
            clear_context()

    # CORS middleware for frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(files_router)
    app.include_router(analysis_router)
    app.include_router(credential_router)

    @app.get("/")
    async def root():
        """Root endpoint - API info"""
        return {
            "message": "Exam Coverage Analyzer API - compare exam papers against the syllabus",
            "version": API_VERSION,
            "syllabus": SYLLABUS_NAME,
            "topic_count": len(SYLLABUS),
        }

    @app.get("/health")
    async def health_check(request: Request):
        """
        Health check endpoint.

        Always 200; ``degraded`` means no API key is configured yet, which the
        user can fix from the UI without restarting the service.
        """
        current: AnalysisSession = request.app.state.session
        configured = current.credential_provider.has_credential()
        if not configured:
            logger.warning("Health check: no API key configured")
        return {
            "status": "healthy" if configured else "degraded",
            "checks": {
                "credential": {"configured": configured},
                "analysis": {"is_analyzing": current.is_analyzing},
            },
        }

    return app


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(create_app(), host="0.0.0.0", port=8000)
