"""
REST API main application.
Entry point for the FastAPI member search server.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from sqlalchemy import text

from search_api.models import Base
from search_api.routers import members_router
from search_api.seed import seed
from shared.config.logging import setup_logging, api_logger as logger
from shared.config.settings import settings
from shared.infrastructure.db import engine, get_db_context


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    Runs on startup and shutdown.
    """
    setup_logging()

    logger.info("Starting member search API", port=settings.api_port, env=settings.environment)

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified")

    if settings.seed_sample_data:
        with get_db_context() as db:
            seed(db)

    yield

    logger.info("Shutting down member search API")
    engine.dispose()


app = FastAPI(
    title="Member Search API",
    description="Dynamic member search with count-skipping pagination",
    version="0.1.0",
    lifespan=lifespan,
)


# =============================================================================
# Health Check
# =============================================================================


@app.get("/api/health")
def health_check():
    """Basic health check endpoint."""
    return {
        "status": "healthy",
        "service": "member-search",
        "environment": settings.environment,
    }


@app.get("/api/health/detailed")
def detailed_health_check():
    """
    Detailed health check that verifies database connectivity.
    Returns 503 when the database cannot be reached.
    """
    checks = {
        "service": "member-search",
        "environment": settings.environment,
        "dependencies": {},
    }

    try:
        with get_db_context() as db:
            db.execute(text("SELECT 1"))
        checks["dependencies"]["database"] = {"status": "healthy"}
        checks["status"] = "healthy"
    except Exception as e:
        logger.error("Database health check failed", exc_info=True)
        checks["dependencies"]["database"] = {"status": "unhealthy", "error": str(e)}
        checks["status"] = "degraded"
        return JSONResponse(content=checks, status_code=503)

    return checks


# =============================================================================
# Include Routers
# =============================================================================

app.include_router(members_router)


# =============================================================================
# Development entry point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "search_api.main:app",
        host="0.0.0.0",
        port=settings.api_port,
        reload=True,
    )
