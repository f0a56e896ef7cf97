import logging
import time
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware
from contextlib import asynccontextmanager

from app.core.config import settings
from app.core.database import init_db
from app.core.logging_config import setup_logging
from app.api.error_handlers import register_error_handlers
from app.api.endpoints import departments, health, jobs, locations, token, user_info

setup_logging(
    settings.LOG_LEVEL,
    json_logs=settings.JSON_LOGS,
    service=settings.PROJECT_NAME,
    environment=settings.APP_ENV,
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    # Startup
    logger.info(f"Starting up {settings.PROJECT_NAME} ({settings.APP_ENV})...")
    init_db()
    logger.info("Database models registered")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.PROJECT_NAME}...")


# Swagger UI is only served in development
app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    description="Departments, locations, jobs and user accounts with JWT bearer authentication",
    lifespan=lifespan,
    docs_url="/swagger" if settings.is_development else None,
    redoc_url=None,
    openapi_url="/swagger/v1/swagger.json" if settings.is_development else None,
)

if settings.FORCE_HTTPS:
    app.add_middleware(HTTPSRedirectMiddleware)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log method, path, status and duration of every request."""
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({duration_ms:.1f}ms)")
    return response


register_error_handlers(app)

# Include routers
app.include_router(departments.router, prefix=settings.API_V1_STR)
app.include_router(locations.router, prefix=settings.API_V1_STR)
app.include_router(jobs.router, prefix=settings.API_V1_STR)
app.include_router(user_info.router, prefix=settings.API_PREFIX)
app.include_router(token.router, prefix=settings.API_PREFIX)
app.include_router(health.router)


@app.get("/")
async def root():
    """Root endpoint - API health check"""
    return {
        "message": settings.PROJECT_NAME,
        "version": "1.0.0",
        "status": "healthy"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,  # Enable auto-reload during development
        log_level="info"
    )
