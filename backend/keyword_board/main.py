"""
Keyword Board Application Entry Point

FastAPI application main entry, including router registration and application configuration.
"""

import logging
import traceback
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.routing import APIRouter
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from keyword_board import __version__
from keyword_board.api import keywords_router
from keyword_board.common.errors import (
    AppError,
    InfrastructureError,
    MethodNotAllowedError,
    ValidationError,
)
from keyword_board.config import get_settings
from keyword_board.db.session import Database
from keyword_board.logging_config import setup_logging
from keyword_board.middleware import RateLimitMiddleware, SecurityHeadersMiddleware

logger = logging.getLogger(__name__)

# Initialize logging configuration
setup_logging()


# Application Lifecycle Management
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application Lifecycle Management

    Owns the database handle: created on startup, disposed on shutdown.
    A database that is down at startup is retried on the first request.
    """
    # Startup
    database = Database.from_settings(get_settings())
    app.state.database = database
    try:
        await database.connect()
    except InfrastructureError:
        logger.warning("Database unavailable at startup, connecting on first request")
    yield
    # Shutdown
    await database.dispose()


# Create FastAPI application
settings = get_settings()

repo_root = Path(__file__).resolve().parents[2]
frontend_dist_dir = Path(settings.FRONTEND_DIST_DIR or (repo_root / "frontend"))
frontend_enabled = (
    frontend_dist_dir.exists() and (frontend_dist_dir / "index.html").exists()
)

app = FastAPI(
    title=settings.APP_NAME,
    description="Keyword record management with paginated listing",
    version=__version__,
    lifespan=lifespan,
)

# Configure CORS
# Parse ALLOWED_ORIGINS from comma-separated string to list; "*" allows any origin
allowed_origins = [
    origin.strip() for origin in settings.ALLOWED_ORIGINS.split(",") if origin.strip()
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    # Credentials cannot be combined with a wildcard origin
    allow_credentials="*" not in allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add Rate Limit Middleware (should be added after CORS)
app.add_middleware(RateLimitMiddleware)
logger.info(f"Rate limiting enabled: {settings.RATE_LIMIT_ENABLED}")

# Outermost, so rate-limit rejections carry the headers too
app.add_middleware(SecurityHeadersMiddleware)


# Global Exception Handlers
@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """
    Handle application custom exceptions

    In production mode, error details are hidden to prevent information leakage.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(include_details=get_settings().DEBUG),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """
    Handle malformed request bodies and parameters as 400 validation errors
    """
    error = ValidationError(
        message="Invalid request",
        code="invalid_request",
        details={"errors": jsonable_encoder(exc.errors())},
    )
    return JSONResponse(
        status_code=error.status_code,
        content=error.to_dict(include_details=get_settings().DEBUG),
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Render framework HTTP errors (unknown verb, missing route) in the application envelope
    """
    if exc.status_code == 405:
        error = MethodNotAllowedError()
    else:
        error = AppError(
            message=str(exc.detail),
            error_type="http_error",
            code="http_error",
            status_code=exc.status_code,
        )
    return JSONResponse(
        status_code=error.status_code,
        content=error.to_dict(),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """
    Handle uncaught exceptions

    In production mode, stack traces and error details are logged but not returned to clients.
    """
    settings = get_settings()
    logger.error(
        "Uncaught exception: %s\nPath: %s\nTraceback:\n%s",
        str(exc),
        request.url.path,
        traceback.format_exc(),
    )

    if settings.DEBUG:
        return JSONResponse(
            status_code=500,
            content={
                "message": str(exc),
                "type": type(exc).__name__,
                "code": "internal_error",
                "traceback": traceback.format_exc().split("\n"),
            },
        )

    return JSONResponse(
        status_code=500,
        content={
            "message": "Internal server error",
            "type": "internal_error",
            "code": "internal_error",
        },
    )


# Health Check Endpoint
@app.get("/health", tags=["Health"])
async def health_check():
    """
    Health Check

    Used for service liveness probe.
    """
    return {"status": "healthy"}


@app.get("/", tags=["Health"])
async def root():
    """
    Root Path

    When the frontend bundle exists, serve the keyword board page.
    Otherwise, return basic service information (API-only mode).
    """
    if frontend_enabled:
        return FileResponse(frontend_dist_dir / "index.html")
    return {
        "name": settings.APP_NAME,
        "version": __version__,
        "description": "Keyword Board - paginated keyword records",
    }


api_router = APIRouter(prefix="/api")
api_router.include_router(keywords_router)
app.include_router(api_router)


if frontend_enabled:
    app.mount(
        "/",
        StaticFiles(directory=str(frontend_dist_dir), html=True),
        name="frontend",
    )


def run() -> None:
    """Run the server with uvicorn (console script entry point)"""
    import uvicorn

    uvicorn.run(
        "keyword_board.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
