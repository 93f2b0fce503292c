"""SchemaLab: JSON and TOML schema validation service.

Main FastAPI application with lifespan management, CORS, and global error handling.
"""

import logging
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from schemalab import __version__
from schemalab.config import get_settings
from schemalab.api.router import api_router
from schemalab.samples import clear_cache


def configure_logging() -> None:
    """Configure structured logging for the service process."""
    settings = get_settings()
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if settings.DEBUG else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level if isinstance(level, int) else logging.INFO),
    )


configure_logging()

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""
    settings = get_settings()

    # ── Startup ──
    logger.info(
        "app_started",
        debug=settings.DEBUG,
        max_validation_depth=settings.MAX_VALIDATION_DEPTH,
        max_document_bytes=settings.MAX_DOCUMENT_BYTES,
    )

    yield

    # ── Shutdown ──
    clear_cache()
    logger.info("app_stopped")


# ── Create Application ──

app = FastAPI(
    title="SchemaLab",
    description=(
        "Structural validation of JSON and TOML documents against a "
        "JSON Schema subset, with exhaustive path-annotated error reports."
    ),
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ── Middleware ──

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Global Exception Handlers ──

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all error handler for unhandled exceptions."""
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred. Please try again.",
        },
    )


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError):
    """Handle invalid input that reached past request validation."""
    return JSONResponse(
        status_code=422,
        content={"error": "validation_error", "message": str(exc)},
    )


# ── Routes ──

app.include_router(api_router, prefix="/api/v1")


# ── Root endpoint ──

@app.get("/")
async def root():
    """Root endpoint: API info."""
    return {
        "name": "SchemaLab",
        "version": __version__,
        "description": "JSON and TOML schema validation",
        "docs": "/docs",
        "health": "/api/v1/health",
    }
