"""Item Service — validation endpoints for catalog items.

Main FastAPI application with structured logging and global error handling.
"""

import logging
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from itemservice.api.router import api_router
from itemservice.config import get_settings
from itemservice.validators import ConstraintConfigurationError

# Configure structured logging
structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer() if get_settings().DEBUG else structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        logging.getLevelName(get_settings().LOG_LEVEL.upper())
    ),
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""
    settings = get_settings()

    logger.info(
        "app_started",
        debug=settings.DEBUG,
        total_price_min=settings.TOTAL_PRICE_MIN,
        messages_file=settings.MESSAGES_FILE,
    )

    yield

    logger.info("app_stopped")


# ── Create Application ──

app = FastAPI(
    title="Item Service",
    description=(
        "Validates catalog items against profile-scoped constraints and "
        "reports every violation with its message code chain."
    ),
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ── Global Exception Handlers ──

@app.exception_handler(ConstraintConfigurationError)
async def configuration_error_handler(request: Request, exc: ConstraintConfigurationError):
    """A broken rule setup is a server fault, never a user input problem."""
    logger.error(
        "constraint_configuration_error",
        path=request.url.path,
        method=request.method,
        error=str(exc),
    )
    return JSONResponse(
        status_code=500,
        content={"error": "configuration_error", "message": str(exc)},
    )


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


# ── Routes ──

app.include_router(api_router, prefix="/api/v1")


# ── Root endpoint ──

@app.get("/")
async def root():
    """Root endpoint — API info."""
    return {
        "name": "Item Service",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/api/v1/health",
    }


def run() -> None:
    """Serve the app with uvicorn using the configured host and port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run("itemservice.main:app", host=settings.HOST, port=settings.PORT)
