from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from sqlmodel import Session
import logging
import os
import traceback
from flashdeck.core.config import settings
from flashdeck.core.database import engine, init_db
from flashdeck.core.exceptions import (
    FlashdeckException,
    ValidationError,
    NotFoundError,
    ConflictError,
    ExternalServiceError
)

# Import models to register them with SQLModel
from flashdeck.models import models  # noqa: F401

# Import API router
from flashdeck.api.v1 import api_router
from flashdeck.services.seed_service import seed_demo_decks
from flashdeck.services.study_registry import study_registry

logger = logging.getLogger(__name__)

# Check if we're in development mode
IS_DEVELOPMENT = os.getenv("ENVIRONMENT", "production").lower() in ("development", "dev", "local")

app = FastAPI(title="Flashdeck API", version="1.0.0")

# Add exception handler for validation errors to log details
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Log validation errors with full details for debugging."""
    body = await request.body()
    logger.error(f"Validation error on {request.method} {request.url.path}")
    logger.error(f"Request body: {body.decode('utf-8') if body else 'empty'}")
    logger.error(f"Validation errors: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": jsonable_encoder(exc.errors()), "body": body.decode('utf-8') if body else None},
    )

# Add exception handler for custom application exceptions
@app.exception_handler(FlashdeckException)
async def flashdeck_exception_handler(request: Request, exc: FlashdeckException):
    """Handle custom application exceptions."""
    if isinstance(exc, ValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
    elif isinstance(exc, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, ConflictError):
        status_code = status.HTTP_409_CONFLICT
    elif isinstance(exc, ExternalServiceError):
        status_code = status.HTTP_502_BAD_GATEWAY
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    logger.warning(f"Application exception on {request.method} {request.url.path}: {type(exc).__name__}: {str(exc)}")
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "type": type(exc).__name__},
    )

# Add global exception handler for unhandled errors
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch all unhandled exceptions and return a JSON 500."""
    logger.error(f"Unhandled exception on {request.method} {request.url.path}", exc_info=exc)

    # In development, show full error details
    if IS_DEVELOPMENT:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": str(exc),
                "type": type(exc).__name__,
                "traceback": traceback.format_exc()
            },
        )
    else:
        # In production, return generic message
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "An internal server error occurred. Please try again later.",
                "type": "InternalServerError"
            },
        )

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup_event():
    """Initialize database on startup and seed demo decks into an empty database."""
    init_db()
    if settings.seed_demo_data:
        with Session(engine) as session:
            seed_demo_decks(session)


@app.on_event("shutdown")
async def shutdown_event():
    """Write the latest snapshot of every live study session and stop their timers."""
    study_registry.close_all()


@app.get("/")
async def root():
    return {
        "message": "Flashdeck API",
        "status": "running",
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc"
        }
    }


@app.get("/health")
async def health():
    return {"status": "healthy"}


# Include API router
app.include_router(api_router, prefix=settings.api_v1_prefix)
