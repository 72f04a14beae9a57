"""
FastAPI application initialization for the State Law Guidance service.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from state_law_guidance import __version__
from state_law_guidance.api.routes import router
from state_law_guidance.config import get_settings
from state_law_guidance.domain.errors import (
    CatalogLoadError,
    DomainError,
    ResourceNotFound,
    ValidationFailed,
)
from state_law_guidance.observability.middleware import RequestIdAndTimingMiddleware
from state_law_guidance.observability.rate_limiter import setup_rate_limiter
from state_law_guidance.services.diff_engine import DiffEngine
from state_law_guidance.services.document_renderer import DocumentRenderer
from state_law_guidance.services.law_catalog import LawCatalog
from state_law_guidance.services.notification_text import (
    NotificationTextBuilder,
    StateChangeNotifier,
)
from state_law_guidance.services.template_registry import TemplateRegistry
from state_law_guidance.utils.logging import setup_logging

# Initialize logging
logger = setup_logging()
app_logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting State Law Guidance API (lifespan init)")
    # Build core dependencies once; a bad catalog file fails startup
    catalog = LawCatalog.from_file(settings.law_catalog_path)
    engine = DiffEngine(catalog)
    registry = TemplateRegistry()

    app.state.settings = settings
    app.state.catalog = catalog
    app.state.diff_engine = engine
    app.state.notifier = StateChangeNotifier(
        engine,
        NotificationTextBuilder(max_lines=settings.notification_max_lines),
        critical_limit=settings.critical_difference_limit,
    )
    app.state.template_registry = registry
    app.state.renderer = DocumentRenderer(registry)
    try:
        yield
    finally:
        logger.info("Shutting down State Law Guidance API (lifespan cleanup)")


# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Compare state laws and generate filled legal document templates",
    version=__version__,
    lifespan=lifespan,
)

# Configure CORS
cors_origins = (
    settings.cors_allowed_origins
    if settings.production_mode and settings.cors_allowed_origins
    else settings.cors_allow_origins
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Setup rate limiting
setup_rate_limiter(app, settings)

# Include API routes
app.include_router(router)

# Add request ID and access logging middleware (outermost, so 429s carry an id too)
app.add_middleware(RequestIdAndTimingMiddleware)


# User-friendly error messages mapping
ERROR_MESSAGES = {
    ResourceNotFound: "The requested resource was not found.",
    ValidationFailed: "The request data is invalid. Please check your input.",
    CatalogLoadError: "Law reference data is unavailable. Please try again later.",
    DomainError: "An error occurred while processing your request.",
}


def get_user_friendly_error(exc: Exception) -> str:
    """Get user-friendly error message for exception, most specific class first."""
    for exc_type in type(exc).__mro__:
        if exc_type in ERROR_MESSAGES:
            return ERROR_MESSAGES[exc_type]
    return "An error occurred. Please try again later."


def _error_response(request: Request, exc: Exception, status_code: int) -> JSONResponse:
    request_id = getattr(request.state, "request_id", "unknown")
    return JSONResponse(
        status_code=status_code,
        content={
            "error": get_user_friendly_error(exc),
            "detail": str(exc),
            "request_id": request_id,
        },
    )


# Domain exception handlers -> HTTP mapping with user-friendly messages
@app.exception_handler(ResourceNotFound)
async def handle_not_found(request: Request, exc: ResourceNotFound):
    app_logger.info(
        f"Resource not found: {exc}",
        extra={"request_id": getattr(request.state, "request_id", "unknown")},
    )
    return _error_response(request, exc, 404)


@app.exception_handler(ValidationFailed)
async def handle_validation(request: Request, exc: ValidationFailed):
    app_logger.warning(
        f"Validation failed: {exc}",
        extra={"request_id": getattr(request.state, "request_id", "unknown")},
    )
    return _error_response(request, exc, 422)


@app.exception_handler(CatalogLoadError)
async def handle_catalog_unavailable(request: Request, exc: CatalogLoadError):
    app_logger.error(
        f"Law catalog unavailable: {exc}",
        exc_info=True,
        extra={"request_id": getattr(request.state, "request_id", "unknown")},
    )
    return _error_response(request, exc, 503)


@app.exception_handler(DomainError)
async def handle_domain_error(request: Request, exc: DomainError):
    app_logger.error(
        f"Domain error: {exc}",
        exc_info=True,
        extra={"request_id": getattr(request.state, "request_id", "unknown")},
    )
    return _error_response(request, exc, 400)


@app.get("/api/_healthz")
async def _healthz(request: Request):
    catalog = getattr(request.app.state, "catalog", None)
    return {
        "status": "ok",
        "has_catalog": catalog is not None,
        "catalog_version": catalog.version if catalog is not None else None,
        "jurisdictions": len(catalog) if catalog is not None else 0,
    }
