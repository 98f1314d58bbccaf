"""FastAPI main application module."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ...domain.exceptions import InspectionError, InsufficientPhotos, NoActiveInspection
from ...infrastructure.logging import LoggingConfig, get_logger
from ...infrastructure.services import ServiceFactory, has_service_factory, set_service_factory
from .config import get_settings
from .middleware import RequestResponseLoggingMiddleware
from .routes import guided, health, inspections, reports, templates, vehicles


logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management."""
    settings = get_settings()
    LoggingConfig(log_level=settings.log_level, service_name=settings.service_name).setup_logging()
    logger.info("Starting Inspection Checklist API")

    yield

    logger.info("Shutting down Inspection Checklist API")


def _error_response(status_code: int, exc: Exception, error_type: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": str(exc),
            "type": error_type
        }
    )


def add_exception_handlers(app: FastAPI) -> None:
    """Add custom exception handlers to the FastAPI application."""

    @app.exception_handler(NoActiveInspection)
    async def no_active_inspection_handler(request: Request, exc: NoActiveInspection):
        """Handle operations issued before an inspection was started."""
        logger.warning(f"No active inspection on {request.url}")
        return _error_response(404, exc, exc.kind)

    @app.exception_handler(InsufficientPhotos)
    async def insufficient_photos_handler(request: Request, exc: InsufficientPhotos):
        """Handle guided steps completed without enough photos."""
        logger.warning(f"Step rejected on {request.url}: {str(exc)}")
        return _error_response(422, exc, exc.kind)

    @app.exception_handler(InspectionError)
    async def inspection_error_handler(request: Request, exc: InspectionError):
        """Handle rejected inspection input."""
        logger.warning(f"Inspection error on {request.url}: {str(exc)}")
        return _error_response(400, exc, exc.kind)

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        """Handle validation errors from business logic."""
        logger.warning(f"Validation error on {request.url}: {str(exc)}")
        return _error_response(400, exc, "validation_error")


def create_app(factory: Optional[ServiceFactory] = None) -> FastAPI:
    """Create and configure FastAPI application.

    ``factory`` replaces the global service factory. Without one, a factory
    built from settings is installed only if none is installed yet.
    """
    settings = get_settings()

    if factory is not None:
        set_service_factory(factory)
    elif not has_service_factory():
        set_service_factory(ServiceFactory(
            odometer_max_digits=settings.odometer_max_digits,
            average_annual_miles=settings.average_annual_miles
        ))

    app = FastAPI(
        title="Inspection Checklist",
        description="API for template-driven vehicle inspection checklists and guided photo walkthroughs",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )

    add_exception_handlers(app)

    app.add_middleware(RequestResponseLoggingMiddleware, exclude_paths={"/health", "/docs", "/redoc", "/openapi.json"})

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=settings.allowed_methods,
        allow_headers=settings.allowed_headers,
    )

    # Include routers
    app.include_router(health.router, tags=["health"])
    app.include_router(
        templates.router,
        prefix=f"{settings.api_prefix}/templates",
        tags=["templates"]
    )
    app.include_router(
        vehicles.router,
        prefix=f"{settings.api_prefix}/vehicles",
        tags=["vehicles"]
    )
    app.include_router(
        inspections.router,
        prefix=f"{settings.api_prefix}/inspections",
        tags=["inspections"]
    )
    app.include_router(
        guided.router,
        prefix=f"{settings.api_prefix}/guided",
        tags=["guided"]
    )
    app.include_router(
        reports.router,
        prefix=f"{settings.api_prefix}/reports",
        tags=["reports"]
    )

    return app


# Create app instance
app = create_app()
