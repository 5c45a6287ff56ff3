"""
FastAPI application factory and main app configuration.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.errors import APIError, from_domain_error
from .api.routers import doctors, health
from .api.utils.responses import fail
from .core.config import MONGO_BACKEND, Settings, get_settings
from .core.exceptions import ClinicBookException
from .core.structured_logger import configure_logging, get_logger
from .domain.errors import DomainError
from .middleware.request_id_middleware import RequestIDMiddleware

logger = get_logger(__name__)


async def init_database(settings: Settings) -> None:
    """Connect Motor and register the Beanie document models."""
    from beanie import init_beanie
    from motor.motor_asyncio import AsyncIOMotorClient
    import certifi

    from .adapters.db.mongo.models import DOCUMENT_MODELS

    mongo_uri = settings.database.uri
    # Enable TLS only for Atlas SRV URIs
    if mongo_uri.startswith("mongodb+srv://"):
        client = AsyncIOMotorClient(
            mongo_uri,
            serverSelectionTimeoutMS=settings.database.server_selection_timeout_ms,
            tls=True,
            tlsCAFile=certifi.where(),
        )
    else:
        client = AsyncIOMotorClient(
            mongo_uri,
            serverSelectionTimeoutMS=settings.database.server_selection_timeout_ms,
        )

    await init_beanie(database=client[settings.database.db_name], document_models=DOCUMENT_MODELS)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    settings = get_settings()
    logger.info(
        "Starting service",
        service=settings.app_name,
        version=settings.app_version,
        environment=settings.app_env,
        backend=settings.database.backend,
    )

    if settings.database.backend == MONGO_BACKEND:
        try:
            await init_database(settings)
        except Exception as e:
            logger.critical("Database connection failed", error=str(e), error_type=type(e).__name__)
            raise
        logger.info("Database connection established", db_name=settings.database.db_name)

    yield

    logger.info("Shutting down service", service=settings.app_name)


def _error_response(request: Request, status_code: int, error: str, message: str, details=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=fail(request, error=error, message=message, details=details).model_dump(),
    )


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()
    configure_logging(settings.logging.level, settings.logging.format)

    app = FastAPI(
        title="clinicbook",
        description="Doctor profile service for clinic appointment backends",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allowed_origins,
        allow_credentials=settings.cors.allow_credentials,
        allow_methods=settings.cors.allowed_methods,
        allow_headers=settings.cors.allowed_headers,
    )
    app.add_middleware(RequestIDMiddleware)

    app.include_router(health.router)
    app.include_router(doctors.router)

    @app.get("/", tags=["health"])
    async def root():
        """Root endpoint with API information."""
        return {
            "service": settings.app_name,
            "version": settings.app_version,
            "status": "running",
            "docs": "/docs",
        }

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError):
        logger.warning(
            "API error", code=exc.code, status=exc.http_status, message=exc.message, path=request.url.path
        )
        return _error_response(request, exc.http_status, exc.code, exc.message, exc.details)

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return await api_error_handler(request, from_domain_error(exc))

    @app.exception_handler(ClinicBookException)
    async def infrastructure_error_handler(request: Request, exc: ClinicBookException):
        logger.error("Infrastructure error", code=exc.error_code, message=exc.message, path=request.url.path)
        return _error_response(
            request,
            503,
            exc.error_code or "SERVICE_UNAVAILABLE",
            "The service is temporarily unavailable. Please try again later.",
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # Raw inputs are dropped so rejected passwords never reach the client
        errors = [
            {"loc": list(error.get("loc", [])), "msg": error.get("msg", ""), "type": error.get("type", "")}
            for error in exc.errors()
        ]
        message = "; ".join(" -> ".join(str(x) for x in e["loc"]) + f": {e['msg']}" for e in errors)
        logger.warning("Request validation failed", path=request.url.path, errors=errors)
        return _error_response(
            request,
            422,
            "INVALID_INPUT",
            f"Input validation failed: {message}",
            {"errors": errors, "path": request.url.path},
        )

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled error", error_type=type(exc).__name__, path=request.url.path)
        return _error_response(
            request,
            500,
            "INTERNAL_ERROR",
            "An unexpected error has occurred. Please try again later.",
        )

    return app


app = create_app()
