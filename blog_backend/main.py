# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Optional
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

# Local application imports
from .api.v1 import auth_router, post_router
from .core.config import Settings, get_settings
from .core.exceptions import BlogError, ValidationError
from .di.base_container import BaseContainer
from .di.container import DIContainer
from .infrastructure.db.mongo_connection import MongoDatabase

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Opens the store handle, ensures indexes and builds the DI container,
    unless a container was supplied to create_application.
    """
    database: Optional[MongoDatabase] = None

    if getattr(app.state, "container", None) is None:
        settings: Settings = app.state.settings
        database = MongoDatabase.from_settings(settings)
        await database.connect()
        await database.ensure_indexes()
        app.state.container = DIContainer(database)
        logger.info("Application startup complete")

    yield

    if database is not None:
        app.state.container = None
        await database.close()
    logger.info("Application shutdown complete")


async def blog_error_handler(request: Request, exception: BlogError) -> JSONResponse:
    """Expected failures: mapped status, message in ``msg``"""
    return JSONResponse(
        status_code=exception.status_code,
        content={"msg": exception.message},
    )


async def validation_error_handler(request: Request, exception: RequestValidationError) -> JSONResponse:
    """Malformed or out-of-range input is rejected before reaching a use case"""
    errors = [
        {"field": ".".join(str(part) for part in error.get("loc", ())), "message": error.get("msg", "")}
        for error in exception.errors()
    ]
    validation_error = ValidationError(details={"errors": errors})
    return JSONResponse(
        status_code=validation_error.status_code,
        content=jsonable_encoder({"msg": validation_error.message, "errors": errors}),
    )


async def unexpected_error_handler(request: Request, exception: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {exception}",
        exc_info=exception,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"msg": "Internal server error"},
    )


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_application(
    container: Optional[BaseContainer] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging
    - CORS middleware configuration
    - Exception handlers
    - API route registration

    Args:
        container: Pre-built DI container; when given no database is opened

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title="Blog Backend API",
        version="1.0.0",
        description="Authenticated blogging backend",
        lifespan=lifespan
    )
    application.state.settings = settings
    application.state.container = container

    # Cookies are sent cross-origin, so origins must be explicit
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["Content-Type", "Authorization"],
    )

    application.add_exception_handler(BlogError, blog_error_handler)
    application.add_exception_handler(RequestValidationError, validation_error_handler)
    application.add_exception_handler(Exception, unexpected_error_handler)

    @application.get("/", tags=["health"])
    async def root():
        return {"msg": "hello world"}

    # Register API routers
    application.include_router(auth_router, prefix="/auth")
    application.include_router(post_router, prefix="/posts")

    return application


def run() -> None:
    """Console entry point: serve the application with uvicorn"""
    settings = get_settings()
    uvicorn.run(
        "blog_backend.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


# Create application instance
app = create_application()
