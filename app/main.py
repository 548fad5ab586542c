# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Optional
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Local application imports
from .api.v1 import health_router, user_router
from .core.config import Settings, get_settings
from .core.logging import setup_logging
from .di.base_container import BaseContainer
from .di.container import DIContainer

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Closes the MongoDB client owned by the application's container on shutdown.
    """
    logger.info("Application startup complete")

    yield

    container: BaseContainer = app.state.container
    if container.has("mongo_client"):
        container.get("mongo_client").close()
        logger.info("MongoDB client closed")

    logger.info("Application shutdown complete")


async def unhandled_exception_handler(request: Request, exception: Exception) -> JSONResponse:
    """Answer 500 for errors no route handled, keeping details server-side"""
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {exception}",
        exc_info=exception,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "internal server error"},
    )


def create_application(
    settings: Optional[Settings] = None,
    container: Optional[BaseContainer] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - Dependency container (kept on ``app.state.container``)
    - CORS middleware configuration
    - API route registration

    Args:
        settings: Settings to use instead of the environment-derived ones
        container: Pre-built container (tests pass one wired with fakes)

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = settings or get_settings()
    setup_logging(level=settings.log_level, log_format=settings.log_format)

    application = FastAPI(
        title="User API",
        version="1.0.0",
        description="CRUD API for users backed by MongoDB",
        lifespan=lifespan
    )
    application.state.container = container if container is not None else DIContainer(settings)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_exception_handler(Exception, unhandled_exception_handler)

    # Register API routers
    application.include_router(user_router, prefix="/users")
    application.include_router(health_router)

    return application


def run() -> None:
    """Serve the application with uvicorn using the configured host and port"""
    import uvicorn

    settings = get_settings()
    uvicorn.run("app.main:app", host=settings.api_host, port=settings.api_port)


# Create application instance
app = create_application()


if __name__ == "__main__":
    run()
