"""
FastAPI application setup with dependency injection.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
from contextlib import asynccontextmanager

from app.config.settings import get_settings
from app.core.logging import configure_logging
from app.core.error_handlers import setup_error_handlers
from app.middleware import RequestContextMiddleware

# Get application settings
settings = get_settings()

configure_logging(level=settings.log_level.value, log_format=settings.log_format)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan management with service container.
    Builds the services on startup and closes their HTTP clients on shutdown.
    """
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")

    try:
        from app.core.dependencies import service_container
        await service_container.initialize_services()
        app.state.service_container = service_container

        logger.info("Application startup complete")

        yield

    except Exception as e:
        logger.error(f"Application startup failed: {e}", exc_info=True)
        raise

    finally:
        logger.info("Shutting down application")

        try:
            if hasattr(app.state, 'service_container'):
                await app.state.service_container.cleanup_services()

            logger.info("Application shutdown complete")

        except Exception as e:
            logger.error(f"Application shutdown failed: {e}", exc_info=True)


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        **settings.get_cors_config()
    )
    app.add_middleware(RequestContextMiddleware)

    setup_error_handlers(app)

    from app.api.chat_endpoints import router as chat_router
    from app.api.voice_endpoints import router as voice_router
    from app.api.health_endpoints import router as health_router
    app.include_router(chat_router)
    app.include_router(voice_router)
    app.include_router(health_router)

    @app.get("/")
    async def root():
        """Root endpoint for basic liveness check."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.app_version,
            "status": "running"
        }

    return app


# Create application instance
app = create_app()
