"""
Main FastAPI application entry point.
Configures and initializes the Drone Delivery API.
"""
import logging
from fastapi import FastAPI, Request
from mangum import Mangum
from src.core import config
from src.core.exception_handler import register_exception_handlers
from src.core.locks import DroneLockRegistry
from src.core.logging_config import configure_logging
from src.repositories.image_repository import ImageRepository, InMemoryImageRepository
from src.repositories.memory_repository import InMemoryRepository
from src.repositories.s3_repository import S3ImageRepository
from src.api.routes import health_routes, drone_routes, medication_routes

logger = logging.getLogger(__name__)


def create_image_repository() -> ImageRepository:
    """Use S3 when a bucket is configured, otherwise keep images in memory."""
    if config.settings.s3_bucket_name:
        return S3ImageRepository()
    return InMemoryImageRepository()


def create_app(image_repository: ImageRepository = None) -> FastAPI:
    """
    Create and configure the FastAPI application.
    
    Each app owns a fresh entity store, image store and lock registry,
    discarded together with the app.
    """
    app = FastAPI(
        title=config.settings.api_title,
        version=config.settings.api_version,
        description="Drone fleet medication delivery API"
    )
    
    app.state.db_repository = InMemoryRepository()
    app.state.image_repository = image_repository or create_image_repository()
    app.state.lock_registry = DroneLockRegistry()
    
    # Register exception handlers
    register_exception_handlers(app)
    
    # Register routes
    app.include_router(health_routes.router)
    app.include_router(drone_routes.router)
    app.include_router(medication_routes.router)
    
    # Middleware to log request paths
    @app.middleware("http")
    async def log_request(request: Request, call_next):
        logger.info("%s %s", request.method, request.url.path)
        response = await call_next(request)
        return response
    
    return app


configure_logging(config.settings.log_level)

app = create_app()

# Lambda handler for AWS
handler = Mangum(app, lifespan="off")


# For local development
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=3005)
