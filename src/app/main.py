import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.app.api.v1 import clients
from src.app.containers import Container
from src.app.logging import configure_logging

# Configure logging at module load time
configure_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def default_lifespan(app: FastAPI):
    """Default application lifespan manager - creates the database schema on startup."""
    container: Container = app.state.container
    logger.info("Starting Banking Control Panel API...")

    db = container.database()
    await db.create_schema()
    logger.info("Database initialized successfully")

    yield

    logger.info("Shutting down Banking Control Panel API...")
    await db.dispose()


def create_app(container: Container, lifespan=default_lifespan) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        container: DI container providing settings, database and services.
        lifespan: Optional lifespan context manager. Defaults to default_lifespan.

    Returns:
        Configured FastAPI application.
    """
    container.wire(modules=[
        "src.app.api.v1.clients",
    ])

    config = container.config()

    app = FastAPI(
        title=config.app_name,
        version=config.app_version,
        lifespan=lifespan,
    )

    # Attach container to app state for access in lifespan and routes
    app.state.container = container

    app.include_router(clients.router, prefix="/api/v1")

    @app.get("/")
    async def root():
        return {"message": "Welcome to Banking Control Panel API"}

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    return app


container = Container()
app = create_app(container=container)
