import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from app.config import settings
from app.database import Base, engine
from app.exception_handlers import register_exception_handlers
from app.plugins.loader import initialize_plugins
from app.plugins.registry import plugin_registry
from app.routes import admin, magicians, site

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Tasks to run at application startup and shutdown."""
    logger.info("Starting up the application...")
    if settings.debug:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created (if not existing).")

    await initialize_plugins(plugin_registry)

    yield

    logger.info("Shutting down the application...")
    for plugin in plugin_registry.all_plugins():
        await plugin_registry.unregister(plugin.meta.name)


def create_app() -> FastAPI:
    """Create the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description="Alliance of Magicians — magician directory and featured magician",
        debug=settings.debug,
        version=settings.app_version,
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    # Include routers; admin before site so /admin/* is never taken for a post type
    app.include_router(magicians.router, prefix="/magicians/v1", tags=["Magicians"])
    app.include_router(admin.router, tags=["Admin"])
    app.include_router(site.router, tags=["Site"])

    if settings.debug:
        logger.info(f"Running in {settings.environment} mode")

    return app


app = create_app()


@app.get("/", tags=["Root"])
async def root():
    return {"message": "Welcome to the Alliance of Magicians"}


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=settings.debug)
