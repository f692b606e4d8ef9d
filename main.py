"""
MealTracker FastAPI Application
Main entry point: application factory, middleware and configuration wiring
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
import uvicorn
from contextlib import asynccontextmanager
import anyio
from typing import Optional

from api.routes import team_members, meals, health
from api.middleware import RequestLoggingMiddleware, register_exception_handlers
from app.config import Settings, settings as default_settings
from domain.models import Database

_logger = logging.getLogger("mealtracker.main")


def configure_logging(settings: Settings):
    """Setup logging with configured level and format"""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()), format=settings.log_format
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup and shutdown.
    Creates the schema with retries and disposes the engine on shutdown.
    """
    settings: Settings = app.state.settings
    database: Database = app.state.database

    _logger.info(f"Starting {settings.app_name} in {settings.environment.value} mode")

    for attempt in range(1, settings.db_init_attempts + 1):
        try:
            # Run blocking init in a thread to avoid blocking the event loop
            await anyio.to_thread.run_sync(database.init_database)
            _logger.info("Database initialization succeeded")
            break
        except Exception as exc:
            _logger.warning(
                "Database init attempt %d/%d failed: %s",
                attempt,
                settings.db_init_attempts,
                exc,
            )
            if attempt < settings.db_init_attempts:
                await anyio.sleep(settings.db_init_delay_sec)
            else:
                _logger.error(
                    "Database initialization failed after %d attempts", attempt
                )
                raise

    try:
        yield
    finally:
        _logger.info(f"Shutting down {settings.app_name}")
        database.dispose()


def create_app(
    settings: Optional[Settings] = None, database: Optional[Database] = None
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: configuration, defaults to the environment-loaded settings
        database: persistence handle, defaults to one built from settings.database_url
    """
    settings = settings or default_settings
    database = database or Database(settings.database_url, echo=settings.db_echo)

    app = FastAPI(
        title=settings.api_title,
        version=settings.app_version,
        description=settings.api_description,
        lifespan=lifespan,
        debug=settings.debug,
        openapi_url=(
            f"{settings.api_prefix}/openapi.json" if not settings.is_production() else None
        ),
        docs_url=f"{settings.api_prefix}/docs" if not settings.is_production() else None,
        redoc_url=f"{settings.api_prefix}/redoc" if not settings.is_production() else None,
    )
    app.state.settings = settings
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    app.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(app)

    app.include_router(team_members.router, prefix=settings.api_prefix)
    app.include_router(meals.router, prefix=settings.api_prefix)
    app.include_router(health.router, prefix=settings.api_prefix)

    return app


configure_logging(default_settings)
app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.is_development(),
        log_level=default_settings.log_level.lower(),
    )
