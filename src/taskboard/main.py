import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api import health, tasks, users
from .api.error_handlers import register_error_handlers
from .config import Settings, get_settings
from .db.session import Database
from .logging_setup import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application.

    The database is opened when the app starts and closed when it stops;
    handlers reach it through app.state.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database = Database(settings.database_url, echo=settings.sql_echo)
        database.create_tables()
        app.state.database = database
        logger.info("Taskboard API started")
        try:
            yield
        finally:
            database.close()
            app.state.database = None
            logger.info("Taskboard API shut down")

    app = FastAPI(title="Taskboard API", version=__version__, lifespan=lifespan)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Mount routers
    app.include_router(health.router, tags=["health"])
    app.include_router(users.router, prefix="/users", tags=["users"])
    app.include_router(tasks.router, prefix="/tasks", tags=["tasks"])

    return app


app = create_app()


def run() -> None:
    """Serve the API with uvicorn using the configured host and port."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info(f"Server listening on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
