import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ..db.session import create_engine, create_session_factory, init_db
from .config import Settings
from .logging import get_logger, setup_logging

logger = get_logger("events")


async def initialize_database(app: FastAPI, settings: Settings) -> None:
    max_retries = max(settings.db_init_retries, 1)
    for attempt in range(max_retries):
        try:
            await init_db(app.state.engine)
            logger.info("Database initialized successfully.")
            return
        except Exception as e:
            if attempt < max_retries - 1:
                wait_time = 2 ** attempt  # Exponential backoff
                logger.warning(
                    "Database initialization failed (attempt %d/%d): %s. Retrying in %d seconds...",
                    attempt + 1,
                    max_retries,
                    str(e),
                    wait_time,
                )
                await asyncio.sleep(wait_time)
            else:
                logger.error(
                    "Database initialization failed after %d attempts: %s. Application will start but database operations may fail.",
                    max_retries,
                    str(e),
                )


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    setup_logging(settings.log_level)

    app.state.engine = create_engine(settings)
    app.state.session_factory = create_session_factory(app.state.engine)

    if settings.auto_migrate:
        await initialize_database(app, settings)

    logger.info("Application startup complete.")
    try:
        yield
    finally:
        await app.state.engine.dispose()
        logger.info("Application shutdown complete.")
