from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from fastapi import FastAPI

from shared.constants import TIMEZONE_MANIFEST
from shared.core.config import Settings
from shared.core.logging_config import get_logger
from shared.db.sessions.database import (
    create_async_db_engine,
    create_session_factory,
    init_db,
    shutdown_db,
)
from timezone_service.services.catalog import TimezoneCatalog
from timezone_service.services.seed import TimezoneSeeder
from timezone_service.services.store import TimezoneStore

logger = get_logger(__name__)


# Lifespan event manager
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[Any, None]:
    """Create tables, seed the timezone store and load the catalog."""
    app_settings: Settings = app.state.settings
    logger.info(msg="Starting up FastAPI application...")

    engine = create_async_db_engine(app_settings.database_url)
    session_factory = create_session_factory(engine)
    try:
        await init_db(engine)
        logger.info(msg="Database initialized successfully")

        store = TimezoneStore(session_factory)
        if app_settings.TIMEZONE_SEED_ON_STARTUP:
            await TimezoneSeeder(store).seed(TIMEZONE_MANIFEST)

        app.state.timezone_catalog = await TimezoneCatalog.load(store)
    except Exception as e:
        logger.error(msg=f"Startup failed: {str(e)}")
        await engine.dispose()
        raise

    yield

    logger.info(msg="Shutting down FastAPI application...")
    app.state.timezone_catalog = None
    await shutdown_db(engine)
    logger.info(msg="Database shutdown successfully")
