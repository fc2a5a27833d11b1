from typing import Any

from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from shared.constants import (
    MAX_OVERFLOW,
    POOL_RECYCLE,
    POOL_SIZE,
    POOL_TIMEOUT,
)
from shared.core.logging_config import get_logger
from shared.db.models import TimezonesBase

logger = get_logger(__name__)

# --------------------- Engine & Session Helpers ---------------------


def create_async_db_engine(db_url: str) -> AsyncEngine:
    """Create and return an asynchronous SQLAlchemy engine from the given URL."""
    if db_url.startswith("sqlite"):
        # In-memory SQLite needs a single shared connection
        kwargs: dict[str, Any] = {
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
        }
    else:
        kwargs = {
            "pool_size": POOL_SIZE,
            "max_overflow": MAX_OVERFLOW,
            "pool_timeout": POOL_TIMEOUT,
            "pool_pre_ping": True,
            "pool_recycle": POOL_RECYCLE,
            "isolation_level": "READ COMMITTED",
        }
    return create_async_engine(url=db_url, echo=False, future=True, **kwargs)


def create_session_factory(
    engine: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    """Create and return a sessionmaker bound to the given engine."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


# --------------------- Lifecycle Hooks ---------------------


@retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=10),
    retry=retry_if_exception_type(OperationalError),
    reraise=True,
    after=lambda state: logger.warning(
        f"Retrying DB initialization (attempt {state.attempt_number})"
    ),
)
async def init_db(engine: AsyncEngine) -> None:
    """Create all tables defined in TimezonesBase.metadata."""
    try:
        async with engine.begin() as conn:
            logger.info("Creating database tables if they do not exist...")
            await conn.run_sync(TimezonesBase.metadata.create_all, checkfirst=True)
    except OperationalError as e:
        logger.error("Operational error while connecting to DB: %s", str(e))
        raise


async def shutdown_db(engine: AsyncEngine) -> None:
    """Dispose of the engine's pooled connections."""
    logger.info("Shutting down DB engine")
    await engine.dispose()
