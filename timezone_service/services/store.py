from typing import Any, Iterable, Optional, Sequence

from sqlalchemy import func, insert, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from shared.core.exceptions import InfrastructureError
from shared.core.logging_config import get_logger
from shared.db.models import Timezone

logger = get_logger(__name__)


class TimezoneStore:
    """Key-value style access to persisted timezone records."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def count(self) -> int:
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    select(func.count()).select_from(Timezone)
                )
                return int(result.scalar_one())
        except SQLAlchemyError as e:
            logger.error("Failed to count timezones: %s", e)
            raise InfrastructureError("Failed to count timezones") from e

    async def find_one(self, identifier: str) -> Optional[Timezone]:
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    select(Timezone).where(Timezone.identifier == identifier)
                )
                return result.scalars().first()
        except SQLAlchemyError as e:
            logger.error("Failed to fetch timezone %s: %s", identifier, e)
            raise InfrastructureError("Failed to fetch timezone") from e

    async def find_all(self) -> Sequence[Timezone]:
        """Every record, ordered by offset then label."""
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    select(Timezone).order_by(
                        Timezone.offset.asc(), Timezone.label.asc()
                    )
                )
                return result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Failed to fetch timezones: %s", e)
            raise InfrastructureError("Failed to fetch timezones") from e

    async def insert_many(self, records: Iterable[dict[str, Any]]) -> int:
        """
        Insert all records in a single transaction.

        Nothing is committed unless every row is written. A unique-key
        violation is re-raised as ``IntegrityError`` so callers can tell a
        concurrent seed apart from an unavailable store.
        """
        rows = [dict(record) for record in records]
        if not rows:
            return 0
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    await session.execute(insert(Timezone), rows)
        except IntegrityError:
            raise
        except SQLAlchemyError as e:
            logger.error("Failed to insert timezones: %s", e)
            raise InfrastructureError(
                "Failed to insert timezones", details={"rows": len(rows)}
            ) from e
        return len(rows)
