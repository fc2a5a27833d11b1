import asyncio
from typing import Any, Iterable, Mapping

from sqlalchemy.exc import IntegrityError

from shared.core.exceptions import InfrastructureError
from shared.core.logging_config import get_logger
from timezone_service.services.store import TimezoneStore

logger = get_logger(__name__)


class TimezoneSeeder:
    """
    One-time bootstrap of the timezone store from a static manifest.

    Seeding runs under a lock so concurrent callers in one process never
    both insert. Another process seeding at the same moment trips the unique
    key on ``identifier``; that insert is rolled back and the store is
    re-counted.
    """

    def __init__(self, store: TimezoneStore):
        self._store = store
        self._lock = asyncio.Lock()

    async def seed(self, manifest: Iterable[Mapping[str, Any]]) -> int:
        """Insert the manifest when the store is empty. Returns rows inserted."""
        async with self._lock:
            existing = await self._store.count()
            if existing > 0:
                logger.info(
                    "Timezone store already holds %d records, skipping seed",
                    existing,
                )
                return 0

            try:
                inserted = await self._store.insert_many(manifest)
            except IntegrityError as e:
                if await self._store.count() > 0:
                    logger.warning(
                        "Timezone store was seeded concurrently, skipping seed"
                    )
                    return 0
                raise InfrastructureError(
                    "Failed to seed timezone store"
                ) from e

            logger.info("Timezone store seeded with %d records", inserted)
            return inserted
