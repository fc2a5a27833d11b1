"""
Seed the timezone store outside of application startup.

    python seed_timezones.py                   # seed if empty
    python seed_timezones.py --lookup Asia/Tashkent
"""

import argparse
import asyncio
from typing import Optional, Sequence

from shared.constants import TIMEZONE_MANIFEST
from shared.core.config import get_settings
from shared.core.logging_config import get_logger
from shared.db.sessions.database import (
    create_async_db_engine,
    create_session_factory,
    init_db,
    shutdown_db,
)
from timezone_service.services.seed import TimezoneSeeder
from timezone_service.services.store import TimezoneStore

logger = get_logger(__name__)


async def run(database_url: str, lookup: Optional[str] = None) -> int:
    engine = create_async_db_engine(database_url)
    try:
        await init_db(engine)
        store = TimezoneStore(create_session_factory(engine))
        inserted = await TimezoneSeeder(store).seed(TIMEZONE_MANIFEST)
        logger.info(
            "Seed finished: %d inserted, %d stored", inserted, await store.count()
        )

        if lookup:
            record = await store.find_one(lookup)
            if record is None:
                logger.warning("Timezone not found: %s", lookup)
            else:
                logger.info("Found timezone: %r", record)
        return inserted
    finally:
        await shutdown_db(engine)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument(
        "--database-url",
        default=None,
        help="Override the configured database URL.",
    )
    parser.add_argument(
        "--lookup",
        metavar="IDENTIFIER",
        default=None,
        help="Print one stored timezone after seeding, e.g. Asia/Tashkent.",
    )
    args = parser.parse_args(argv)

    asyncio.run(
        run(args.database_url or get_settings().database_url, args.lookup)
    )


if __name__ == "__main__":
    main()
