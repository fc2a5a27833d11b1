"""
Test cases for the timezone store and idempotent seeding
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from shared.constants import TIMEZONE_MANIFEST
from shared.core.exceptions import InfrastructureError
from timezone_service.services.catalog import TimezoneCatalog
from timezone_service.services.seed import TimezoneSeeder
from timezone_service.services.store import TimezoneStore


class TestTimezoneStore:
    @pytest.mark.asyncio
    async def test_empty_store(self, timezone_store):
        assert await timezone_store.count() == 0
        assert await timezone_store.find_one("Asia/Tashkent") is None
        assert list(await timezone_store.find_all()) == []

    @pytest.mark.asyncio
    async def test_insert_and_find(self, timezone_store):
        inserted = await timezone_store.insert_many(TIMEZONE_MANIFEST)

        assert inserted == len(TIMEZONE_MANIFEST)
        assert await timezone_store.count() == len(TIMEZONE_MANIFEST)

        record = await timezone_store.find_one("Asia/Kathmandu")
        assert record is not None
        assert record.offset == 5.75
        assert record.label == "Nepal (UTC+5:45)"

    @pytest.mark.asyncio
    async def test_record_repr_lists_columns(self, timezone_store):
        await timezone_store.insert_many(TIMEZONE_MANIFEST[:1])

        record = await timezone_store.find_one(TIMEZONE_MANIFEST[0]["identifier"])

        assert repr(record).startswith("<Timezone(identifier=")
        assert f"label={TIMEZONE_MANIFEST[0]['label']!r}" in repr(record)
        assert not hasattr(record, "to_dict")

    @pytest.mark.asyncio
    async def test_find_all_is_sorted(self, timezone_store):
        await timezone_store.insert_many(reversed(TIMEZONE_MANIFEST))

        records = await timezone_store.find_all()
        keys = [(r.offset, r.label) for r in records]
        assert keys == sorted(keys)

    @pytest.mark.asyncio
    async def test_insert_nothing(self, timezone_store):
        assert await timezone_store.insert_many([]) == 0
        assert await timezone_store.count() == 0

    @pytest.mark.asyncio
    async def test_duplicate_insert_is_all_or_nothing(self, timezone_store):
        rows = [TIMEZONE_MANIFEST[0], TIMEZONE_MANIFEST[1], TIMEZONE_MANIFEST[0]]

        with pytest.raises(IntegrityError):
            await timezone_store.insert_many(rows)

        assert await timezone_store.count() == 0

    @pytest.mark.asyncio
    async def test_store_failure_is_infrastructure_error(self):
        session_factory = MagicMock(
            side_effect=OperationalError("SELECT", {}, Exception("down"))
        )
        store = TimezoneStore(session_factory)

        with pytest.raises(InfrastructureError):
            await store.count()
        with pytest.raises(InfrastructureError):
            await store.find_one("Asia/Tashkent")


class TestTimezoneSeeder:
    @pytest.mark.asyncio
    async def test_seed_populates_empty_store(self, timezone_store):
        inserted = await TimezoneSeeder(timezone_store).seed(TIMEZONE_MANIFEST)

        assert inserted == len(TIMEZONE_MANIFEST)
        assert await timezone_store.count() == len(TIMEZONE_MANIFEST)

    @pytest.mark.asyncio
    async def test_seed_twice_is_idempotent(self, timezone_store):
        seeder = TimezoneSeeder(timezone_store)

        assert await seeder.seed(TIMEZONE_MANIFEST) == len(TIMEZONE_MANIFEST)
        assert await seeder.seed(TIMEZONE_MANIFEST) == 0

        records = await timezone_store.find_all()
        identifiers = [r.identifier for r in records]
        assert len(identifiers) == len(set(identifiers)) == len(TIMEZONE_MANIFEST)

    @pytest.mark.asyncio
    async def test_seed_skips_non_empty_store(self, timezone_store):
        await timezone_store.insert_many(TIMEZONE_MANIFEST[:1])

        inserted = await TimezoneSeeder(timezone_store).seed(TIMEZONE_MANIFEST)

        assert inserted == 0
        assert await timezone_store.count() == 1

    @pytest.mark.asyncio
    async def test_concurrent_seeds_insert_once(self, timezone_store):
        seeder = TimezoneSeeder(timezone_store)

        results = await asyncio.gather(
            seeder.seed(TIMEZONE_MANIFEST), seeder.seed(TIMEZONE_MANIFEST)
        )

        assert sorted(results) == [0, len(TIMEZONE_MANIFEST)]
        assert await timezone_store.count() == len(TIMEZONE_MANIFEST)

    @pytest.mark.asyncio
    async def test_seed_lost_race_to_other_process(self):
        store = AsyncMock(spec=TimezoneStore)
        store.count.side_effect = [0, len(TIMEZONE_MANIFEST)]
        store.insert_many.side_effect = IntegrityError(
            "INSERT", {}, Exception("duplicate key")
        )

        assert await TimezoneSeeder(store).seed(TIMEZONE_MANIFEST) == 0

    @pytest.mark.asyncio
    async def test_seed_integrity_failure_on_empty_store(self):
        store = AsyncMock(spec=TimezoneStore)
        store.count.return_value = 0
        store.insert_many.side_effect = IntegrityError(
            "INSERT", {}, Exception("duplicate key")
        )

        with pytest.raises(InfrastructureError):
            await TimezoneSeeder(store).seed(TIMEZONE_MANIFEST)

    @pytest.mark.asyncio
    async def test_seed_propagates_store_outage(self):
        store = AsyncMock(spec=TimezoneStore)
        store.count.side_effect = InfrastructureError("down")

        with pytest.raises(InfrastructureError):
            await TimezoneSeeder(store).seed(TIMEZONE_MANIFEST)
        store.insert_many.assert_not_called()

    @pytest.mark.asyncio
    async def test_catalog_loads_seeded_store(self, timezone_store):
        await TimezoneSeeder(timezone_store).seed(TIMEZONE_MANIFEST)

        loaded = await TimezoneCatalog.load(timezone_store)
        expected = TimezoneCatalog.from_manifest(TIMEZONE_MANIFEST)

        assert loaded.list_all() == expected.list_all()
        assert loaded.lookup("Asia/Tashkent") == expected.lookup("Asia/Tashkent")
