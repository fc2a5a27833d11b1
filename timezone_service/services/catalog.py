"""
In-memory timezone catalog.

The catalog is built once at startup from the seeded store and is read-only
afterwards, so it can be shared by every request without locking.
"""

from dataclasses import asdict, dataclass
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional

from shared.constants import (
    TIMEZONE_REGION_PREFIXES,
    UNIVERSAL_REGION,
    UNIVERSAL_TIMEZONE,
    UNKNOWN_REGION,
)
from shared.core.logging_config import get_logger
from timezone_service.services.store import TimezoneStore

logger = get_logger(__name__)


@dataclass(frozen=True)
class TimezoneDescriptor:
    """One supported timezone. Only ``offset`` takes part in conversions."""

    identifier: str
    label: str
    offset: float
    region: str
    abbreviation: str

    @classmethod
    def from_record(cls, record: Any) -> "TimezoneDescriptor":
        """
        Build from a manifest dict or an ORM row. A missing region is
        derived from the identifier prefix.
        """
        if not isinstance(record, Mapping):
            record = {
                name: getattr(record, name)
                for name in (
                    "identifier",
                    "label",
                    "offset",
                    "region",
                    "abbreviation",
                )
            }
        identifier = record["identifier"]
        return cls(
            identifier=identifier,
            label=record["label"],
            offset=float(record["offset"]),
            region=record.get("region") or derive_region(identifier),
            abbreviation=record["abbreviation"],
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class RegionGrouping:
    by_region: Mapping[str, tuple[TimezoneDescriptor, ...]]
    regions: tuple[str, ...]


def derive_region(identifier: str) -> str:
    """Map a ``Region/City`` identifier to its display region."""
    if identifier == UNIVERSAL_TIMEZONE:
        return UNIVERSAL_REGION
    for prefix, region in TIMEZONE_REGION_PREFIXES:
        if identifier.startswith(prefix):
            return region
    return UNKNOWN_REGION


class TimezoneCatalog:
    """Immutable lookup table of timezone descriptors keyed by identifier."""

    def __init__(self, descriptors: Iterable[TimezoneDescriptor]):
        by_identifier: dict[str, TimezoneDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.identifier in by_identifier:
                raise ValueError(
                    f"Duplicate timezone identifier: {descriptor.identifier}"
                )
            by_identifier[descriptor.identifier] = descriptor

        self._by_identifier = MappingProxyType(by_identifier)
        # sorted() is stable, so full ties keep insertion order
        self._ordered = tuple(
            sorted(by_identifier.values(), key=lambda d: (d.offset, d.label))
        )
        self._grouping = self._group(self._ordered)

    @classmethod
    def from_manifest(
        cls, manifest: Iterable[Mapping[str, Any]]
    ) -> "TimezoneCatalog":
        return cls(TimezoneDescriptor.from_record(row) for row in manifest)

    @classmethod
    async def load(cls, store: TimezoneStore) -> "TimezoneCatalog":
        """Read every persisted record into a new catalog."""
        records = await store.find_all()
        catalog = cls(TimezoneDescriptor.from_record(r) for r in records)
        logger.info("Loaded %d timezones into the catalog", len(catalog))
        return catalog

    @staticmethod
    def _group(ordered: tuple[TimezoneDescriptor, ...]) -> RegionGrouping:
        buckets: dict[str, list[TimezoneDescriptor]] = {}
        for descriptor in ordered:
            buckets.setdefault(descriptor.region, []).append(descriptor)
        return RegionGrouping(
            by_region=MappingProxyType(
                {region: tuple(items) for region, items in buckets.items()}
            ),
            regions=tuple(sorted(buckets)),
        )

    def __len__(self) -> int:
        return len(self._ordered)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._by_identifier

    def lookup(self, identifier: str) -> Optional[TimezoneDescriptor]:
        """Exact match on identifier. ``None`` means not found."""
        return self._by_identifier.get(identifier)

    def list_all(self) -> tuple[TimezoneDescriptor, ...]:
        return self._ordered

    def group_by_region(self) -> RegionGrouping:
        return self._grouping
