"""
Test cases for the in-memory timezone catalog
"""

import pytest

from shared.constants import TIMEZONE_MANIFEST
from timezone_service.services.catalog import (
    TimezoneCatalog,
    TimezoneDescriptor,
    derive_region,
)


def _descriptor(identifier, label, offset, region="Asia", abbreviation="X"):
    return TimezoneDescriptor(
        identifier=identifier,
        label=label,
        offset=offset,
        region=region,
        abbreviation=abbreviation,
    )


class TestTimezoneCatalog:
    """Lookup, ordering and grouping over the static manifest"""

    def test_manifest_is_fully_loaded(self, manifest_catalog):
        assert len(manifest_catalog) == len(TIMEZONE_MANIFEST) == 37

    def test_lookup_returns_every_descriptor(self, manifest_catalog):
        for descriptor in manifest_catalog.list_all():
            assert manifest_catalog.lookup(descriptor.identifier) == descriptor

    def test_lookup_tashkent(self, manifest_catalog):
        tashkent = manifest_catalog.lookup("Asia/Tashkent")

        assert tashkent is not None
        assert tashkent.offset == 5
        assert tashkent.region == "Asia"
        assert tashkent.abbreviation == "UZT"

    def test_lookup_unknown_returns_none(self, manifest_catalog):
        assert manifest_catalog.lookup("Mars/Olympus") is None
        assert "Mars/Olympus" not in manifest_catalog

    def test_lookup_is_exact_match(self, manifest_catalog):
        assert manifest_catalog.lookup("asia/tashkent") is None
        assert manifest_catalog.lookup(" Asia/Tashkent") is None

    def test_list_all_is_total_order(self, manifest_catalog):
        ordered = manifest_catalog.list_all()

        for a, b in zip(ordered, ordered[1:]):
            assert a.offset < b.offset or (
                a.offset == b.offset and a.label <= b.label
            )

    def test_list_all_bounds(self, manifest_catalog):
        ordered = manifest_catalog.list_all()

        assert ordered[0].identifier == "Pacific/Kwajalein"
        assert ordered[-1].identifier == "Pacific/Auckland"

    def test_list_all_sorts_by_label_within_offset(self, manifest_catalog):
        zero = [d.label for d in manifest_catalog.list_all() if d.offset == 0]

        assert zero == [
            "London (UTC+0)",
            "Morocco (UTC+0)",
            "Universal Time (UTC+0)",
        ]

    def test_list_all_keeps_insertion_order_on_full_ties(self):
        first = _descriptor("Asia/First", "Same (UTC+5)", 5, abbreviation="A")
        second = _descriptor("Asia/Second", "Same (UTC+5)", 5, abbreviation="B")
        earlier = _descriptor("Asia/Earlier", "Other (UTC+4)", 4)

        catalog = TimezoneCatalog([first, second, earlier])

        assert [d.identifier for d in catalog.list_all()] == [
            "Asia/Earlier",
            "Asia/First",
            "Asia/Second",
        ]

    def test_fractional_offsets_are_ordered(self, manifest_catalog):
        identifiers = [d.identifier for d in manifest_catalog.list_all()]

        assert identifiers.index("Asia/Kabul") < identifiers.index(
            "Asia/Karachi"
        )
        assert identifiers.index("Asia/Kolkata") < identifiers.index(
            "Asia/Kathmandu"
        )
        assert identifiers.index("Asia/Kathmandu") < identifiers.index(
            "Asia/Dhaka"
        )

    def test_group_by_region_partitions_list_all(self, manifest_catalog):
        grouping = manifest_catalog.group_by_region()
        ordered = manifest_catalog.list_all()

        flattened = [d for bucket in grouping.by_region.values() for d in bucket]
        assert sorted(flattened, key=ordered.index) == list(ordered)
        assert len(flattened) == len(set(flattened)) == len(ordered)

        for region, bucket in grouping.by_region.items():
            assert all(d.region == region for d in bucket)
            assert list(bucket) == [d for d in ordered if d.region == region]

    def test_group_by_region_keys_sorted(self, manifest_catalog):
        grouping = manifest_catalog.group_by_region()

        assert list(grouping.regions) == sorted(grouping.by_region)
        assert grouping.regions == (
            "Africa",
            "Americas",
            "Asia",
            "Atlantic",
            "Australia & Oceania",
            "Europe",
            "Pacific",
            "Universal",
        )

    def test_duplicate_identifier_rejected(self):
        with pytest.raises(ValueError, match="Asia/Dup"):
            TimezoneCatalog(
                [
                    _descriptor("Asia/Dup", "One", 1),
                    _descriptor("Asia/Dup", "Two", 2),
                ]
            )

    def test_shared_abbreviation_and_offset_allowed(self, manifest_catalog):
        paris = manifest_catalog.lookup("Europe/Paris")
        berlin = manifest_catalog.lookup("Europe/Berlin")

        assert paris.abbreviation == berlin.abbreviation == "CET"
        assert paris.offset == berlin.offset == 1

    def test_descriptor_is_immutable(self, manifest_catalog):
        descriptor = manifest_catalog.lookup("Asia/Kolkata")

        with pytest.raises(AttributeError):
            descriptor.offset = 0


class TestDeriveRegion:
    @pytest.mark.parametrize(
        "identifier, region",
        [
            ("America/New_York", "Americas"),
            ("Australia/Sydney", "Australia & Oceania"),
            ("Atlantic/Cape_Verde", "Atlantic"),
            ("UTC", "Universal"),
            ("Mars/Olympus", "Other"),
        ],
    )
    def test_derive_region(self, identifier, region):
        assert derive_region(identifier) == region

    def test_missing_region_is_derived(self):
        descriptor = TimezoneDescriptor.from_record(
            {
                "identifier": "Europe/Lisbon",
                "label": "Lisbon (UTC+0)",
                "offset": 0,
                "abbreviation": "WET",
            }
        )

        assert descriptor.region == "Europe"

    def test_manifest_regions_match_identifiers(self):
        for row in TIMEZONE_MANIFEST:
            assert derive_region(row["identifier"]) == row["region"]
