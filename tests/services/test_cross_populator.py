"""Tests for volume cache cross-population."""

from __future__ import annotations

from dataforseo_cli.services.cache_keys import make_key
from dataforseo_cli.services.cache_models import (
    CompetitorRecord,
    RelatedRecord,
    VolumeRecord,
)
from dataforseo_cli.services.cross_populator import CrossPopulator, derive_volume_record
from dataforseo_cli.shared.constants import Cache, Namespace


def _volume(store, keyword: str) -> VolumeRecord | None:
    entry = store.get(make_key(Namespace.VOLUME, keyword, 2840, "en"))
    return None if entry is None else VolumeRecord.model_validate(entry.data)


class TestDeriveVolumeRecord:
    """Test derive_volume_record."""

    def test_from_related(self):
        """Test a related record becomes a volume record."""
        record = derive_volume_record(
            RelatedRecord(keyword="k", volume=10, cpc=1.5, competition=0.25, difficulty=40)
        )
        assert record == VolumeRecord(
            keyword="k", volume=10, cpc=1.5, competition="0.25", difficulty=40, trend=[]
        )

    def test_from_competitor_has_blank_competition(self):
        """Test a competitor record yields blank competition."""
        record = derive_volume_record(
            CompetitorRecord(keyword="k", position=3, volume=10, cpc=2.0, url="https://x")
        )
        assert record.competition == ""
        assert record.difficulty is None
        assert record.trend == []


class TestCrossPopulator:
    """Test CrossPopulator.populate."""

    def test_inserts_missing_entries(self, memory_store):
        """Test volume entries are inserted for uncached keywords."""
        populator = CrossPopulator(memory_store)

        inserted = populator.populate(
            [RelatedRecord(keyword="a", volume=1), RelatedRecord(keyword="b", volume=2)],
            2840,
            "en",
        )

        assert inserted == 2
        assert _volume(memory_store, "b").volume == 2

    def test_never_overwrites_fresh_entry(self, memory_store):
        """Test a fresh volume entry is left as it is."""
        original = VolumeRecord(keyword="a", volume=999, trend=[1, 2, 3])
        memory_store.set(
            make_key(Namespace.VOLUME, "a", 2840, "en"), original.model_dump(mode="json")
        )

        inserted = CrossPopulator(memory_store).populate(
            [RelatedRecord(keyword="A", volume=1)], 2840, "en"
        )

        assert inserted == 0
        assert _volume(memory_store, "a") == original

    def test_replaces_expired_entry(self, memory_store, clock):
        """Test an expired volume entry is replaced."""
        memory_store.set(
            make_key(Namespace.VOLUME, "a", 2840, "en"),
            VolumeRecord(keyword="a", volume=999).model_dump(mode="json"),
        )
        clock.advance(Cache.TTL_MS)

        inserted = CrossPopulator(memory_store).populate(
            [CompetitorRecord(keyword="a", volume=5)], 2840, "en"
        )

        assert inserted == 1
        assert _volume(memory_store, "a").volume == 5

    def test_skips_records_without_keyword(self, memory_store):
        """Test records with an empty keyword are skipped."""
        inserted = CrossPopulator(memory_store).populate(
            [CompetitorRecord(keyword="", volume=5)], 2840, "en"
        )

        assert inserted == 0
        assert memory_store.fresh_entries() == {}
