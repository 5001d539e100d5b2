"""Tests for cache-first batch resolution."""

from __future__ import annotations

import pytest

from dataforseo_cli.services.batch_resolver import BatchResolver
from dataforseo_cli.services.cache_keys import make_key
from dataforseo_cli.services.cache_models import RelatedRecord, VolumeRecord, payload_adapter
from dataforseo_cli.shared.constants import Cache, Namespace
from dataforseo_cli.shared.errors import ErrorCode, ProviderError


class RecordingFetch:
    """Fetch function that answers from a table and records its calls."""

    def __init__(self, known: dict[str, int]) -> None:
        self.known = known
        self.calls: list[list[str]] = []

    def __call__(self, items, location, language):
        self.calls.append(list(items))
        return [
            VolumeRecord(keyword=item, volume=self.known[item.lower()])
            for item in items
            if item.lower() in self.known
        ]


def _seed(store, keyword: str, volume: int) -> None:
    store.set(
        make_key(Namespace.VOLUME, keyword, 2840, "en"),
        VolumeRecord(keyword=keyword, volume=volume).model_dump(mode="json"),
    )


@pytest.fixture
def resolver(memory_store):
    return BatchResolver(memory_store)


def _resolve(resolver, items, fetch):
    return resolver.resolve_batch(items, Namespace.VOLUME, 2840, "en", fetch, VolumeRecord)


class TestResolveBatch:
    """Test BatchResolver.resolve_batch."""

    def test_all_misses_fetched_once_in_order(self, resolver):
        """Test all misses are fetched in one call and returned in order."""
        fetch = RecordingFetch({"a": 1, "b": 2, "c": 3})

        result = _resolve(resolver, ["c", "a", "b"], fetch)

        assert [r.keyword for r in result] == ["c", "a", "b"]
        assert fetch.calls == [["c", "a", "b"]]

    def test_all_hits_do_not_fetch(self, resolver, memory_store):
        """Test a fully cached batch never calls the fetcher."""
        _seed(memory_store, "a", 1)
        _seed(memory_store, "b", 2)
        fetch = RecordingFetch({})

        result = _resolve(resolver, ["b", "a"], fetch)

        assert [(r.keyword, r.volume) for r in result] == [("b", 2), ("a", 1)]
        assert fetch.calls == []

    def test_partial_hit_fetches_only_misses(self, resolver, memory_store):
        """Test only uncached items are passed to the fetcher."""
        _seed(memory_store, "a", 1)
        fetch = RecordingFetch({"b": 2, "c": 3})

        result = _resolve(resolver, ["a", "b", "c"], fetch)

        assert fetch.calls == [["b", "c"]]
        assert [(r.keyword, r.volume) for r in result] == [("a", 1), ("b", 2), ("c", 3)]

    def test_fetched_records_are_cached_individually(self, resolver, memory_store):
        """Test each fetched record is stored under its own key."""
        _resolve(resolver, ["a", "b"], RecordingFetch({"a": 1, "b": 2}))

        entry = memory_store.get(make_key(Namespace.VOLUME, "b", 2840, "en"))
        assert VolumeRecord.model_validate(entry.data).volume == 2

    def test_second_call_is_served_from_cache(self, resolver):
        """Test a repeated batch is served from the cache."""
        fetch = RecordingFetch({"a": 1, "b": 2})

        first = _resolve(resolver, ["a", "b"], fetch)
        second = _resolve(resolver, ["a", "b"], fetch)

        assert first == second
        assert len(fetch.calls) == 1

    def test_unknown_items_are_dropped(self, resolver):
        """Test items the provider omits are left out of the result."""
        fetch = RecordingFetch({"a": 1})

        result = _resolve(resolver, ["a", "zzz"], fetch)

        assert [r.keyword for r in result] == ["a"]

    def test_unknown_items_are_refetched_next_time(self, resolver):
        """Test omitted items are not cached and are asked for again."""
        fetch = RecordingFetch({"a": 1})

        _resolve(resolver, ["a", "zzz"], fetch)
        _resolve(resolver, ["a", "zzz"], fetch)

        assert fetch.calls == [["a", "zzz"], ["zzz"]]

    def test_case_insensitive_order_matching(self, resolver):
        """Test records match request items regardless of case."""
        def fetch(items, location, language):
            return [VolumeRecord(keyword=item.lower(), volume=5) for item in items]

        result = _resolve(resolver, ["Coffee"], fetch)

        assert [r.keyword for r in result] == ["coffee"]

    def test_duplicates_fetched_once_emitted_each_time(self, resolver):
        """Test duplicate items are fetched once and emitted per occurrence."""
        fetch = RecordingFetch({"a": 1})

        result = _resolve(resolver, ["a", "A", "a"], fetch)

        assert fetch.calls == [["a"]]
        assert len(result) == 3

    def test_expired_entry_is_refetched(self, resolver, memory_store, clock):
        """Test an entry past its TTL counts as a miss."""
        _seed(memory_store, "a", 1)
        clock.advance(Cache.TTL_MS)
        fetch = RecordingFetch({"a": 9})

        result = _resolve(resolver, ["a"], fetch)

        assert fetch.calls == [["a"]]
        assert result[0].volume == 9

    def test_wrongly_shaped_cache_entry_is_a_miss(self, resolver, memory_store):
        """Test a cached payload of the wrong shape is refetched."""
        memory_store.set(make_key(Namespace.VOLUME, "a", 2840, "en"), ["not", "a", "record"])
        fetch = RecordingFetch({"a": 1})

        result = _resolve(resolver, ["a"], fetch)

        assert fetch.calls == [["a"]]
        assert result[0].volume == 1

    def test_fetch_failure_propagates_and_writes_nothing(self, resolver, memory_store):
        """Test a failing fetch raises and leaves the cache untouched."""
        _seed(memory_store, "a", 1)
        blob_before = memory_store.blob

        def failing_fetch(items, location, language):
            raise ProviderError(ErrorCode.API_REQUEST_FAILED, 40101, "Authentication failed")

        with pytest.raises(ProviderError, match="40101"):
            _resolve(resolver, ["a", "b"], failing_fetch)

        assert memory_store.blob == blob_before

    def test_empty_request(self, resolver):
        """Test an empty request returns nothing without fetching."""
        fetch = RecordingFetch({})
        assert _resolve(resolver, [], fetch) == []
        assert fetch.calls == []


class TestResolveOne:
    """Test BatchResolver.resolve_one."""

    def test_miss_then_hit(self, resolver):
        """Test resolve_one fetches once and then serves from cache."""
        calls = []

        def fetch():
            calls.append(1)
            return [RelatedRecord(keyword="coffee beans", volume=100)]

        adapter = payload_adapter(Namespace.RELATED)
        first = resolver.resolve_one(Namespace.RELATED, "coffee:50", 2840, "en", fetch, adapter)
        second = resolver.resolve_one(Namespace.RELATED, "coffee:50", 2840, "en", fetch, adapter)

        assert first.from_cache is False
        assert second.from_cache is True
        assert second.payload == first.payload
        assert calls == [1]

    def test_empty_cached_list_is_a_hit(self, resolver):
        """Test a cached empty result set is not refetched."""
        adapter = payload_adapter(Namespace.RELATED)
        resolver.resolve_one(Namespace.RELATED, "x:5", 2840, "en", lambda: [], adapter)

        result = resolver.resolve_one(
            Namespace.RELATED,
            "x:5",
            2840,
            "en",
            lambda: pytest.fail("should not fetch"),
            adapter,
        )

        assert result.from_cache is True
        assert result.payload == []

    def test_limit_is_part_of_the_key(self, resolver):
        """Test different limits are cached separately."""
        adapter = payload_adapter(Namespace.RELATED)
        resolver.resolve_one(Namespace.RELATED, "coffee:10", 2840, "en", lambda: [], adapter)

        result = resolver.resolve_one(
            Namespace.RELATED,
            "coffee:20",
            2840,
            "en",
            lambda: [RelatedRecord(keyword="k")],
            adapter,
        )

        assert result.from_cache is False
