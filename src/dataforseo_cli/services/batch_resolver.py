"""Batch resolution over the keyword cache.

Given the items of a request, the resolver serves what it can from the
cache, fetches everything else in one provider call, caches each fetched
record under its own key and returns the records in request order.
Items the provider did not answer are left out of the result.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from dataforseo_cli.services.cache_keys import fold, make_key
from dataforseo_cli.services.cache_models import CacheEntry, KeywordRecord
from dataforseo_cli.services.cache_store import CacheStoreProtocol
from dataforseo_cli.shared.constants import Namespace
from dataforseo_cli.shared.logging import log_operation_start, log_operation_success

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=KeywordRecord)
PayloadT = TypeVar("PayloadT")

BatchFetch = Callable[[list[str], int, str], Sequence[RecordT]]


@dataclass(frozen=True)
class SingleResolution(Generic[PayloadT]):
    """Result of a single-key lookup."""

    payload: PayloadT
    from_cache: bool


class BatchResolver:
    """Cache-first resolution of keyword requests.

    Args:
        store: Cache store consulted and written per item.
    """

    def __init__(self, store: CacheStoreProtocol) -> None:
        self._store = store

    def resolve_batch(
        self,
        items: Sequence[str],
        namespace: Namespace,
        location: int,
        language: str,
        fetch_fn: BatchFetch[RecordT],
        record_type: type[RecordT],
    ) -> list[RecordT]:
        """Resolve ``items`` through the cache, fetching misses in one batch.

        Args:
            items: Requested identifiers, in output order.
            namespace: Cache namespace of the records.
            location: Location code, part of every key.
            language: Language code, part of every key.
            fetch_fn: Called once with all misses; may omit unknown items.
            record_type: Model used to decode cached payloads.

        Returns:
            One record per item that has one, in input order. Duplicate
            items (ignoring case) are fetched once and emitted each time.

        Raises:
            Whatever ``fetch_fn`` raises. Cache hits are read beforehand and
            nothing is written for a failed fetch.
        """
        start = time.perf_counter()
        log_operation_start(
            logger,
            "resolve_batch",
            {"namespace": namespace.value, "items": len(items)},
        )

        hits: dict[str, RecordT] = {}
        misses: list[str] = []
        pending: set[str] = set()

        for item in items:
            folded = fold(item)
            if folded in hits or folded in pending:
                continue
            key = make_key(namespace, item, location, language)
            record = self._decode_record(self._store.get(key), record_type, key)
            if record is not None:
                hits[folded] = record
            else:
                misses.append(item)
                pending.add(folded)

        fetched: list[RecordT] = []
        if misses:
            logger.debug(
                "Cache miss for %d of %d %s items, fetching",
                len(misses),
                len(items),
                namespace.value,
            )
            fetched = list(fetch_fn(misses, location, language))
            for record in fetched:
                if not record.keyword:
                    continue
                self._store.set(
                    make_key(namespace, record.keyword, location, language),
                    record.model_dump(mode="json"),
                )

        by_identifier: dict[str, RecordT] = dict(hits)
        for record in fetched:
            by_identifier[fold(record.keyword)] = record

        resolved = [
            by_identifier[fold(item)] for item in items if fold(item) in by_identifier
        ]

        log_operation_success(
            logger,
            "resolve_batch",
            duration_ms=(time.perf_counter() - start) * 1000,
            result_info={
                "hits": len(hits),
                "misses": len(misses),
                "returned": len(resolved),
            },
        )
        return resolved

    def resolve_one(
        self,
        namespace: Namespace,
        query: str,
        location: int,
        language: str,
        fetch_fn: Callable[[], PayloadT],
        adapter: TypeAdapter[PayloadT],
    ) -> SingleResolution[PayloadT]:
        """Read-through lookup of one key whose payload is a whole result set."""
        key = make_key(namespace, query, location, language)
        entry = self._store.get(key)
        if entry is not None:
            try:
                return SingleResolution(adapter.validate_python(entry.data), True)
            except ValidationError:
                logger.debug("Cached payload for '%s' has the wrong shape, refetching", key)

        payload = fetch_fn()
        self._store.set(key, adapter.dump_python(payload, mode="json"))
        return SingleResolution(payload, False)

    @staticmethod
    def _decode_record(
        entry: CacheEntry | None,
        record_type: type[RecordT],
        key: str,
    ) -> RecordT | None:
        if entry is None:
            return None
        try:
            return record_type.model_validate(entry.data)
        except ValidationError:
            logger.debug("Cached record for '%s' has the wrong shape, refetching", key)
            return None
