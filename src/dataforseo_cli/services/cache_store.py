"""Persistent key/value cache with TTL.

The whole store is one JSON object ``{key: {"data": ..., "ts": ms}}``.
Every operation reloads the backing blob, so there is no long-lived
in-memory state; this suits a short-lived CLI process. Reads tolerate a
missing or corrupted blob (treated as empty) and writes are best effort:
a failed write is logged and the cache simply stays as it was.

Saves write a sibling temp file and rename it over the cache file, so a
reader never sees a half-written file. There is no locking: two
processes saving at once still resolve as last-save-wins.
"""

from __future__ import annotations

import contextlib
import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Protocol

import orjson
from pydantic import ValidationError

from dataforseo_cli.services.cache_models import CacheEntry
from dataforseo_cli.services.ttl_policy import Clock, TTLPolicy, now_ms
from dataforseo_cli.shared.constants import Cache

logger = logging.getLogger(__name__)

__all__ = [
    "BaseCacheStore",
    "CacheStoreProtocol",
    "InMemoryCacheStore",
    "JsonFileCacheStore",
]


class CacheStoreProtocol(Protocol):
    """Interface the batch resolver and cross-populator depend on."""

    ttl_policy: TTLPolicy

    def load(self) -> dict[str, CacheEntry]: ...

    def save(self, entries: dict[str, CacheEntry]) -> None: ...

    def get(self, key: str) -> CacheEntry | None: ...

    def set(self, key: str, payload: Any) -> None: ...

    def fresh_entries(self) -> dict[str, CacheEntry]: ...

    def now(self) -> int: ...


class BaseCacheStore(ABC):
    """Load/save/get/set over an opaque backing blob.

    Subclasses only supply raw byte access to the blob.

    Args:
        ttl_policy: Freshness rule for reads, pruning and listings.
        clock: Millisecond clock, injectable for tests.
    """

    def __init__(
        self,
        ttl_policy: TTLPolicy | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.ttl_policy = ttl_policy or TTLPolicy()
        self._clock = clock or now_ms

    @abstractmethod
    def _read_blob(self) -> bytes | None:
        """Return the stored bytes, or None when nothing is stored yet."""

    @abstractmethod
    def _write_blob(self, blob: bytes) -> None:
        """Replace the stored bytes."""

    def now(self) -> int:
        return self._clock()

    def load(self) -> dict[str, CacheEntry]:
        """Read the whole store. Never raises; bad state loads as empty."""
        try:
            blob = self._read_blob()
        except OSError as e:
            logger.debug("Cache read failed, treating as empty: %s", e)
            return {}

        if not blob:
            return {}

        try:
            parsed = orjson.loads(blob)
        except orjson.JSONDecodeError as e:
            logger.debug("Cache is corrupted, treating as empty: %s", e)
            return {}

        if not isinstance(parsed, dict):
            logger.debug(
                "Cache root is %s, not an object; treating as empty",
                type(parsed).__name__,
            )
            return {}

        entries: dict[str, CacheEntry] = {}
        for key, raw_entry in parsed.items():
            try:
                entries[key] = CacheEntry.model_validate(raw_entry)
            except ValidationError:
                logger.debug("Dropping malformed cache entry '%s'", key)
        return entries

    def save(self, entries: dict[str, CacheEntry]) -> None:
        """Prune entries that are no longer fresh, then write the rest."""
        now = self.now()
        pruned = {
            key: entry.model_dump(mode="json")
            for key, entry in entries.items()
            if self.ttl_policy.is_fresh(entry, now)
        }
        try:
            self._write_blob(orjson.dumps(pruned))
        except (OSError, orjson.JSONEncodeError) as e:
            logger.debug(
                "Cache write failed, continuing without caching: %s",
                e,
                extra={"context": {"entries": len(pruned)}},
            )
            return

        dropped = len(entries) - len(pruned)
        if dropped:
            logger.debug("Pruned %d expired cache entries", dropped)

    def get(self, key: str) -> CacheEntry | None:
        entry = self.load().get(key)
        if entry is None or not self.ttl_policy.is_fresh(entry, self.now()):
            return None
        return entry

    def set(self, key: str, payload: Any) -> None:
        entries = self.load()
        ts = self.now()
        previous = entries.get(key)
        if previous is not None:
            ts = max(ts, previous.ts)
        entries[key] = CacheEntry(data=payload, ts=ts)
        self.save(entries)

    def fresh_entries(self) -> dict[str, CacheEntry]:
        """All entries that a ``get`` would currently return."""
        now = self.now()
        return {
            key: entry
            for key, entry in self.load().items()
            if self.ttl_policy.is_fresh(entry, now)
        }


class JsonFileCacheStore(BaseCacheStore):
    """Cache backed by a single JSON file.

    Args:
        path: Cache file location; parent directories are created on save.
    """

    def __init__(
        self,
        path: Path | str,
        ttl_policy: TTLPolicy | None = None,
        clock: Clock | None = None,
    ) -> None:
        super().__init__(ttl_policy=ttl_policy, clock=clock)
        self.path = Path(path)

    def _read_blob(self) -> bytes | None:
        if not self.path.exists():
            return None
        return self.path.read_bytes()

    def _write_blob(self, blob: bytes) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self.path.with_name(self.path.name + Cache.TEMP_SUFFIX)
        try:
            with open(temp_path, "wb") as f:
                f.write(blob)
            os.replace(temp_path, self.path)
        except OSError:
            with contextlib.suppress(OSError):
                temp_path.unlink()
            raise


class InMemoryCacheStore(BaseCacheStore):
    """Cache held in a bytes buffer, with the same semantics as the file store."""

    def __init__(
        self,
        ttl_policy: TTLPolicy | None = None,
        clock: Clock | None = None,
        blob: bytes | None = None,
    ) -> None:
        super().__init__(ttl_policy=ttl_policy, clock=clock)
        self.blob = blob

    def _read_blob(self) -> bytes | None:
        return self.blob

    def _write_blob(self, blob: bytes) -> None:
        self.blob = blob
