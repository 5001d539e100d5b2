"""Cross-population of the volume cache.

Related and competitor responses already carry volume, CPC and difficulty
for every keyword they list. Storing those as ``volume`` entries makes a
later ``volume`` lookup for the same keywords a cache hit.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from dataforseo_cli.services.cache_keys import make_key
from dataforseo_cli.services.cache_models import (
    CompetitorRecord,
    RelatedRecord,
    VolumeRecord,
)
from dataforseo_cli.services.cache_store import CacheStoreProtocol
from dataforseo_cli.shared.constants import Namespace

logger = logging.getLogger(__name__)


def _competition_text(record: RelatedRecord | CompetitorRecord) -> str:
    if isinstance(record, RelatedRecord):
        return format(record.competition, "g")
    return ""


def derive_volume_record(record: RelatedRecord | CompetitorRecord) -> VolumeRecord:
    """Build the volume entry a related or competitor record implies.

    There is no monthly trend in either source, so ``trend`` is empty.
    """
    return VolumeRecord(
        keyword=record.keyword,
        volume=record.volume,
        cpc=record.cpc,
        competition=_competition_text(record),
        difficulty=record.difficulty,
        trend=[],
    )


class CrossPopulator:
    """Derive ``volume`` entries from related/competitor records.

    Args:
        store: Cache store shared with the batch resolver.
    """

    def __init__(self, store: CacheStoreProtocol) -> None:
        self._store = store

    def populate(
        self,
        records: Iterable[RelatedRecord | CompetitorRecord],
        location: int,
        language: str,
    ) -> int:
        """Insert a volume entry for every keyword that has no fresh one.

        Returns:
            Number of entries inserted
        """
        inserted = 0
        for record in records:
            if not record.keyword:
                continue
            key = make_key(Namespace.VOLUME, record.keyword, location, language)
            if self._store.get(key) is not None:
                continue
            self._store.set(key, derive_volume_record(record).model_dump(mode="json"))
            inserted += 1

        if inserted:
            logger.debug(
                "Cross-populated %d volume entries",
                inserted,
                extra={"context": {"location": location, "language": language}},
            )
        return inserted
