"""Keyword research operations behind the CLI commands.

Ties the provider client to the cache: volume lookups go through the
batch resolver, related and competitor lookups are cached whole per
``seed:limit`` and feed the volume cache through the cross-populator.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import requests

from dataforseo_cli.services.batch_resolver import BatchResolver
from dataforseo_cli.services.cache_models import (
    CompetitorRecord,
    LanguageRecord,
    LocationRecord,
    RelatedRecord,
    VolumeRecord,
    payload_adapter,
)
from dataforseo_cli.services.cache_store import CacheStoreProtocol
from dataforseo_cli.services.cross_populator import CrossPopulator
from dataforseo_cli.services.dataforseo_client import DataForSEOClient
from dataforseo_cli.shared.constants import CLIDefaults, Namespace
from dataforseo_cli.shared.errors import DataForSEOError

logger = logging.getLogger(__name__)


def seed_query(seed: str, limit: int) -> str:
    """Cache query for a whole related/competitor result set."""
    return f"{seed}:{limit}"


class KeywordResearchService:
    """Cached keyword research.

    Args:
        client: DataForSEO API client.
        store: Cache store for all namespaces.
    """

    def __init__(self, client: DataForSEOClient, store: CacheStoreProtocol) -> None:
        self.client = client
        self.store = store
        self.resolver = BatchResolver(store)
        self.populator = CrossPopulator(store)

    def search_volume(
        self,
        keywords: Sequence[str],
        location: int = CLIDefaults.LOCATION,
        language: str = CLIDefaults.LANGUAGE,
    ) -> list[VolumeRecord]:
        """Volume data for ``keywords``, in request order."""
        return self.resolver.resolve_batch(
            keywords,
            Namespace.VOLUME,
            location,
            language,
            self._fetch_volume_with_difficulty,
            VolumeRecord,
        )

    def _fetch_volume_with_difficulty(
        self,
        keywords: list[str],
        location: int,
        language: str,
    ) -> list[VolumeRecord]:
        records = self.client.fetch_volume(keywords, location, language)

        try:
            difficulty = self.client.fetch_difficulty(keywords, location, language)
        except (DataForSEOError, requests.RequestException) as e:
            logger.info("Keyword difficulty unavailable: %s", e)
            difficulty = {}

        for record in records:
            record.difficulty = difficulty.get(record.keyword)
        return records

    def related_keywords(
        self,
        seed: str,
        location: int = CLIDefaults.LOCATION,
        language: str = CLIDefaults.LANGUAGE,
        limit: int = CLIDefaults.LIMIT,
    ) -> list[RelatedRecord]:
        """Keywords suggested for ``seed``."""
        resolution = self.resolver.resolve_one(
            Namespace.RELATED,
            seed_query(seed, limit),
            location,
            language,
            lambda: self.client.fetch_related(seed, location, language, limit),
            payload_adapter(Namespace.RELATED),
        )
        if not resolution.from_cache:
            self.populator.populate(resolution.payload, location, language)
        return resolution.payload

    def competitor_keywords(
        self,
        domain: str,
        location: int = CLIDefaults.LOCATION,
        language: str = CLIDefaults.LANGUAGE,
        limit: int = CLIDefaults.LIMIT,
    ) -> list[CompetitorRecord]:
        """Keywords ``domain`` ranks for."""
        resolution = self.resolver.resolve_one(
            Namespace.COMPETITOR,
            seed_query(domain, limit),
            location,
            language,
            lambda: self.client.fetch_competitor(domain, location, language, limit),
            payload_adapter(Namespace.COMPETITOR),
        )
        if not resolution.from_cache:
            self.populator.populate(resolution.payload, location, language)
        return resolution.payload

    def locations(self, search: str | None = None) -> list[LocationRecord]:
        return self.client.locations(search)

    def languages(self, search: str | None = None) -> list[LanguageRecord]:
        return self.client.languages(search)

    def close(self) -> None:
        """Release the client's HTTP session."""
        self.client.close()
