"""Services module for dataforseo-cli.

This module contains the keyword cache (store, keys, TTL policy), the
batch resolver and cross-populator built on it, the DataForSEO API
client and the keyword research service that ties them together.
"""

from .batch_resolver import BatchResolver, SingleResolution
from .cache_keys import CacheKeyParts, make_key, parse_key
from .cache_models import (
    CacheEntry,
    CompetitorRecord,
    LanguageRecord,
    LocationRecord,
    RelatedRecord,
    VolumeRecord,
    payload_adapter,
)
from .cache_store import (
    BaseCacheStore,
    CacheStoreProtocol,
    InMemoryCacheStore,
    JsonFileCacheStore,
)
from .cross_populator import CrossPopulator
from .dataforseo_client import DataForSEOClient
from .keyword_service import KeywordResearchService
from .ttl_policy import TTLPolicy

__all__ = [
    "BaseCacheStore",
    "BatchResolver",
    "CacheEntry",
    "CacheKeyParts",
    "CacheStoreProtocol",
    "CompetitorRecord",
    "CrossPopulator",
    "DataForSEOClient",
    "InMemoryCacheStore",
    "JsonFileCacheStore",
    "KeywordResearchService",
    "LanguageRecord",
    "LocationRecord",
    "RelatedRecord",
    "SingleResolution",
    "TTLPolicy",
    "VolumeRecord",
    "make_key",
    "parse_key",
    "payload_adapter",
]
