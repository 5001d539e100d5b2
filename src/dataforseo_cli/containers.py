"""Dependency Injection container for dataforseo-cli.

This module provides a centralized DI container using dependency-injector
so CLI commands never wire services by hand.

The container manages:
- Settings (Singleton)
- Cache store (JsonFileCacheStore with the configured TTL)
- DataForSEO API client
- Keyword research service
"""

from __future__ import annotations

from dependency_injector import containers, providers

from dataforseo_cli.config.loader import get_config
from dataforseo_cli.services import (
    DataForSEOClient,
    JsonFileCacheStore,
    KeywordResearchService,
    TTLPolicy,
)


class Container(containers.DeclarativeContainer):
    """Dependency Injection container for dataforseo-cli services.

    Example:
        >>> container = Container()
        >>> service = container.keyword_service()
        >>> service.search_volume(["seo tools"])
    """

    # Configuration
    config = providers.Singleton(get_config)

    # Cache
    ttl_policy = providers.Factory(
        TTLPolicy.from_seconds,
        ttl_seconds=config.provided.cache.ttl_seconds,
    )

    cache_store = providers.Factory(
        JsonFileCacheStore,
        path=config.provided.cache.path,
        ttl_policy=ttl_policy,
    )

    # DataForSEO client
    api_client = providers.Factory(
        DataForSEOClient,
        api_settings=config.provided.api,
    )

    # Keyword research
    keyword_service = providers.Factory(
        KeywordResearchService,
        client=api_client,
        store=cache_store,
    )

