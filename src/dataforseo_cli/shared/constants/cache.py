"""
Cache Configuration Constants

TTL, namespaces and key layout for the persistent keyword cache.
"""

from enum import Enum

# Base time units for TTL calculations (milliseconds)
BASE_MS = 1
BASE_SECOND_MS = 1000 * BASE_MS
BASE_DAY_MS = 24 * 60 * 60 * BASE_SECOND_MS


class Namespace(str, Enum):
    """Logical command a cache entry belongs to."""

    VOLUME = "volume"
    RELATED = "related"
    COMPETITOR = "competitor"


class Cache:
    """Cache configuration constants."""

    TTL_SECONDS = 7 * 24 * 60 * 60  # 7 days
    TTL_MS = 7 * BASE_DAY_MS
    DAY_MS = BASE_DAY_MS

    KEY_SEPARATOR = ":"
    KEY_FIELD_COUNT = 4

    DIR_NAME = "dataforseo-cli"
    FILE_NAME = "cache.json"
    TEMP_SUFFIX = ".tmp"
