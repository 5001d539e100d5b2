"""Cache key composition.

Keys have the layout ``namespace:location:language:query``. Only the
query is case-folded. ``namespace`` and ``language`` may not contain the
separator and ``location`` is an integer, so the query is always
everything after the third separator and keys decompose unambiguously
even when the query itself contains ``:`` (as ``seed:limit`` does).
"""

from __future__ import annotations

from typing import NamedTuple

from dataforseo_cli.shared.constants import Cache, Namespace
from dataforseo_cli.shared.errors import DomainError, ErrorCode, ErrorContext


class CacheKeyParts(NamedTuple):
    namespace: str
    location: str
    language: str
    query: str


def fold(text: str) -> str:
    """Case-fold an identifier for key building and order matching."""
    return text.casefold()


def _namespace_value(namespace: Namespace | str) -> str:
    return namespace.value if isinstance(namespace, Namespace) else namespace


def _reject_separator(field: str, value: str) -> None:
    if Cache.KEY_SEPARATOR in value:
        raise DomainError(
            ErrorCode.INVALID_CACHE_KEY,
            f"Cache key field '{field}' may not contain '{Cache.KEY_SEPARATOR}': {value!r}",
            ErrorContext(operation="make_key", additional_data={field: value}),
        )


def make_key(
    namespace: Namespace | str,
    query: str,
    location: int,
    language: str,
) -> str:
    """Compose the cache key for a query.

    Raises:
        DomainError: If ``namespace`` or ``language`` contains the separator
    """
    namespace_value = _namespace_value(namespace)
    _reject_separator("namespace", namespace_value)
    _reject_separator("language", language)
    return Cache.KEY_SEPARATOR.join(
        (namespace_value, str(int(location)), language, fold(query))
    )


def parse_key(key: str) -> CacheKeyParts:
    """Split a key back into its fields.

    Raises:
        DomainError: If the key does not have all four fields
    """
    parts = key.split(Cache.KEY_SEPARATOR, Cache.KEY_FIELD_COUNT - 1)
    if len(parts) != Cache.KEY_FIELD_COUNT:
        raise DomainError(
            ErrorCode.INVALID_CACHE_KEY,
            f"Malformed cache key: {key!r}",
            ErrorContext(operation="parse_key"),
        )
    return CacheKeyParts(*parts)
