"""Cache listing for ``dataforseo-cli cache`` and ``--print-cache``.

Lists every fresh entry grouped by namespace, with the key decomposed
into its fields and the entry's age in whole days.
"""

from __future__ import annotations

import logging
from typing import Any

import typer

from dataforseo_cli.containers import Container
from dataforseo_cli.services import CacheEntry, CacheStoreProtocol, parse_key
from dataforseo_cli.shared.constants import Cache, Namespace
from dataforseo_cli.shared.errors import DomainError

logger = logging.getLogger(__name__)

EMPTY_CACHE = "Cache is empty."
UNKNOWN = "?"


def _or_unknown(value: Any) -> Any:
    return UNKNOWN if value is None else value


def _volume_line(data: Any, location: str, language: str, age: int) -> str:
    data = data if isinstance(data, dict) else {}
    return (
        f'  "{data.get("keyword")}" vol={data.get("volume")} cpc={data.get("cpc")} '
        f"diff={_or_unknown(data.get('difficulty'))} "
        f"| loc={location} lang={language} | {age}d ago"
    )


def _result_set_lines(
    data: Any,
    query: str,
    location: str,
    language: str,
    age: int,
) -> list[str]:
    lines = [f'  "{query}" | loc={location} lang={language} | {age}d ago']
    items = data if isinstance(data, list) else []
    for item in items:
        item = item if isinstance(item, dict) else {}
        lines.append(
            f"    {item.get('keyword') or UNKNOWN} "
            f"(vol={_or_unknown(item.get('volume'))}, "
            f"diff={_or_unknown(item.get('difficulty'))})"
        )
    return lines


def render_cache(store: CacheStoreProtocol) -> list[str]:
    """Lines describing the fresh entries of ``store``."""
    now = store.now()
    entries = store.fresh_entries()
    if not entries:
        return [EMPTY_CACHE]

    groups: dict[str, list[tuple[str, CacheEntry]]] = {}
    for key, entry in entries.items():
        namespace = key.split(Cache.KEY_SEPARATOR, 1)[0]
        groups.setdefault(namespace, []).append((key, entry))

    lines = [f"Cached entries: {len(entries)}", ""]
    for namespace, group in groups.items():
        lines.append(f"[{namespace}] ({len(group)} entries)")
        for key, entry in group:
            try:
                parts = parse_key(key)
            except DomainError:
                logger.debug("Skipping malformed cache key %r", key)
                continue
            age = store.ttl_policy.age_days(entry, now)
            if namespace == Namespace.VOLUME.value:
                lines.append(
                    _volume_line(entry.data, parts.location, parts.language, age)
                )
            else:
                lines.extend(
                    _result_set_lines(
                        entry.data, parts.query, parts.location, parts.language, age
                    )
                )
        lines.append("")
    return lines


def handle_print_cache(store: CacheStoreProtocol | None = None) -> None:
    store = store or Container().cache_store()
    for line in render_cache(store):
        typer.echo(line)
