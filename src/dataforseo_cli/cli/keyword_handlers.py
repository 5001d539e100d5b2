"""Keyword command handlers for dataforseo-cli.

Each handler resolves the request dimensions against the configured
defaults, asks the keyword research service for records and prints
them as rows. Errors propagate to the command's error decorator.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from contextlib import closing

import typer

from dataforseo_cli.cli.formatters import Row, format_json, format_tsv, print_rows
from dataforseo_cli.config import get_config
from dataforseo_cli.containers import Container
from dataforseo_cli.services import (
    CompetitorRecord,
    KeywordResearchService,
    RelatedRecord,
    VolumeRecord,
)

logger = logging.getLogger(__name__)


def create_keyword_service() -> KeywordResearchService:
    """Build the service from configuration through the DI container."""
    return Container().keyword_service()


def round2(value: float) -> float:
    return round(value, 2)


def _difficulty_cell(difficulty: int | None) -> int | str:
    return "" if difficulty is None else difficulty


def volume_rows(records: Sequence[VolumeRecord]) -> list[Row]:
    return [
        {
            "keyword": r.keyword,
            "volume": r.volume,
            "cpc": round2(r.cpc),
            "difficulty": _difficulty_cell(r.difficulty),
            "competition": r.competition,
            "trend": ",".join("" if v is None else str(v) for v in r.trend),
        }
        for r in records
    ]


def related_rows(records: Sequence[RelatedRecord]) -> list[Row]:
    return [
        {
            "keyword": r.keyword,
            "volume": r.volume,
            "cpc": round2(r.cpc),
            "difficulty": _difficulty_cell(r.difficulty),
            "competition": round2(r.competition),
        }
        for r in records
    ]


def competitor_rows(records: Sequence[CompetitorRecord]) -> list[Row]:
    return [
        {
            "keyword": r.keyword,
            "pos": r.position,
            "volume": r.volume,
            "cpc": round2(r.cpc),
            "difficulty": _difficulty_cell(r.difficulty),
            "url": r.url,
        }
        for r in records
    ]


def _dimensions(location: int | None, language: str | None) -> tuple[int, str]:
    defaults = get_config().defaults
    return (
        defaults.location if location is None else location,
        defaults.language if language is None else language,
    )


def _limit(limit: int | None) -> int:
    return get_config().defaults.limit if limit is None else limit


def handle_volume(
    keywords: Sequence[str],
    location: int | None,
    language: str | None,
    fmt: str,
) -> None:
    location, language = _dimensions(location, language)
    with closing(create_keyword_service()) as service:
        records = service.search_volume(list(keywords), location, language)
    logger.info("Resolved %d of %d keywords", len(records), len(keywords))
    print_rows(volume_rows(records), fmt)


def handle_related(
    seed: str,
    location: int | None,
    language: str | None,
    limit: int | None,
    fmt: str,
) -> None:
    location, language = _dimensions(location, language)
    with closing(create_keyword_service()) as service:
        records = service.related_keywords(seed, location, language, _limit(limit))
    print_rows(related_rows(records), fmt)


def handle_competitor(
    domain: str,
    location: int | None,
    language: str | None,
    limit: int | None,
    fmt: str,
) -> None:
    location, language = _dimensions(location, language)
    with closing(create_keyword_service()) as service:
        records = service.competitor_keywords(domain, location, language, _limit(limit))
    print_rows(competitor_rows(records), fmt)


def render_codes(rows: list[Row], *, json_output: bool) -> str:
    """Locations and languages print as TSV or JSON only."""
    return format_json(rows) if json_output else format_tsv(rows)


def handle_locations(search: str | None, *, json_output: bool) -> None:
    with closing(create_keyword_service()) as service:
        records = service.locations(search)
    typer.echo(render_codes([r.model_dump() for r in records], json_output=json_output))


def handle_languages(search: str | None, *, json_output: bool) -> None:
    with closing(create_keyword_service()) as service:
        records = service.languages(search)
    typer.echo(render_codes([r.model_dump() for r in records], json_output=json_output))
