"""DataForSEO v3 HTTP client.

A thin wrapper over ``requests.Session`` that authenticates with HTTP
Basic credentials, unwraps the API envelope and normalizes response items
into the record models the cache stores. Nothing here touches the cache.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

import orjson
import requests
from pydantic import ValidationError

from dataforseo_cli.config.models.api_settings import APISettings
from dataforseo_cli.services.cache_models import (
    CompetitorRecord,
    LanguageRecord,
    LocationRecord,
    RelatedRecord,
    VolumeRecord,
)
from dataforseo_cli.shared.constants import (
    APIConfig,
    APIStatus,
    Endpoints,
    ResponseDefaults,
)
from dataforseo_cli.shared.errors import ErrorCode, create_provider_error
from dataforseo_cli.shared.logging import log_operation_success

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _coalesce(value: Any, default: Any) -> Any:
    """Return ``default`` when ``value`` is None."""
    return default if value is None else value


def _dig(data: Any, *path: str | int) -> Any:
    """Walk nested dicts/lists, returning None at the first missing step."""
    current = data
    for step in path:
        if isinstance(step, int):
            if not isinstance(current, list) or len(current) <= step:
                return None
        elif not isinstance(current, dict):
            return None
        current = current[step] if isinstance(step, int) else current.get(step)
        if current is None:
            return None
    return current


def _first_items(result: Any) -> list[dict[str, Any]]:
    """``result[0].items`` of a Labs response, or an empty list."""
    items = _dig(result, 0, "items")
    return items if isinstance(items, list) else []


def _matches(search: str, *fields: Any) -> bool:
    query = search.lower()
    return any(isinstance(field, str) and query in field.lower() for field in fields)




def _normalize(path: str, build: Callable[[], T]) -> T:
    """Run ``build`` over response items, mapping shape errors to ProviderError."""
    try:
        return build()
    except (AttributeError, KeyError, TypeError, ValidationError) as e:
        raise create_provider_error(
            None,
            f"Unexpected response shape ({type(e).__name__})",
            path,
            code=ErrorCode.API_INVALID_RESPONSE,
            original_error=e,
        ) from e


def _volume_record(item: dict[str, Any]) -> VolumeRecord:
    monthly = _coalesce(item.get("monthly_searches"), [])
    return VolumeRecord(
        keyword=_coalesce(item.get("keyword"), ""),
        volume=_coalesce(item.get("search_volume"), 0),
        cpc=_coalesce(item.get("cpc"), 0.0),
        competition=str(
            _coalesce(item.get("competition"), ResponseDefaults.COMPETITION_UNKNOWN)
        ),
        trend=[
            month.get("search_volume")
            for month in monthly[: ResponseDefaults.TREND_MONTHS]
        ],
    )


def _related_record(item: dict[str, Any]) -> RelatedRecord:
    return RelatedRecord(
        keyword=_coalesce(item.get("keyword"), ""),
        volume=_coalesce(_dig(item, "keyword_info", "search_volume"), 0),
        cpc=_coalesce(_dig(item, "keyword_info", "cpc"), 0.0),
        competition=_coalesce(_dig(item, "keyword_info", "competition"), 0.0),
        difficulty=_dig(item, "keyword_properties", "keyword_difficulty"),
    )


def _competitor_record(item: dict[str, Any]) -> CompetitorRecord:
    keyword_data = _coalesce(item.get("keyword_data"), {})
    serp_item = _dig(item, "ranked_serp_element", "serp_item") or {}
    return CompetitorRecord(
        keyword=_coalesce(keyword_data.get("keyword"), ""),
        position=_coalesce(serp_item.get("rank_group"), 0),
        volume=_coalesce(_dig(keyword_data, "keyword_info", "search_volume"), 0),
        cpc=_coalesce(_dig(keyword_data, "keyword_info", "cpc"), 0.0),
        difficulty=_dig(keyword_data, "keyword_properties", "keyword_difficulty"),
        url=_coalesce(serp_item.get("url"), ""),
    )


class DataForSEOClient:
    """Client for the DataForSEO endpoints the CLI uses.

    Usable as a context manager; leaving the block closes the session.

    Args:
        api_settings: Credentials, base URL and timeout.
        session: Optional pre-built session (tests pass a mock).
    """

    def __init__(
        self,
        api_settings: APISettings,
        session: requests.Session | None = None,
    ) -> None:
        self.api_settings = api_settings
        self.session = session or requests.Session()

    def __enter__(self) -> DataForSEOClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP session and its pooled connections."""
        self.session.close()
        logger.debug("DataForSEO client closed")

    def request(self, path: str, body: Any = None) -> Any:
        """Call ``path`` and return ``tasks[0].result``.

        POSTs ``body`` as JSON when given, otherwise GETs.

        Raises:
            ConfigurationError: If no credentials are configured
            ProviderError: On network failure, a non-JSON response, or an
                envelope or first task whose status is not OK
        """
        url = f"{self.api_settings.base_url.rstrip('/')}{path}"
        headers = {
            "Authorization": self.api_settings.auth_header(),
            "Content-Type": APIConfig.CONTENT_TYPE,
        }
        method = "POST" if body is not None else "GET"
        data = orjson.dumps(body) if body is not None else None

        start = time.perf_counter()
        try:
            response = self.session.request(
                method,
                url,
                headers=headers,
                data=data,
                timeout=self.api_settings.timeout,
            )
        except requests.RequestException as e:
            raise create_provider_error(
                None,
                f"Request failed: {e}",
                path,
                code=ErrorCode.NETWORK_ERROR,
                original_error=e,
            ) from e

        try:
            payload = orjson.loads(response.content)
        except orjson.JSONDecodeError as e:
            raise create_provider_error(
                response.status_code,
                "Response is not valid JSON",
                path,
                code=ErrorCode.API_INVALID_RESPONSE,
                original_error=e,
            ) from e

        if not isinstance(payload, dict):
            raise create_provider_error(
                response.status_code,
                "Unexpected response shape",
                path,
                code=ErrorCode.API_INVALID_RESPONSE,
            )

        if payload.get("status_code") != APIStatus.OK:
            raise create_provider_error(
                payload.get("status_code"),
                str(payload.get("status_message")),
                path,
            )

        task = _dig(payload, "tasks", 0)
        if not isinstance(task, dict) or task.get("status_code") != APIStatus.OK:
            task = task if isinstance(task, dict) else {}
            raise create_provider_error(
                task.get("status_code"),
                str(task.get("status_message")),
                path,
                code=ErrorCode.API_TASK_FAILED,
                label="Task",
            )

        log_operation_success(
            logger,
            "api_request",
            duration_ms=(time.perf_counter() - start) * 1000,
            result_info={"path": path, "cost": payload.get("cost")},
        )
        return task.get("result")

    def fetch_volume(
        self,
        keywords: Sequence[str],
        location: int,
        language: str,
    ) -> list[VolumeRecord]:
        """Search volume, CPC, competition and 12-month trend per keyword.

        Raises:
            ProviderError: Also when an item cannot be normalized
        """
        result = self.request(
            Endpoints.SEARCH_VOLUME,
            [
                {
                    "keywords": list(keywords),
                    "location_code": location,
                    "language_code": language,
                }
            ],
        )
        items = result if isinstance(result, list) else []
        return _normalize(
            Endpoints.SEARCH_VOLUME,
            lambda: [_volume_record(item) for item in items],
        )

    def fetch_difficulty(
        self,
        keywords: Sequence[str],
        location: int,
        language: str,
    ) -> dict[str, int | None]:
        """Keyword difficulty (0-100) keyed by the keyword the API returns.

        Items that are not objects or carry no string keyword are skipped.
        """
        result = self.request(
            Endpoints.KEYWORD_DIFFICULTY,
            [
                {
                    "keywords": list(keywords),
                    "location_code": location,
                    "language_code": language,
                }
            ],
        )
        difficulty: dict[str, int | None] = {}
        for item in _first_items(result):
            if not isinstance(item, dict):
                continue
            keyword = item.get("keyword")
            value = item.get("keyword_difficulty")
            if not isinstance(keyword, str) or not keyword:
                continue
            difficulty[keyword] = value if isinstance(value, int) else None
        return difficulty

    def fetch_related(
        self,
        seed: str,
        location: int,
        language: str,
        limit: int,
    ) -> list[RelatedRecord]:
        result = self.request(
            Endpoints.KEYWORD_SUGGESTIONS,
            [
                {
                    "keyword": seed,
                    "location_code": location,
                    "language_code": language,
                    "limit": limit,
                    "include_seed_keyword": False,
                }
            ],
        )
        return _normalize(
            Endpoints.KEYWORD_SUGGESTIONS,
            lambda: [_related_record(item) for item in _first_items(result)],
        )

    def fetch_competitor(
        self,
        domain: str,
        location: int,
        language: str,
        limit: int,
    ) -> list[CompetitorRecord]:
        result = self.request(
            Endpoints.RANKED_KEYWORDS,
            [
                {
                    "target": domain,
                    "location_code": location,
                    "language_code": language,
                    "limit": limit,
                }
            ],
        )
        return _normalize(
            Endpoints.RANKED_KEYWORDS,
            lambda: [_competitor_record(item) for item in _first_items(result)],
        )

    def locations(self, search: str | None = None) -> list[LocationRecord]:
        """Location codes, filtered by name or ISO country code."""
        items = _coalesce(self.request(Endpoints.LOCATIONS), [])

        def build() -> list[LocationRecord]:
            matched = [
                item
                for item in items
                if not search
                or _matches(
                    search,
                    item.get("location_name"),
                    item.get("country_iso_code"),
                )
            ]
            return [
                LocationRecord(
                    code=item.get("location_code"),
                    name=item.get("location_name"),
                    country=item.get("country_iso_code"),
                    type=item.get("location_type"),
                )
                for item in matched[: ResponseDefaults.LOCATIONS_LIMIT]
            ]

        return _normalize(Endpoints.LOCATIONS, build)

    def languages(self, search: str | None = None) -> list[LanguageRecord]:
        """Language codes, filtered by name or code."""
        items = _coalesce(self.request(Endpoints.LANGUAGES), [])

        def build() -> list[LanguageRecord]:
            return [
                LanguageRecord(
                    name=item.get("language_name"),
                    code=item.get("language_code"),
                )
                for item in items
                if not search
                or _matches(search, item.get("language_name"), item.get("language_code"))
            ]

        return _normalize(Endpoints.LANGUAGES, build)
