"""Cache entry and record models.

Cached payloads are typed per namespace: a ``volume`` entry holds one
``VolumeRecord``, ``related`` and ``competitor`` entries hold lists of
their record types. ``payload_adapter`` maps a namespace to the pydantic
adapter that validates and dumps that shape.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from dataforseo_cli.shared.constants import Namespace, ResponseDefaults

__all__ = [
    "CacheEntry",
    "CompetitorRecord",
    "KeywordRecord",
    "LanguageRecord",
    "LocationRecord",
    "RelatedRecord",
    "VolumeRecord",
    "payload_adapter",
]


class CacheEntry(BaseModel):
    """One persisted cache entry.

    Attributes:
        data: JSON payload, shaped by the entry's namespace.
        ts: Storage time in epoch milliseconds.
    """

    data: Any
    ts: int


class KeywordRecord(BaseModel):
    """Base for records identified by a keyword."""

    model_config = ConfigDict(extra="ignore")

    keyword: str


class VolumeRecord(KeywordRecord):
    """Search volume data for a single keyword."""

    volume: int = 0
    cpc: float = 0.0
    competition: str = ResponseDefaults.COMPETITION_UNKNOWN
    difficulty: int | None = None
    trend: list[int | None] = Field(default_factory=list)


class RelatedRecord(KeywordRecord):
    """A keyword suggested for a seed keyword."""

    volume: int = 0
    cpc: float = 0.0
    competition: float = 0.0
    difficulty: int | None = None


class CompetitorRecord(KeywordRecord):
    """A keyword a domain ranks for."""

    position: int = 0
    volume: int = 0
    cpc: float = 0.0
    difficulty: int | None = None
    url: str = ""


class LocationRecord(BaseModel):
    code: int
    name: str | None = None
    country: str | None = None
    type: str | None = None


class LanguageRecord(BaseModel):
    name: str | None = None
    code: str | None = None


_PAYLOAD_ADAPTERS: dict[Namespace, TypeAdapter[Any]] = {
    Namespace.VOLUME: TypeAdapter(VolumeRecord),
    Namespace.RELATED: TypeAdapter(list[RelatedRecord]),
    Namespace.COMPETITOR: TypeAdapter(list[CompetitorRecord]),
}


def payload_adapter(namespace: Namespace | str) -> TypeAdapter[Any]:
    """Return the adapter for a namespace's payload shape.

    Raises:
        ValueError: If the namespace is unknown
    """
    return _PAYLOAD_ADAPTERS[Namespace(namespace)]
