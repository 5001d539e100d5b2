"""
Pytest configuration and shared fixtures for dataforseo-cli tests.

Every test runs against an isolated config file and cache path under
``tmp_path`` so a developer's real credentials and cache are never
read or written.
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from dataforseo_cli.cli.common.context import clear_cli_context
from dataforseo_cli.config import reset_config
from dataforseo_cli.services import InMemoryCacheStore, JsonFileCacheStore, TTLPolicy
from dataforseo_cli.shared.constants import Cache

START_MS = 1_700_000_000_000


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, now: int = START_MS) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture(autouse=True)
def isolated_environment(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> Generator[Path, None, None]:
    """Point config and cache at ``tmp_path`` and drop credential env vars."""
    for name in (
        "DATAFORSEO_API__LOGIN",
        "DATAFORSEO_API__PASSWORD",
        "DATAFORSEO_API__BASE64_TOKEN",
        "DATAFORSEO_LOGGING__LEVEL",
        "DATAFORSEO_LOGGING__FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DATAFORSEO_CONFIG", str(tmp_path / "config.toml"))
    monkeypatch.setenv("DATAFORSEO_CACHE__PATH", str(tmp_path / "cache" / "cache.json"))

    reset_config()
    clear_cli_context()
    yield tmp_path
    reset_config()
    clear_cli_context()

    package_logger = logging.getLogger("dataforseo_cli")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def ttl_policy() -> TTLPolicy:
    return TTLPolicy(ttl_ms=Cache.TTL_MS)


@pytest.fixture
def memory_store(clock: FakeClock, ttl_policy: TTLPolicy) -> InMemoryCacheStore:
    """Empty in-memory store driven by the fake clock."""
    return InMemoryCacheStore(ttl_policy=ttl_policy, clock=clock)


@pytest.fixture
def cache_file(tmp_path: Path) -> Path:
    return tmp_path / "cache" / "cache.json"


@pytest.fixture
def file_store(cache_file: Path, clock: FakeClock, ttl_policy: TTLPolicy) -> JsonFileCacheStore:
    """File-backed store in a temp directory, driven by the fake clock."""
    return JsonFileCacheStore(cache_file, ttl_policy=ttl_policy, clock=clock)
