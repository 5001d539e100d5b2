"""Tests for the cache listing (``cache`` command and ``--print-cache``)."""

from __future__ import annotations

from typer.testing import CliRunner

from dataforseo_cli.cli.cache_handler import EMPTY_CACHE, render_cache
from dataforseo_cli.cli.typer_app import app
from dataforseo_cli.services import (
    JsonFileCacheStore,
    RelatedRecord,
    VolumeRecord,
    make_key,
)
from dataforseo_cli.shared.constants import Cache, Namespace

runner = CliRunner()


def test_render_empty(memory_store):
    assert render_cache(memory_store) == [EMPTY_CACHE]


def test_render_groups_by_namespace(memory_store, clock):
    memory_store.set(
        make_key(Namespace.VOLUME, "coffee", 2840, "en"),
        VolumeRecord(keyword="coffee", volume=100, cpc=1.5).model_dump(mode="json"),
    )
    memory_store.set(
        make_key(Namespace.RELATED, "coffee:50", 2840, "en"),
        [RelatedRecord(keyword="coffee beans", volume=500, difficulty=30).model_dump()],
    )
    clock.advance(2 * Cache.DAY_MS + 1)

    lines = render_cache(memory_store)

    assert lines == [
        "Cached entries: 2",
        "",
        "[volume] (1 entries)",
        '  "coffee" vol=100 cpc=1.5 diff=? | loc=2840 lang=en | 2d ago',
        "",
        "[related] (1 entries)",
        '  "coffee:50" | loc=2840 lang=en | 2d ago',
        "    coffee beans (vol=500, diff=30)",
        "",
    ]


def test_render_skips_stale_entries(memory_store, clock):
    memory_store.set(make_key(Namespace.VOLUME, "old", 2840, "en"), {"keyword": "old"})
    clock.advance(Cache.TTL_MS)

    assert render_cache(memory_store) == [EMPTY_CACHE]


def test_print_cache_option_on_empty_cache():
    result = runner.invoke(app, ["--print-cache"])

    assert result.exit_code == 0
    assert "Cache is empty." in result.stdout


def test_cache_command_reads_configured_file(tmp_path):
    store = JsonFileCacheStore(tmp_path / "cache" / "cache.json")
    store.set(
        make_key(Namespace.VOLUME, "coffee", 2840, "en"),
        VolumeRecord(keyword="coffee", volume=100, difficulty=12).model_dump(mode="json"),
    )

    result = runner.invoke(app, ["cache"])

    assert result.exit_code == 0, result.output
    assert "[volume] (1 entries)" in result.stdout
    assert 'diff=12 | loc=2840 lang=en | 0d ago' in result.stdout
