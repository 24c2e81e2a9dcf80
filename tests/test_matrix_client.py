"""
Tests for threat matrix processing and the cache-with-fallback client.

HTTP is served by httpx.MockTransport; no network access is needed.

Run: pytest tests/test_matrix_client.py -v
"""

from __future__ import annotations

import asyncio

import httpx
import pytest

from insider_risk_index.cache import MemoryCache
from insider_risk_index.config import MatrixConfig
from insider_risk_index.matrix import (
    CACHE_KEY,
    MatrixClient,
    map_text_to_category,
    process_matrix_payload,
    strip_html,
)

# -- Fixture data --

_PAYLOAD = {
    "articles": [
        {
            "id": "MT001",
            "title": "Financial Hardship",
            "theme": "Motive",
            "description": "<p>Money &amp; debt pressure</p>",
            "sections": [
                {"title": "Prevention", "content": "<p>Security awareness training for staff</p>"},
                {"title": "Detection", "content": "Monitor bulk file transfers"},
                {"title": "References", "content": "ignored"},
            ],
        },
        {
            "id": "MT002",
            "title": "Coerced Employee",
            "theme": "Coercion by third party",
            "sections": [
                {"title": "Mitigation", "content": "Enforce identity verification on OAuth grants"},
            ],
        },
        {"title": "No id, skipped"},
    ],
}

_NOW = "2026-01-01T00:00:00+00:00"


def _client(handler, cache=None, clock=None, config=None, sleeps=None):
    async def fake_sleep(seconds):
        if sleeps is not None:
            sleeps.append(seconds)

    kwargs = {}
    if clock is not None:
        kwargs["clock"] = clock
    return MatrixClient(
        config or MatrixConfig(url="https://matrix.test/feed.json"),
        cache=cache,
        transport=httpx.MockTransport(handler),
        sleep=fake_sleep,
        **kwargs,
    )


def _run(client, coro_fn):
    async def go():
        async with client:
            return await coro_fn(client)
    return asyncio.run(go())


# -- Processing --

def test_strip_html():
    assert strip_html("<p>A &amp; B</p>") == "A & B"
    assert strip_html(None) == ""


def test_map_text_to_category():
    assert map_text_to_category("Deliver security awareness training") == "prevention-coaching"
    assert map_text_to_category("Retain forensic evidence") == "investigation-evidence"
    assert map_text_to_category("Review OAuth grants") == "identity-saas"
    assert map_text_to_category("Phishing simulation") == "phishing-resilience"
    assert map_text_to_category("Something else entirely") == "visibility"


def test_process_matrix_payload():
    data = process_matrix_payload(_PAYLOAD, _NOW)
    assert [t.id for t in data.techniques] == ["MT001", "MT002"]
    first, second = data.techniques
    assert first.description == "Money & debt pressure"
    assert [p.category_id for p in first.preventions] == ["prevention-coaching"]
    assert [d.category_id for d in first.detections] == ["visibility"]
    assert second.theme == "Coercion"
    assert second.preventions[0].category_id == "identity-saas"
    assert second.description == "No description available"
    assert data.theme_counts == {"Motive": 1, "Coercion": 1, "Manipulation": 0}


def test_process_matrix_payload_rejects_non_object():
    with pytest.raises(ValueError):
        process_matrix_payload([1, 2], _NOW)


# -- Client --

def test_fetch_and_cache(clock):
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json=_PAYLOAD)

    cache = MemoryCache(ttl_hours=24, clock=clock)
    client = _client(handler, cache=cache, clock=clock)

    async def twice(c):
        first = await c.get_matrix_data()
        second = await c.get_matrix_data()
        return first, second

    first, second = _run(client, twice)
    assert first.available and len(first.techniques) == 2
    assert second.to_dict() == first.to_dict()
    assert len(calls) == 1
    assert calls[0].headers["User-Agent"].startswith("InsiderRiskIndex/")
    assert cache.get(CACHE_KEY) is not None


def test_force_refresh_bypasses_fresh_cache(clock):
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json=_PAYLOAD)

    client = _client(handler, cache=MemoryCache(clock=clock), clock=clock)

    async def go(c):
        await c.get_matrix_data()
        return await c.refresh()

    _run(client, go)
    assert len(calls) == 2


def test_throttled_requests_are_retried():
    responses = iter([
        httpx.Response(429, headers={"Retry-After": "2"}),
        httpx.Response(503),
        httpx.Response(200, json=_PAYLOAD),
    ])
    sleeps = []
    client = _client(lambda request: next(responses), sleeps=sleeps)

    data = _run(client, lambda c: c.get_matrix_data())
    assert len(data.techniques) == 2
    assert sleeps == [2.0, 2.0]


def test_failure_serves_last_known_good(clock):
    ok = {"up": True}

    def handler(request):
        if ok["up"]:
            return httpx.Response(200, json=_PAYLOAD)
        return httpx.Response(500, text="boom")

    cache = MemoryCache(ttl_hours=1, clock=clock)
    client = _client(handler, cache=cache, clock=clock)

    async def go(c):
        await c.get_matrix_data()
        ok["up"] = False
        clock.advance(7200)
        return await c.get_matrix_data()

    data = _run(client, go)
    assert data.available
    assert len(data.techniques) == 2
    assert client.get_stats()["fallbacks_served"] == 1


def test_failure_without_cache_serves_unavailable_dataset():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    sleeps = []
    client = _client(handler, sleeps=sleeps)
    data = _run(client, lambda c: c.get_matrix_data())
    assert not data.available
    assert data.techniques == []
    assert len(sleeps) == MatrixConfig().max_retries


def test_invalid_payload_falls_back():
    client = _client(lambda request: httpx.Response(200, json=["not", "an", "object"]))
    data = _run(client, lambda c: c.get_matrix_data())
    assert not data.available


def test_disabled_feed_makes_no_requests():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json=_PAYLOAD)

    config = MatrixConfig(url="https://matrix.test/feed.json", enabled=False)
    data = _run(_client(handler, config=config), lambda c: c.get_matrix_data())
    assert not data.available
    assert calls == []


def test_category_queries():
    client = _client(lambda request: httpx.Response(200, json=_PAYLOAD), cache=MemoryCache())

    async def go(c):
        analysis = await c.category_analysis("prevention-coaching")
        identity = await c.techniques_for_category("identity-saas")
        technique = await c.get_technique("MT002")
        stats = await c.stats()
        return analysis, identity, technique, stats

    analysis, identity, technique, stats = _run(client, go)
    assert analysis["related_techniques"] == 1
    assert analysis["techniques"][0]["id"] == "MT001"
    assert analysis["recommendations"] == ["Security awareness training for staff"]
    assert [t.id for t in identity] == ["MT002"]
    assert technique.title == "Coerced Employee"
    assert stats["total_techniques"] == 2


def test_client_requires_context_manager():
    client = _client(lambda request: httpx.Response(200, json=_PAYLOAD))
    with pytest.raises(RuntimeError):
        asyncio.run(client._fetch())


def test_non_string_feed_fields_do_not_escape():
    payload = {
        "articles": [
            {
                "id": "MT1",
                "title": 7,
                "theme": ["Coercion"],
                "sections": [
                    {"title": 5, "content": "monitor"},
                    {"title": "Prevention", "content": {"html": "x"}},
                ],
            },
        ],
    }
    client = _client(lambda request: httpx.Response(200, json=payload), cache=MemoryCache())
    data = _run(client, lambda c: c.get_matrix_data())
    assert data.available
    technique = data.techniques[0]
    assert technique.title == ""
    assert technique.theme == "Motive"
    assert technique.detections == []
    assert technique.preventions[0].description == "No description available"


def test_questions_cite_techniques_for_their_category():
    payload = {"articles": [{"id": "MT018", "title": "Cited", "sections": []}]}
    client = _client(lambda request: httpx.Response(200, json=payload), cache=MemoryCache())
    visibility = _run(client, lambda c: c.techniques_for_category("visibility"))
    assert [t.id for t in visibility] == ["MT018"]
