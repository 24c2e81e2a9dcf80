"""
Async client for the community insider threat matrix feed, with retry,
throttle handling and cache-with-fallback.

The feed only enriches narrative text. get_matrix_data() never raises for
network or payload problems: it serves fresh cache, then a fresh fetch, then
last-known-good (even if expired), then an empty "unavailable" dataset.
"""

from __future__ import annotations

import asyncio
import logging
import time
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Optional

import httpx

from ..catalog import get_questions_by_category
from ..config import (
    BACKOFF_MULTIPLIER,
    INITIAL_BACKOFF_SECONDS,
    MATRIX_USER_AGENT,
    MAX_BACKOFF_SECONDS,
    MatrixConfig,
)
from ..errors import MatrixFetchError
from .models import MatrixData, MatrixTechnique
from .processing import process_matrix_payload, unavailable_data

logger = logging.getLogger("insider_risk_index.matrix")

CACHE_KEY = "matrix:data"


class MatrixClient:
    """
    Features:
      - Injectable cache (MemoryCache / SqliteCache) and clock
      - Exponential backoff on 429/502/503/504 and transport errors
      - Last-known-good fallback on any fetch failure
      - Category-scoped technique and recommendation lookups
    """

    def __init__(
        self,
        config: Optional[MatrixConfig] = None,
        cache: Any = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        clock: Callable[[], float] = time.time,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.config = config or MatrixConfig()
        self.cache = cache
        self.clock = clock
        self._sleep = sleep
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        self._request_count = 0
        self._fallback_count = 0

    async def __aenter__(self):
        self._client = httpx.AsyncClient(
            transport=self._transport,
            timeout=httpx.Timeout(self.config.timeout_seconds),
            headers={
                "Accept": "application/json",
                "User-Agent": MATRIX_USER_AGENT,
            },
            follow_redirects=True,
        )
        return self

    async def __aexit__(self, *args):
        if self._client:
            await self._client.aclose()
            self._client = None

    def _now_iso(self) -> str:
        return datetime.fromtimestamp(self.clock(), tz=timezone.utc).isoformat()

    # ------------------------------------------------------------------
    # Data access
    # ------------------------------------------------------------------

    async def get_matrix_data(self, force_refresh: bool = False) -> MatrixData:
        if self.cache is not None and not force_refresh:
            cached = self.cache.get(CACHE_KEY)
            if cached is not None:
                return MatrixData.from_dict(cached)

        if not self.config.enabled:
            return self._fallback("enrichment disabled")

        try:
            payload = await self._fetch()
            data = process_matrix_payload(payload, self._now_iso())
        except (httpx.HTTPError, MatrixFetchError, ValueError) as e:
            logger.warning(f"Matrix fetch failed: {type(e).__name__}: {e}")
            return self._fallback(str(e))

        if self.cache is not None:
            self.cache.set(CACHE_KEY, data.to_dict())
        logger.info(f"Fetched {len(data.techniques)} matrix techniques")
        return data

    async def refresh(self) -> MatrixData:
        return await self.get_matrix_data(force_refresh=True)

    def _fallback(self, reason: str) -> MatrixData:
        self._fallback_count += 1
        if self.cache is not None:
            stale = self.cache.get_stale(CACHE_KEY)
            if stale is not None:
                logger.warning(f"Serving last-known-good matrix data ({reason})")
                return MatrixData.from_dict(stale)
        logger.warning(f"No cached matrix data, serving empty dataset ({reason})")
        return unavailable_data(self._now_iso())

    async def stats(self) -> dict:
        data = await self.get_matrix_data()
        return {
            "total_techniques": len(data.techniques),
            "themes": data.theme_counts,
            "last_updated": data.last_updated,
            "available": data.available,
        }

    async def get_technique(self, technique_id: str) -> Optional[MatrixTechnique]:
        data = await self.get_matrix_data()
        return data.get_technique(technique_id)

    async def techniques_for_category(self, category_id: str) -> list[MatrixTechnique]:
        """Techniques with guidance for the category, or cited by one of its questions."""
        data = await self.get_matrix_data()
        cited = {tid for q in get_questions_by_category(category_id) for tid in q.matrix_techniques}
        return [t for t in data.techniques if t.supports(category_id) or t.id in cited]

    async def recommendations_for_category(self, category_id: str) -> list[str]:
        """Unique prevention texts for the category, in feed order."""
        techniques = await self.techniques_for_category(category_id)
        recommendations: list[str] = []
        for tech in techniques:
            for p in tech.preventions:
                if p.category_id == category_id and p.description not in recommendations:
                    recommendations.append(p.description)
        return recommendations[:self.config.max_category_recommendations]

    async def category_analysis(self, category_id: str) -> dict:
        techniques = await self.techniques_for_category(category_id)
        return {
            "category_id": category_id,
            "related_techniques": len(techniques),
            "techniques": [
                {
                    "id": t.id,
                    "name": t.title,
                    "description": t.description,
                    "theme": t.theme,
                    "preventions": [p.title for p in t.preventions if p.category_id == category_id],
                    "detections": [d.title for d in t.detections if d.category_id == category_id],
                }
                for t in techniques
            ],
            "recommendations": await self.recommendations_for_category(category_id),
        }

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------

    async def _fetch(self) -> Any:
        """GET the feed with exponential backoff on throttling."""
        if not self._client:
            raise RuntimeError("MatrixClient not initialized. Use 'async with' context.")

        url = self.config.url
        backoff = INITIAL_BACKOFF_SECONDS
        max_retries = self.config.max_retries

        for attempt in range(max_retries + 1):
            try:
                response = await self._client.get(url)
                self._request_count += 1
            except (httpx.TimeoutException, httpx.TransportError) as e:
                logger.warning(f"{type(e).__name__} on {url}, attempt {attempt + 1}/{max_retries + 1}")
                if attempt == max_retries:
                    raise
                await self._sleep(backoff)
                backoff = min(backoff * BACKOFF_MULTIPLIER, MAX_BACKOFF_SECONDS)
                continue

            if response.status_code == 200:
                return response.json()

            if response.status_code in (429, 502, 503, 504) and attempt < max_retries:
                retry_after = response.headers.get("Retry-After")
                try:
                    wait_time = max(float(retry_after), backoff) if retry_after else backoff
                except ValueError:
                    wait_time = backoff
                logger.warning(
                    f"Throttled ({response.status_code}) on {url}. "
                    f"Retry {attempt + 1}/{max_retries} in {wait_time:.1f}s"
                )
                await self._sleep(wait_time)
                backoff = min(backoff * BACKOFF_MULTIPLIER, MAX_BACKOFF_SECONDS)
                continue

            raise MatrixFetchError(response.status_code, response.text[:200], url)

        raise MatrixFetchError(0, "retries exhausted", url)

    def get_stats(self) -> dict:
        return {
            "total_requests": self._request_count,
            "fallbacks_served": self._fallback_count,
        }
