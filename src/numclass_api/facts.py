"""Fun-fact lookup against a numbers-trivia web service.

get() never raises: every failure (transport error, timeout, non-2xx status,
empty body) is logged and answered with fallback_fact(n).
"""

from __future__ import annotations

import asyncio
import logging

import httpx

from numclass_api.config import DEFAULT_FACT_URL

logger = logging.getLogger(__name__)


def fallback_fact(n: int) -> str:
    return f"{n} is an interesting number."


class FactProvider:
    """Fetches one trivia string per number; single attempt, bounded time."""

    def __init__(self, url_template: str = DEFAULT_FACT_URL, timeout: float = 10.0,
                 transport: httpx.AsyncBaseTransport | None = None):
        self.url_template = url_template
        self.timeout = timeout
        self._transport = transport

    def url_for(self, n: int) -> str:
        return self.url_template.replace("{n}", str(n))

    async def _fetch(self, n: int) -> str:
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self._transport, follow_redirects=True,
        ) as client:
            response = await client.get(self.url_for(n))
            response.raise_for_status()
            return response.text.strip()

    async def get(self, n: int) -> str:
        try:
            # httpx timeouts are per phase; wait_for bounds the whole exchange
            text = await asyncio.wait_for(self._fetch(n), timeout=self.timeout)
        except TimeoutError:
            logger.warning("Fact lookup for %d timed out after %.1fs", n, self.timeout,
                           extra={"number": n, "error_code": "FACT_TIMEOUT"})
            return fallback_fact(n)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Fact lookup for %d failed: %s", n, e,
                           extra={"number": n, "error_code": "FACT_UNAVAILABLE"})
            return fallback_fact(n)
        if not text:
            logger.warning("Fact lookup for %d returned an empty body", n,
                           extra={"number": n, "error_code": "FACT_EMPTY"})
            return fallback_fact(n)
        return text
