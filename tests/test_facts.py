"""Fact provider tests — every failure resolves to the fallback string."""

import asyncio
import logging

import httpx

from numclass_api.facts import FactProvider, fallback_fact


def _provider(handler, timeout: float = 1.0) -> FactProvider:
    return FactProvider(timeout=timeout, transport=httpx.MockTransport(handler))


def test_fallback_fact_shape():
    assert fallback_fact(42) == "42 is an interesting number."
    assert fallback_fact(-3) == "-3 is an interesting number."


def test_url_template_substitution():
    p = FactProvider("https://facts.example/{n}/trivia?json=false")
    assert p.url_for(371) == "https://facts.example/371/trivia?json=false"


async def test_returns_body_text():
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, text="371 is a narcissistic number.\n")

    assert await _provider(handler).get(371) == "371 is a narcissistic number."
    assert seen == ["http://numbersapi.com/371/math"]


async def test_server_error_falls_back(caplog):
    caplog.set_level(logging.WARNING, logger="numclass_api.facts")
    fact = await _provider(lambda request: httpx.Response(503, text="down")).get(7)
    assert fact == "7 is an interesting number."
    assert any(getattr(r, "error_code", None) == "FACT_UNAVAILABLE" for r in caplog.records)


async def test_empty_body_falls_back():
    fact = await _provider(lambda request: httpx.Response(200, text="   ")).get(8)
    assert fact == fallback_fact(8)


async def test_connection_error_falls_back():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    assert await _provider(handler).get(371) == fallback_fact(371)


async def test_timeout_falls_back(caplog):
    caplog.set_level(logging.WARNING, logger="numclass_api.facts")

    async def handler(request):
        await asyncio.sleep(5)
        return httpx.Response(200, text="too late")

    assert await _provider(handler, timeout=0.05).get(28) == fallback_fact(28)
    assert any(getattr(r, "error_code", None) == "FACT_TIMEOUT" for r in caplog.records)


async def test_follows_redirects():
    def handler(request):
        if request.url.path == "/5/math":
            return httpx.Response(301, headers={"Location": "http://numbersapi.com/5/math/"})
        return httpx.Response(200, text="5 is the third prime.")

    assert await _provider(handler).get(5) == "5 is the third prime."
