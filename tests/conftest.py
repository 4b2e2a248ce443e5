"""Shared fixtures: classifier index, stub fact source, API client."""

from __future__ import annotations

import logging

import pytest
from fastapi.testclient import TestClient

from numclass_api import observability
from numclass_api.api import create_app
from numclass_api.config import Settings
from numclass_api.registry import discover


class StubFacts:
    """Fact source that never touches the network."""

    def __init__(self, text: str = "is a stub fact."):
        self.text = text
        self.calls: list[int] = []

    async def get(self, n: int) -> str:
        self.calls.append(n)
        return f"{n} {self.text}"


@pytest.fixture(scope="session")
def index():
    """Discover the packaged classifiers once."""
    return discover()


@pytest.fixture
def facts():
    return StubFacts()


@pytest.fixture
def client(index, facts):
    app = create_app(Settings(), fact_provider=facts, index=index)
    return TestClient(app)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("NUMCLASS_API_CONFIG", raising=False)
    monkeypatch.delenv("PORT", raising=False)


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop the root handler a CLI run installed; it points at a captured stream."""
    level = logging.root.level
    yield
    observability.remove_handler()
    logging.root.setLevel(level)
