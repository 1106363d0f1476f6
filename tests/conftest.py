"""
Global pytest fixtures for the basicauth test suite.

Responsibilities:
    - Provide the in-memory provider used by the scenario tables
    - Provide a fresh FastAPI TestClient via the app factory

Why an app factory?
    `create_app(provider=...)` gives each test its own app and provider,
    so no state leaks between tests.

LLM Prompt Example:
    "Show how to structure pytest fixtures so an auth wrapper can be
    tested both directly and through a real FastAPI app."
"""

import pytest
from fastapi.testclient import TestClient

from basicauth import MemoryProvider
from main import create_app


@pytest.fixture
def provider() -> MemoryProvider:
    """Provider knowing 'foo'/'bar' and 'user'/'password'."""
    return MemoryProvider({"foo": "bar", "user": "password"})


@pytest.fixture
def client(provider) -> TestClient:
    """Fresh TestClient with a new app instance wired to the provider fixture."""
    return TestClient(create_app(provider=provider))
