"""
Shared pytest fixtures for all test modules.

IMPORTANT: GEMINI_API_KEY is forced empty before the app is imported so the
Gemini client is never built and every test runs the local heuristics unless it
patches the collaborator explicitly. Real API calls never happen in tests.
"""

import os

os.environ["GEMINI_API_KEY"] = ""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from tests.mocks.jitter_mock import NullJitter
from tests.mocks.redis_mock import MockRedis

# App import happens AFTER GEMINI_API_KEY is cleared above.
from truthscan.main import app  # noqa: E402


# ---------------------------------------------------------------------------
# Core infrastructure fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def reset_local_state():
    """Clear in-memory rate-limit and report stores between tests."""
    from truthscan.core import rate_limiter
    from truthscan.services import reports_service

    rate_limiter._request_log.clear()
    reports_service.local_reports.clear()
    yield
    rate_limiter._request_log.clear()
    reports_service.local_reports.clear()


@pytest.fixture
def no_redis(monkeypatch):
    """Force the in-memory tiers of the rate limiter and report store."""
    from truthscan.integrations import redis_client as rc

    monkeypatch.setattr(rc, "client", None)


@pytest.fixture
def mock_redis(monkeypatch):
    """Replace redis_client.client with an in-memory MockRedis."""
    from truthscan.integrations import redis_client as rc

    mock_rc = MockRedis()
    monkeypatch.setattr(rc, "client", mock_rc)
    return mock_rc


@pytest.fixture
def client(mock_redis):
    """
    FastAPI TestClient with mocked Redis and Gemini switched off.

    initialize() calls are patched to no-ops so they can't overwrite our mocks
    or attempt real network connections during the lifespan startup.
    """
    with (
        patch("truthscan.integrations.redis_client.initialize"),
        patch("truthscan.integrations.gemini.client.initialize"),
        patch("truthscan.analysis.pipeline.is_available", return_value=False),
    ):
        with TestClient(app, raise_server_exceptions=False) as c:
            yield c


@pytest.fixture
def null_jitter():
    return NullJitter()
