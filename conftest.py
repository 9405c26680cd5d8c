"""Root conftest.py for pytest configuration.

This file configures pytest for the entire project, ensuring:
- Proper Python path setup for imports
- Required settings present before config.settings is imported
- Logfire observability configuration
- Shared fixtures across all tests
"""

import os
import sys
from pathlib import Path

import httpx
import logfire
import pytest


# Settings are validated at import time, so tests need placeholder credentials
os.environ.setdefault("GEMINI_API_URL", "https://gemini.test/v1beta/models/gemini-flash:generateContent?key=")
os.environ.setdefault("GEMINI_API_KEY", "test-key")


# ============================================================================
# Python Path Configuration
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom settings and ensure project root is in sys.path."""

    project_root = Path(__file__).parent.resolve()
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))

    # Register custom markers
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests exercising the HTTP app"
    )
    config.addinivalue_line(
        "markers",
        "unit: marks tests as unit tests (fast, no external dependencies)"
    )

    # Configure logfire for all tests, console only
    logfire.configure(
        service_name="email_writer_tests",
        environment="test",
        send_to_logfire=False,
        console=False,
    )

    logfire.info("Starting test suite", project_root=str(project_root))


def pytest_sessionfinish(session, exitstatus):
    """Log test session completion with summary statistics."""
    logfire.info(
        "Test suite completed",
        exit_status=exitstatus,
        tests_collected=session.testscollected,
        tests_failed=session.testsfailed,
    )


# ============================================================================
# Shared Fixtures
# ============================================================================

@pytest.fixture(scope="session")
def project_root():
    """Return the absolute path to the project root directory."""
    return Path(__file__).parent.resolve()


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Fixture to mock environment variables for testing.

    Usage:
        def test_something(mock_env_vars):
            mock_env_vars({"GEMINI_TIMEOUT": "5", "DEBUG": "true"})
    """
    def _set_env_vars(env_dict: dict):
        for key, value in env_dict.items():
            monkeypatch.setenv(key, value)

    return _set_env_vars


@pytest.fixture
def make_gemini_client():
    """Factory for GeminiClient instances backed by httpx.MockTransport.

    Usage:
        client, calls = make_gemini_client(lambda request: httpx.Response(200, json={...}))

    `calls` collects every outbound httpx.Request for later assertions.
    """
    from services.gemini_client import GeminiClient

    def _make(handler, timeout: float = 5.0):
        calls = []

        def _recording_handler(request: httpx.Request):
            calls.append(request)
            return handler(request)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(_recording_handler))
        client = GeminiClient(
            api_url="https://gemini.test/generate?key=",
            api_key="secret-key",
            http_client=http_client,
            timeout=timeout,
        )
        return client, calls

    return _make
