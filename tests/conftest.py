"""Shared fixtures for table_reader tests.

Every test runs against a fake project URL and key; nothing here talks to a
real Supabase instance.
"""

from unittest.mock import MagicMock, patch

import pytest

BASE_URL = "https://example-project.supabase.co"
API_KEY = "test-anon-key"

SUPABASE_ENV_VARS = (
    "SUPABASE_URL",
    "SUPABASE_ANON_KEY",
    "SUPABASE_SERVICE_ROLE_KEY",
    "SUPABASE_TABLE",
    "SUPABASE_TIMEOUT",
    "SUPABASE_ENCODE_TABLE",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove any Supabase settings picked up from the shell or a .env file."""
    for name in SUPABASE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def supabase_env(clean_env):
    clean_env.setenv("SUPABASE_URL", BASE_URL)
    clean_env.setenv("SUPABASE_ANON_KEY", API_KEY)
    return clean_env


def make_response(status_code: int = 200, text: str = "[]") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    return response


@pytest.fixture
def mock_session():
    """Patch requests.Session in the client module and yield the session object.

    Configure `mock_session.get.return_value` or `.side_effect` per test.
    """
    with patch("table_reader.services.supabase_client.requests.Session") as session_cls:
        session = MagicMock()
        session_cls.return_value.__enter__.return_value = session
        session.get.return_value = make_response()
        yield session
