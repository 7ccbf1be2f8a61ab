"""Shared pytest fixtures and configuration."""

import os
import sys
import pytest
from unittest.mock import patch

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-key")
os.environ.setdefault("AI_ENDPOINT", "https://ai.test.local")
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.pop("SENTRY_DSN", None)
os.environ.pop("AUTO_SEED_SERVICES", None)

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from tests.utils.fake_supabase import FakeSupabase  # noqa: E402
from tests.utils.factories import create_user_data  # noqa: E402


@pytest.fixture
def fake_db():
    """In-memory Supabase client patched in for the singleton."""
    db = FakeSupabase()
    with patch("src.services.supabase_client.get_supabase_client", return_value=db):
        yield db


@pytest.fixture
def regular_user(fake_db):
    """Stored non-admin user."""
    user = create_user_data(role="user", user_id=7)
    fake_db.tables["users"].append(user)
    return user


@pytest.fixture
def admin_user(fake_db):
    """Stored admin user."""
    user = create_user_data(role="admin", user_id=1)
    fake_db.tables["users"].append(user)
    return user


@pytest.fixture
def seeded_catalog(fake_db):
    """Catalog holding the four default services, in insertion order."""
    from src.models.service import DEFAULT_SERVICES

    return [fake_db.add_row("services", s.model_dump(include={"name", "description"})) for s in DEFAULT_SERVICES]


@pytest.fixture(autouse=True)
def reset_auto_seed(monkeypatch):
    """Each test starts with the per-process auto-seed flag cleared."""
    monkeypatch.setattr("src.services.gateway._auto_seed_done", False)
