"""
Shared fixtures: an in-memory Supabase fake and a TestClient whose
identity can be switched between users.
"""

import pytest
from fastapi.testclient import TestClient

from skillswap.main import app
from skillswap.database.supabase_client import get_supabase
from skillswap.core.dependencies import get_current_user_id
from skillswap.modules.auth.service import clear_auth_cache

from tests.fakes import ALICE, FakeSupabase


@pytest.fixture
def db():
    return FakeSupabase()


@pytest.fixture
def current_user():
    return {"id": ALICE, "email": f"{ALICE}@example.com", "user_metadata": {}, "app_metadata": {}}


@pytest.fixture
def act_as(current_user):
    """Switch the authenticated user for subsequent requests"""
    def _act_as(user_id):
        current_user["id"] = user_id
        current_user["email"] = f"{user_id}@example.com"
    return _act_as


@pytest.fixture
def client(db, current_user):
    app.dependency_overrides[get_supabase] = lambda: db
    app.dependency_overrides[get_current_user_id] = lambda: current_user
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def _clear_auth_cache():
    clear_auth_cache()
    yield
    clear_auth_cache()
