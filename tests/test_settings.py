"""Tests for configuration and the Supabase client holder."""

import pytest

from skillswap.config import settings
from skillswap.config.settings import Settings
from skillswap.database.supabase_client import SupabaseClient


class TestSettings:

    def test_defaults(self, monkeypatch):
        for var in ("ENVIRONMENT", "LOG_LEVEL", "RATE_LIMIT", "CORS_ORIGINS"):
            monkeypatch.delenv(var, raising=False)
        config = Settings(_env_file=None)
        assert config.environment == "development"
        assert config.is_production is False
        assert config.rate_limit == "100/minute"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", "https://demo.supabase.co")
        monkeypatch.setenv("ENVIRONMENT", "production")
        config = Settings(_env_file=None)
        assert config.supabase_url == "https://demo.supabase.co"
        assert config.is_production is True

    def test_cors_origins_list_skips_blanks(self):
        config = Settings(_env_file=None, cors_origins=" http://a.test , ,http://b.test,")
        assert config.get_cors_origins_list() == ["http://a.test", "http://b.test"]


class TestSupabaseClient:

    @pytest.fixture(autouse=True)
    def _reset(self):
        SupabaseClient.reset_client()
        yield
        SupabaseClient.reset_client()

    def test_unconfigured_client_raises(self, monkeypatch):
        monkeypatch.setattr(settings, "supabase_url", "")
        monkeypatch.setattr(settings, "supabase_key", "")
        with pytest.raises(RuntimeError) as exc_info:
            SupabaseClient.get_client()
        assert "SUPABASE_URL" in str(exc_info.value)

    def test_client_is_created_once(self, monkeypatch):
        created = []

        def fake_create_client(url, key):
            created.append((url, key))
            return object()

        monkeypatch.setattr(settings, "supabase_url", "https://demo.supabase.co")
        monkeypatch.setattr(settings, "supabase_key", "anon-key")
        monkeypatch.setattr("skillswap.database.supabase_client.create_client", fake_create_client)

        first = SupabaseClient.get_client()
        second = SupabaseClient.get_client()

        assert first is second
        assert created == [("https://demo.supabase.co", "anon-key")]
