"""Tests for Supabase client construction."""
import pytest

from hi_supabase.core.config import ConfigurationError, HiSupabaseConfig
from hi_supabase.db import client as client_module


def test_missing_credentials_raise():
    with pytest.raises(ConfigurationError, match="NEXT_PUBLIC_SUPABASE_ANON_KEY"):
        client_module.create_supabase_client(HiSupabaseConfig(supabase_url="https://abc.supabase.co"))


def test_builds_client_from_config(monkeypatch):
    calls = []
    monkeypatch.setattr(client_module, "create_client", lambda url, key: calls.append((url, key)) or "client")

    result = client_module.create_supabase_client(
        HiSupabaseConfig(supabase_url="https://abc.supabase.co", supabase_anon_key="anon")
    )

    assert result == "client"
    assert calls == [("https://abc.supabase.co", "anon")]


def test_defaults_to_global_config(monkeypatch, credentials_config):
    calls = []
    monkeypatch.setattr(client_module, "create_client", lambda url, key: calls.append((url, key)) or "client")

    client_module.create_supabase_client()

    assert calls == [(credentials_config.supabase_url, credentials_config.supabase_anon_key)]
