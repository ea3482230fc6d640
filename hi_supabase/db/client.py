"""Supabase client construction."""
from typing import Optional

from supabase import Client, create_client

from hi_supabase.core.config import ConfigurationError, HiSupabaseConfig, get_config


def create_supabase_client(config: Optional[HiSupabaseConfig] = None) -> Client:
    """Build a Supabase client from configuration.

    Call this once at startup and pass the client to each repository.

    Raises:
        ConfigurationError: If the project URL or anon key is missing
    """
    config = config or get_config()
    missing = config.missing_credentials()
    if missing:
        raise ConfigurationError(
            f"Missing Supabase environment variables: {', '.join(missing)}"
        )
    return create_client(config.supabase_url, config.supabase_anon_key)
