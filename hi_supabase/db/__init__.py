"""Supabase data access."""

from .chatbots import ChatbotRepository, RemoteError
from .client import create_supabase_client

__all__ = ["ChatbotRepository", "RemoteError", "create_supabase_client"]
