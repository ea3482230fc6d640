"""Integrations with tools outside hi-supabase."""
