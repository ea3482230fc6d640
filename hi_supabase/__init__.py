"""hi-supabase - keep your Supabase project awake."""

__version__ = "0.1.0"
