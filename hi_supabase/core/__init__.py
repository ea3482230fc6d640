"""Core runtime: configuration and logging."""
