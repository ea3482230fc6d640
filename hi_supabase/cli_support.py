"""Shared utilities for hi-supabase CLI modules."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console


def is_mock() -> bool:
    """Return True when CLI runs in mock mode."""
    return os.environ.get("HI_SUPABASE_MOCK") == "1"


def resolve_project_root(project_root: Optional[str] = None) -> Path:
    """Return the directory to scaffold into (defaults to the current directory)."""
    if project_root:
        return Path(project_root).expanduser().resolve()
    return Path.cwd()


def setup_file_logging(log_file: Optional[str] = None, verbose: bool = False) -> None:
    """Enable the file log when --log-file or --verbose is passed."""
    from hi_supabase.core.logger import setup_file_logging as _setup_file_logging
    _setup_file_logging(log_file=log_file, verbose=verbose)


def handle_cli_error(
    e: Exception,
    console: Console,
    verbose: bool = False,
    exit_code: int = 1
) -> None:
    """Report an unexpected failure and exit (status 1 by default).

    The traceback is only shown with --verbose.
    """
    console.print(f"[red]An unexpected error occurred:[/red] {e}")
    if verbose:
        console.print_exception()
    raise typer.Exit(exit_code)


def print_success(console: Console, message: str, prefix: str = "✓") -> None:
    console.print(f"[green]{prefix}[/green] {message}")


def print_error(console: Console, message: str, prefix: str = "✗") -> None:
    console.print(f"[red]{prefix}[/red] {message}")


def print_warning(console: Console, message: str, prefix: str = "⚠") -> None:
    """Yellow line; the scaffold report passes ``prefix="!"`` for skipped files."""
    console.print(f"[yellow]{prefix}[/yellow] {message}")


def print_info(console: Console, message: str, prefix: str = "ℹ") -> None:
    console.print(f"[cyan]{prefix}[/cyan] {message}")
