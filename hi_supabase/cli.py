#!/usr/bin/env python3
"""hi-supabase CLI - Keep your Supabase project from pausing."""

import typer
from rich.console import Console

from hi_supabase.cli_scaffold_commands import register_scaffold_commands, run_install

app = typer.Typer(
    name="hi-supabase",
    help="""hi-supabase - Keep your Supabase project from pausing

Adds a keep-alive API route and a Vercel cron job to a Next.js project.

Quick start:
  hi-supabase              # Same as 'hi-supabase init'
  hi-supabase init         # Scaffold keep-alive files
  hi-supabase uninstall    # Remove them again
""",
    add_completion=False,
)

console = Console()

register_scaffold_commands(app, console)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    # No command given: behave like `init`
    if ctx.invoked_subcommand is None:
        run_install()


if __name__ == "__main__":
    app()
