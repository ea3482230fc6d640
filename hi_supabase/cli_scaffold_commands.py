"""Scaffold CLI commands - init, uninstall."""
from typing import Optional

import typer
from rich.console import Console

from hi_supabase.cli_support import (
    handle_cli_error,
    is_mock,
    print_error,
    print_info,
    print_success,
    print_warning,
    resolve_project_root,
    setup_file_logging,
)
from hi_supabase.core.config import HiSupabaseConfig, load_env_file, set_config
from hi_supabase.scaffold.core import ScaffoldManager
from hi_supabase.scaffold.manifest import MANIFEST
from hi_supabase.scaffold.outcomes import (
    ClientStatus,
    DecommissionReport,
    DirectoryStatus,
    ProvisionReport,
    ProvisionStatus,
    RemovalStatus,
)
from hi_supabase.services.dependencies import DependencyInstaller

# Module-level console instance (will be set by register function)
console: Console = Console()


def run_install(
    project_root: Optional[str] = None,
    skip_install: bool = False,
    verbose: bool = False,
    log_file: Optional[str] = None,
) -> ProvisionReport:
    """Scaffold the keep-alive files and print the results."""
    if log_file or verbose:
        setup_file_logging(log_file=log_file, verbose=verbose)

    try:
        root = resolve_project_root(project_root)
        console.print("[blue]Initializing hi-supabase...[/blue]")

        load_env_file(root)
        config = HiSupabaseConfig.from_env()
        set_config(config)

        manager = ScaffoldManager(root, config=config, mock=is_mock())
        report = manager.install(install_dependencies=not skip_install)
    except Exception as e:
        handle_cli_error(e, console, verbose)

    _print_install_report(report)
    return report


def run_uninstall(
    project_root: Optional[str] = None,
    verbose: bool = False,
    log_file: Optional[str] = None,
) -> DecommissionReport:
    """Remove the keep-alive files and print the results."""
    if log_file or verbose:
        setup_file_logging(log_file=log_file, verbose=verbose)

    try:
        root = resolve_project_root(project_root)
        console.print("[blue]Uninstalling hi-supabase...[/blue]")
        report = ScaffoldManager(root).uninstall()
    except Exception as e:
        handle_cli_error(e, console, verbose)

    _print_uninstall_report(report)
    return report


def _print_install_report(report: ProvisionReport) -> None:
    if report.missing_credentials:
        print_warning(
            console,
            f"{' or '.join(report.missing_credentials)} not found in .env file.",
        )
        print_warning(console, "Please ensure you have your Supabase credentials set up.")
    else:
        print_success(console, "Found Supabase environment variables.")

    for outcome in report.files:
        dest = outcome.entry.destination_relative_path
        if outcome.status == ProvisionStatus.CREATED:
            print_success(console, f"Created {dest}")
        elif outcome.status == ProvisionStatus.SKIPPED_EXISTING:
            print_warning(console, f"File already exists: {dest} (skipped)", prefix="!")
        else:
            print_error(console, f"Error copying {outcome.entry.source_template_id}: {outcome.reason}")

    client = report.client
    if client is not None:
        for path in client.alternates:
            print_warning(
                console,
                f"Found Supabase client at {path}. Please ensure "
                f"'{MANIFEST[0].destination_relative_path}' imports it correctly.",
                prefix="!",
            )
        if client.status == ClientStatus.FOUND:
            print_success(console, f"Found existing Supabase client at {client.path}")
        elif client.status == ClientStatus.CREATED:
            print_success(console, f"Created Supabase client at {client.path}")
        else:
            print_error(console, f"Error creating Supabase client: {client.reason}")

    deps = report.dependencies
    if deps is not None and not deps.skipped:
        if deps.installed:
            print_success(console, "Dependencies installed successfully.")
        else:
            print_error(
                console,
                "Failed to install dependencies automatically. Please install them manually:",
                prefix="!",
            )
            cmd = DependencyInstaller.install_command(deps.package_manager, deps.missing)
            console.print(f"   [cyan]{' '.join(cmd)}[/cyan]")

    console.print("\n[blue]Setup complete![/blue]")
    console.print("To finish setup:")
    console.print("1. Run the content of `keep-alive.sql` in your Supabase SQL Editor to create the table.")
    console.print("2. Deploy your project. The `vercel.json` will automatically configure the cron job.")


def _print_uninstall_report(report: DecommissionReport) -> None:
    for outcome in report.files:
        dest = outcome.entry.destination_relative_path
        if outcome.status == RemovalStatus.DELETED:
            print_success(console, f"Deleted {dest}")
        elif outcome.status == RemovalStatus.NOT_FOUND:
            console.print(f"[dim]- {dest} not found (skipped)[/dim]")
        else:
            print_error(console, f"Error deleting {dest}: {outcome.reason}")

    for directory in report.directories:
        if directory.status == DirectoryStatus.REMOVED:
            print_success(console, f"Removed empty directory {directory.path}")
        elif directory.status == DirectoryStatus.FAILED:
            print_error(console, f"Error removing directory {directory.path}: {directory.reason}")

    console.print("\n[blue]Uninstallation complete![/blue]")
    print_info(
        console,
        "`lib/supabase/server.ts` was NOT deleted as it may be used by other parts of your app.",
    )
    console.print("You can now remove the package dependency:")
    console.print("   [cyan]pip uninstall hi-supabase[/cyan]")


def init(
    project_root: Optional[str] = typer.Option(
        None, "--project-root", "-C", help="Project directory (default: current directory)"
    ),
    skip_install: bool = typer.Option(
        False, "--skip-install", help="Don't install @supabase/supabase-js"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Write logs to this file"),
):
    """Add the keep-alive route, config, SQL and cron job to a project.

    Existing files are never overwritten.

    Examples:
        hi-supabase init                  # Scaffold into the current directory
        hi-supabase init -C ./web         # Scaffold into ./web
        hi-supabase init --skip-install   # Don't touch package.json
    """
    run_install(project_root, skip_install=skip_install, verbose=verbose, log_file=log_file)


def uninstall(
    project_root: Optional[str] = typer.Option(
        None, "--project-root", "-C", help="Project directory (default: current directory)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Write logs to this file"),
):
    """Remove the files added by init.

    Directories are only removed when empty. lib/supabase/server.ts is kept.
    """
    run_uninstall(project_root, verbose=verbose, log_file=log_file)


def register_scaffold_commands(app: typer.Typer, shared_console: Console) -> None:
    """Register init and uninstall with the main Typer app.

    Args:
        app: Main Typer application
        shared_console: Shared Rich console instance
    """
    global console
    console = shared_console

    app.command()(init)
    app.command()(uninstall)
