"""Console and optional file logging for hi-supabase."""
import logging
import tempfile
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

console = Console()

LOG_DIR = Path.home() / ".hi-supabase"
LOG_FILE = LOG_DIR / "hi-supabase.log"

_file_logging_configured = False

# Child loggers inherit this level; setup_file_logging lowers it for --verbose
logging.getLogger("hi_supabase").setLevel(logging.INFO)


def setup_file_logging(log_file: str = None, verbose: bool = False):
    """Mirror every hi_supabase logger into a log file.

    Only the first call has an effect. With verbose the per-file debug
    lines from install/uninstall are kept; when ~/.hi-supabase cannot be
    created the log goes to the temp dir instead.
    """
    global _file_logging_configured

    if _file_logging_configured:
        return

    target_log_file = Path(log_file) if log_file else LOG_FILE

    try:
        target_log_file.parent.mkdir(parents=True, exist_ok=True)
    except PermissionError:
        target_log_file = Path(tempfile.gettempdir()) / "hi-supabase.log"

    root_logger = logging.getLogger("hi_supabase")
    file_handler = logging.FileHandler(target_log_file)
    file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)

    file_formatter = logging.Formatter(
        "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    file_handler.setFormatter(file_formatter)
    root_logger.addHandler(file_handler)
    root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    _file_logging_configured = True

    root_logger.info(f"hi-supabase logging initialized: {target_log_file}")


def get_logger(name: str) -> logging.Logger:
    """Logger that prints INFO and above to the shared rich console.

    Debug lines still propagate to the file handler on "hi_supabase".
    """
    logger = logging.getLogger(name)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=console, show_path=False)
        handler.setLevel(logging.INFO)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    return logger
