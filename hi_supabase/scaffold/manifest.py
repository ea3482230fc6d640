"""Files managed by hi-supabase in a consumer project."""
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

TEMPLATES_DIR = Path(__file__).parent / "templates"


@dataclass(frozen=True)
class ManifestEntry:
    """A template and the project-relative path it is copied to."""
    logical_name: str
    source_template_id: str
    destination_relative_path: str


MANIFEST: Tuple[ManifestEntry, ...] = (
    ManifestEntry("route", "route.ts", "app/api/keep-alive/route.ts"),
    ManifestEntry("utils", "keepAliveUtils.ts", "app/api/keep-alive/keepAliveUtils.ts"),
    ManifestEntry("config", "keep-alive-config.ts", "config/keep-alive-config.ts"),
    ManifestEntry("sql", "keep-alive.sql", "keep-alive.sql"),
    ManifestEntry("deploy", "vercel.json", "vercel.json"),
)

# Created when missing, never removed: other code in the project may import it.
CLIENT_ENTRY = ManifestEntry("client", "supabase-server.ts", "lib/supabase/server.ts")

ALTERNATE_CLIENT_PATHS: Tuple[str, ...] = (
    "utils/supabase/server.ts",
    "lib/supabase/client.ts",
    "utils/supabase/client.ts",
)

# Removed after uninstall only when empty.
WATCHED_DIRECTORIES: Tuple[str, ...] = (
    "app/api/keep-alive",
    "config",
)
