"""Keep-alive scaffolding for Supabase projects.

Copies the keep-alive route, helpers, config, SQL and cron descriptor into a
project, and removes them again on uninstall.
"""

from .core import ScaffoldManager
from .decommissioner import Decommissioner
from .provisioner import Provisioner

__all__ = [
    "ScaffoldManager",
    "Provisioner",
    "Decommissioner",
]
