"""npm dependency detection and installation for the consumer project."""
import json
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from hi_supabase.core.config import get_config
from hi_supabase.core.logger import get_logger

logger = get_logger(__name__)

REQUIRED_DEPENDENCIES = ("@supabase/supabase-js",)

# Checked in order; npm is the fallback
LOCKFILES = (
    ("pnpm-lock.yaml", "pnpm"),
    ("yarn.lock", "yarn"),
)


@dataclass
class DependencyResult:
    """Result of the dependency install step."""
    missing: List[str] = field(default_factory=list)
    package_manager: Optional[str] = None
    installed: bool = False
    error: Optional[str] = None

    @property
    def skipped(self) -> bool:
        return not self.missing


class DependencyInstaller:
    """Installs the client library into the project when package.json lacks it."""

    def __init__(
        self,
        project_root: Path,
        required: Sequence[str] = REQUIRED_DEPENDENCIES,
        mock: bool = False,
    ):
        self.project_root = Path(project_root)
        self.required = tuple(required)
        self.mock = mock

    def read_package_json(self) -> Optional[dict]:
        """Return parsed package.json, or None if the project has none."""
        package_json = self.project_root / "package.json"
        if not package_json.exists():
            return None
        return json.loads(package_json.read_text())

    def missing_dependencies(self) -> List[str]:
        """Required packages declared in neither dependencies nor devDependencies."""
        package_json = self.read_package_json()
        if package_json is None:
            return []

        declared = set(package_json.get("dependencies") or {})
        declared.update(package_json.get("devDependencies") or {})
        return [dep for dep in self.required if dep not in declared]

    def detect_package_manager(self) -> str:
        for lockfile, manager in LOCKFILES:
            if (self.project_root / lockfile).exists():
                return manager
        return "npm"

    @staticmethod
    def install_command(package_manager: str, deps: Sequence[str]) -> List[str]:
        verb = "install" if package_manager == "npm" else "add"
        return [package_manager, verb, *deps]

    def install_missing(self) -> DependencyResult:
        """Install whatever is missing using the project's package manager.

        Failures are logged and reported in the result, never raised.
        """
        missing = self.missing_dependencies()
        if not missing:
            return DependencyResult()

        manager = self.detect_package_manager()
        result = DependencyResult(missing=missing, package_manager=manager)
        cmd = self.install_command(manager, missing)

        logger.info(f"Installing missing dependencies ({', '.join(missing)}) using {manager}...")

        if self.mock:
            logger.info(f"MOCK: Would run {' '.join(cmd)} in {self.project_root}")
            result.installed = True
            return result

        try:
            subprocess.run(
                cmd,
                cwd=self.project_root,
                check=True,
                timeout=get_config().install_timeout,
            )
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired, OSError) as e:
            logger.debug(f"Install command failed: {e}")
            result.error = str(e)
            return result

        logger.debug("Dependencies installed")
        result.installed = True
        return result
