"""Install and uninstall runs for the keep-alive scaffolding."""
from pathlib import Path
from typing import Optional

from hi_supabase.core.config import HiSupabaseConfig, get_config
from hi_supabase.core.logger import get_logger
from hi_supabase.scaffold.decommissioner import Decommissioner
from hi_supabase.scaffold.outcomes import DecommissionReport, ProvisionReport
from hi_supabase.scaffold.provisioner import Provisioner
from hi_supabase.services.dependencies import DependencyInstaller

logger = get_logger(__name__)


class ScaffoldManager:
    """Runs a full install or uninstall against one project directory."""

    def __init__(
        self,
        project_root: Optional[Path] = None,
        templates_dir: Optional[Path] = None,
        config: Optional[HiSupabaseConfig] = None,
        mock: bool = False,
    ):
        self.project_root = Path(project_root or Path.cwd())
        self.config = config
        self.provisioner = Provisioner(self.project_root, templates_dir=templates_dir)
        self.decommissioner = Decommissioner(self.project_root)
        self.installer = DependencyInstaller(self.project_root, mock=mock)

    def install(self, install_dependencies: bool = True) -> ProvisionReport:
        """Scaffold the keep-alive files into the project.

        Args:
            install_dependencies: Install @supabase/supabase-js if package.json lacks it

        Returns:
            ProvisionReport with per-file, client and dependency results
        """
        config = self.config or get_config()
        report = ProvisionReport(missing_credentials=config.missing_credentials())

        if report.missing_credentials:
            logger.debug(f"Missing credentials: {report.missing_credentials}")
        else:
            logger.debug("Found Supabase environment variables")

        report.files = self.provisioner.provision()
        report.client = self.provisioner.ensure_client()

        if install_dependencies:
            report.dependencies = self.installer.install_missing()

        return report

    def uninstall(self) -> DecommissionReport:
        """Remove the scaffolded files and any watched directory left empty."""
        report = DecommissionReport()
        report.files = self.decommissioner.decommission()
        report.directories = self.decommissioner.clean_directories()
        return report
