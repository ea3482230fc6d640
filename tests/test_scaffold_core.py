"""Tests for full install and uninstall runs."""
import json

from hi_supabase.core.config import HiSupabaseConfig
from hi_supabase.scaffold.core import ScaffoldManager
from hi_supabase.scaffold.manifest import MANIFEST
from hi_supabase.scaffold.outcomes import ClientStatus, DirectoryStatus


class TestScaffoldManager:
    """Test install/uninstall orchestration."""

    def test_install_then_reinstall(self, project_dir, credentials_config):
        """Fresh install creates everything; the second run only skips."""
        manager = ScaffoldManager(project_dir, mock=True)

        first = manager.install()
        assert first.created == len(MANIFEST)
        assert first.skipped == 0
        assert first.failed == 0
        assert first.client.status == ClientStatus.CREATED
        assert first.missing_credentials == []

        contents = {
            e.destination_relative_path: (project_dir / e.destination_relative_path).read_bytes()
            for e in MANIFEST
        }

        second = manager.install()
        assert second.created == 0
        assert second.skipped == len(MANIFEST)
        assert second.client.status == ClientStatus.FOUND
        for path, data in contents.items():
            assert (project_dir / path).read_bytes() == data

    def test_install_then_uninstall_restores_tree(self, project_dir, credentials_config):
        (project_dir / "README.md").write_text("hello")
        before = sorted(p.relative_to(project_dir) for p in project_dir.rglob("*"))

        manager = ScaffoldManager(project_dir, mock=True)
        manager.install()
        report = manager.uninstall()

        assert report.deleted == len(MANIFEST)
        assert report.not_found == 0
        assert report.removed_directories == ["app/api/keep-alive", "config"]
        assert (project_dir / "lib" / "supabase" / "server.ts").exists()

        after = sorted(
            p.relative_to(project_dir)
            for p in project_dir.rglob("*")
            if not p.is_relative_to(project_dir / "lib") and not p.is_relative_to(project_dir / "app")
        )
        assert after == before

    def test_uninstall_without_install(self, project_dir):
        report = ScaffoldManager(project_dir).uninstall()

        assert report.not_found == len(MANIFEST)
        assert report.deleted == 0
        assert all(d.status == DirectoryStatus.NOT_FOUND for d in report.directories)

    def test_missing_credentials_are_reported_not_fatal(self, project_dir):
        manager = ScaffoldManager(project_dir, config=HiSupabaseConfig(), mock=True)

        report = manager.install()

        assert report.missing_credentials == [
            "NEXT_PUBLIC_SUPABASE_URL",
            "NEXT_PUBLIC_SUPABASE_ANON_KEY",
        ]
        assert report.created == len(MANIFEST)

    def test_install_dependencies_when_missing(self, project_dir, credentials_config):
        (project_dir / "package.json").write_text(json.dumps({"dependencies": {"next": "14.0.0"}}))

        report = ScaffoldManager(project_dir, mock=True).install()

        assert report.dependencies.missing == ["@supabase/supabase-js"]
        assert report.dependencies.installed is True

    def test_skip_dependency_install(self, project_dir, credentials_config):
        (project_dir / "package.json").write_text(json.dumps({"dependencies": {}}))

        report = ScaffoldManager(project_dir, mock=True).install(install_dependencies=False)

        assert report.dependencies is None
