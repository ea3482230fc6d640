"""Remove the keep-alive files from a project."""
import shutil
from pathlib import Path
from typing import List, Sequence

from hi_supabase.core.logger import get_logger
from hi_supabase.scaffold.manifest import MANIFEST, WATCHED_DIRECTORIES, ManifestEntry
from hi_supabase.scaffold.outcomes import (
    DirectoryOutcome,
    DirectoryStatus,
    RemovalOutcome,
    RemovalStatus,
)

logger = get_logger(__name__)


class Decommissioner:
    """Deletes manifest destinations, then prunes watched directories left empty."""

    def __init__(
        self,
        project_root: Path,
        manifest: Sequence[ManifestEntry] = MANIFEST,
        watched: Sequence[str] = WATCHED_DIRECTORIES,
    ):
        self.project_root = Path(project_root)
        self.manifest = tuple(manifest)
        self.watched = tuple(watched)

    def decommission(self) -> List[RemovalOutcome]:
        """Delete every manifest destination that exists.

        Returns:
            One outcome per manifest entry, in manifest order
        """
        outcomes = []
        for entry in self.manifest:
            outcome = self._remove_entry(entry)
            self._log_outcome(outcome)
            outcomes.append(outcome)
        return outcomes

    def clean_directories(self) -> List[DirectoryOutcome]:
        """Remove each watched directory that exists and is empty.

        Non-empty directories are never touched.
        """
        outcomes = []
        for rel_path in self.watched:
            path = self.project_root / rel_path
            if not path.is_dir():
                outcomes.append(DirectoryOutcome(rel_path, DirectoryStatus.NOT_FOUND))
                continue

            try:
                if any(path.iterdir()):
                    logger.debug(f"Keeping non-empty directory {rel_path}")
                    outcomes.append(DirectoryOutcome(rel_path, DirectoryStatus.NOT_EMPTY))
                    continue
                # rmdir refuses to delete a directory that is no longer empty
                path.rmdir()
            except OSError as e:
                logger.debug(f"Error removing directory {rel_path}: {e}")
                outcomes.append(DirectoryOutcome(rel_path, DirectoryStatus.FAILED, reason=str(e)))
                continue

            logger.debug(f"Removed empty directory {rel_path}")
            outcomes.append(DirectoryOutcome(rel_path, DirectoryStatus.REMOVED))
        return outcomes

    def _remove_entry(self, entry: ManifestEntry) -> RemovalOutcome:
        path = self.project_root / entry.destination_relative_path
        if not path.exists() and not path.is_symlink():
            return RemovalOutcome(entry, RemovalStatus.NOT_FOUND)

        try:
            if path.is_dir() and not path.is_symlink():
                shutil.rmtree(path)
            else:
                path.unlink()
        except FileNotFoundError:
            return RemovalOutcome(entry, RemovalStatus.NOT_FOUND)
        except OSError as e:
            return RemovalOutcome(entry, RemovalStatus.FAILED, reason=str(e))
        return RemovalOutcome(entry, RemovalStatus.DELETED)

    def _log_outcome(self, outcome: RemovalOutcome) -> None:
        dest = outcome.entry.destination_relative_path
        if outcome.status == RemovalStatus.DELETED:
            logger.debug(f"Deleted {dest}")
        elif outcome.status == RemovalStatus.NOT_FOUND:
            logger.debug(f"{dest} not found (skipped)")
        else:
            logger.debug(f"Error deleting {dest}: {outcome.reason}")
