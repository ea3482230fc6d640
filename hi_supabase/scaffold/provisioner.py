"""Copy the keep-alive templates into a project without overwriting anything."""
import shutil
from pathlib import Path
from typing import List, Optional, Sequence

from hi_supabase.core.logger import get_logger
from hi_supabase.scaffold.manifest import (
    ALTERNATE_CLIENT_PATHS,
    CLIENT_ENTRY,
    MANIFEST,
    TEMPLATES_DIR,
    ManifestEntry,
)
from hi_supabase.scaffold.outcomes import (
    ClientOutcome,
    ClientStatus,
    ProvisionOutcome,
    ProvisionStatus,
)

logger = get_logger(__name__)


class DestinationExists(Exception):
    """Raised when a manifest destination is already present."""
    pass


class Provisioner:
    """Applies the manifest to a project tree, one entry at a time."""

    def __init__(
        self,
        project_root: Path,
        templates_dir: Optional[Path] = None,
        manifest: Sequence[ManifestEntry] = MANIFEST,
    ):
        self.project_root = Path(project_root)
        self.templates_dir = templates_dir or TEMPLATES_DIR
        self.manifest = tuple(manifest)

    def provision(self) -> List[ProvisionOutcome]:
        """Copy every manifest template whose destination is absent.

        Existing destinations are never overwritten, even when their
        contents differ from the template. A failure on one entry is
        recorded and the next entry is still processed.

        Returns:
            One outcome per manifest entry, in manifest order
        """
        outcomes = []
        for entry in self.manifest:
            outcome = self._provision_entry(entry)
            self._log_outcome(outcome)
            outcomes.append(outcome)
        return outcomes

    def ensure_client(self) -> ClientOutcome:
        """Create the Supabase client module at its canonical path if missing.

        Client files found at alternate paths are reported in the outcome
        but do not stop creation: the route imports from the canonical path.
        """
        canonical = CLIENT_ENTRY.destination_relative_path
        if (self.project_root / canonical).exists():
            logger.debug(f"Found existing Supabase client at {canonical}")
            return ClientOutcome(path=canonical, status=ClientStatus.FOUND)

        alternates = [p for p in ALTERNATE_CLIENT_PATHS if (self.project_root / p).exists()]
        for path in alternates:
            logger.debug(f"Found Supabase client at alternate path {path}")

        try:
            self._copy_template(CLIENT_ENTRY)
        except DestinationExists:
            logger.debug(f"Found existing Supabase client at {canonical}")
            return ClientOutcome(path=canonical, status=ClientStatus.FOUND, alternates=alternates)
        except OSError as e:
            logger.debug(f"Error creating Supabase client: {e}")
            return ClientOutcome(
                path=canonical,
                status=ClientStatus.FAILED,
                alternates=alternates,
                reason=str(e),
            )

        logger.debug(f"Created Supabase client at {canonical}")
        return ClientOutcome(path=canonical, status=ClientStatus.CREATED, alternates=alternates)

    def _provision_entry(self, entry: ManifestEntry) -> ProvisionOutcome:
        try:
            self._copy_template(entry)
        except DestinationExists:
            return ProvisionOutcome(entry, ProvisionStatus.SKIPPED_EXISTING)
        except OSError as e:
            return ProvisionOutcome(entry, ProvisionStatus.FAILED, reason=str(e))
        return ProvisionOutcome(entry, ProvisionStatus.CREATED)

    def _copy_template(self, entry: ManifestEntry) -> None:
        """Copy one template, refusing to replace an existing destination.

        Raises:
            DestinationExists: If the destination already exists
            OSError: If the template is missing, a parent path is not a
                directory, or the write fails. A partially written
                destination is removed first.
        """
        source = self.templates_dir / entry.source_template_id
        destination = self.project_root / entry.destination_relative_path

        if destination.exists() or destination.is_symlink():
            raise DestinationExists(entry.destination_relative_path)

        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
        except FileExistsError:
            raise NotADirectoryError(
                f"{destination.parent} exists and is not a directory"
            ) from None

        with open(source, "rb") as src:
            try:
                # "x" fails if the file appeared after the existence check
                dst = open(destination, "xb")
            except FileExistsError:
                raise DestinationExists(entry.destination_relative_path) from None

            try:
                with dst:
                    shutil.copyfileobj(src, dst)
                shutil.copymode(source, destination)
            except OSError:
                destination.unlink(missing_ok=True)
                raise

    def _log_outcome(self, outcome: ProvisionOutcome) -> None:
        dest = outcome.entry.destination_relative_path
        if outcome.status == ProvisionStatus.CREATED:
            logger.debug(f"Created {outcome.entry.logical_name} at {dest}")
        elif outcome.status == ProvisionStatus.SKIPPED_EXISTING:
            logger.debug(f"File already exists: {dest} (skipped)")
        else:
            logger.debug(f"Error copying {outcome.entry.source_template_id}: {outcome.reason}")
