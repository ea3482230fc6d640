"""Per-entry results of install and uninstall runs."""
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

from hi_supabase.scaffold.manifest import ManifestEntry

if TYPE_CHECKING:  # pragma: no cover
    from hi_supabase.services.dependencies import DependencyResult


class ProvisionStatus(str, Enum):
    CREATED = "created"
    SKIPPED_EXISTING = "skipped_existing"
    FAILED = "failed"


class RemovalStatus(str, Enum):
    DELETED = "deleted"
    NOT_FOUND = "not_found"
    FAILED = "failed"


class DirectoryStatus(str, Enum):
    REMOVED = "removed"
    NOT_EMPTY = "not_empty"
    NOT_FOUND = "not_found"
    FAILED = "failed"


class ClientStatus(str, Enum):
    FOUND = "found"
    CREATED = "created"
    FAILED = "failed"


@dataclass(frozen=True)
class ProvisionOutcome:
    entry: ManifestEntry
    status: ProvisionStatus
    reason: Optional[str] = None


@dataclass(frozen=True)
class RemovalOutcome:
    entry: ManifestEntry
    status: RemovalStatus
    reason: Optional[str] = None


@dataclass(frozen=True)
class DirectoryOutcome:
    path: str
    status: DirectoryStatus
    reason: Optional[str] = None


@dataclass(frozen=True)
class ClientOutcome:
    """Result of the database client check.

    Attributes:
        path: Canonical client path (project-relative)
        status: What happened at the canonical path
        alternates: Client files found at non-canonical paths
        reason: Error message when status is FAILED
    """
    path: str
    status: ClientStatus
    alternates: List[str] = field(default_factory=list)
    reason: Optional[str] = None


@dataclass
class ProvisionReport:
    """Everything an install run did, in order."""
    files: List[ProvisionOutcome] = field(default_factory=list)
    client: Optional[ClientOutcome] = None
    dependencies: Optional["DependencyResult"] = None
    missing_credentials: List[str] = field(default_factory=list)

    def _count(self, status: ProvisionStatus) -> int:
        return sum(1 for outcome in self.files if outcome.status == status)

    @property
    def created(self) -> int:
        return self._count(ProvisionStatus.CREATED)

    @property
    def skipped(self) -> int:
        return self._count(ProvisionStatus.SKIPPED_EXISTING)

    @property
    def failed(self) -> int:
        return self._count(ProvisionStatus.FAILED)


@dataclass
class DecommissionReport:
    """Everything an uninstall run did, in order."""
    files: List[RemovalOutcome] = field(default_factory=list)
    directories: List[DirectoryOutcome] = field(default_factory=list)

    def _count(self, status: RemovalStatus) -> int:
        return sum(1 for outcome in self.files if outcome.status == status)

    @property
    def deleted(self) -> int:
        return self._count(RemovalStatus.DELETED)

    @property
    def not_found(self) -> int:
        return self._count(RemovalStatus.NOT_FOUND)

    @property
    def failed(self) -> int:
        return self._count(RemovalStatus.FAILED)

    @property
    def removed_directories(self) -> List[str]:
        return [d.path for d in self.directories if d.status == DirectoryStatus.REMOVED]
