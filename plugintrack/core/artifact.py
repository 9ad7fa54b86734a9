"""Tracked artifact — status/action state machine over a version lineage.

Enforces:
- ``action`` is always legal for ``status`` (checked against the injected
  ``ActionTable`` on every transition)
- Status changes always reset the action to the new status's default
- Local observations are classified against the lineage before any status
  change
- Upload and removal side effects run before the action is committed; their
  preconditions and file lookups are checked before any field changes
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from plugintrack.core.dependencies import DependencyAnalyzer
from plugintrack.core.filesystem import Filesystem, LocalFilesystem
from plugintrack.core.lineage import VersionLineage
from plugintrack.models.status import (
    DEFAULT_ACTION_TABLE,
    OBSOLETE_STATUSES,
    Action,
    ActionTable,
    Status,
)
from plugintrack.models.versions import Dependency, Version

logger = logging.getLogger(__name__)


class ArtifactStateError(RuntimeError):
    """Base class for rejected artifact transitions."""


class IllegalTransitionError(ArtifactStateError):
    """Raised when an action is not legal for the artifact's current status."""


class NothingToUploadError(ArtifactStateError):
    """Raised when an upload is requested but no new version is staged."""


class InvalidRemovalError(ArtifactStateError):
    """Raised when removal or uninstall staging lacks its precondition."""


class Artifact:
    """One installable file and the updater's intentions for it.

    Parameters
    ----------
    filename:
        Stable identifier, relative to the installation root.
    checksum, timestamp:
        The current version. ``checksum=None`` means there is none.
    status:
        Initial status. The action starts as that status's default.
    actions:
        The legal-action table, built once per process.
    filesystem:
        Size lookup and placeholder touching.
    analyzer:
        Recomputes dependencies during upload. Without one, uploads leave
        the dependency set untouched.
    """

    def __init__(
        self,
        filename: str,
        checksum: str | None = None,
        timestamp: int = 0,
        status: Status = Status.NOT_INSTALLED,
        *,
        actions: ActionTable | None = None,
        filesystem: Filesystem | None = None,
        analyzer: DependencyAnalyzer | None = None,
    ) -> None:
        self.filename = filename
        self.description: str = ""
        self._actions = actions or DEFAULT_ACTION_TABLE
        self._filesystem = filesystem or LocalFilesystem()
        self._analyzer = analyzer
        self._lineage = VersionLineage(
            Version(checksum=checksum, timestamp=timestamp)
            if checksum is not None else None
        )
        self._status = status
        self._action = self._actions.default_action(status)

        self.pending_checksum: str | None = None
        self.pending_timestamp: int = 0
        self.file_size: int = 0
        if status == Status.NOT_FIJI:
            self.file_size = self._filesystem.file_size(filename)

        # dict keys keep insertion order and reject duplicates
        self._dependencies: dict[tuple[str, str | None], Dependency] = {}
        self._authors: dict[str, None] = {}
        self._links: dict[str, None] = {}
        self._platforms: dict[str, None] = {}
        self._categories: dict[str, None] = {}

    def __repr__(self) -> str:
        return (
            f"Artifact({self.filename!r}, status={self._status.value}, "
            f"action={self._action.value})"
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def status(self) -> Status:
        return self._status

    @property
    def action(self) -> Action:
        return self._action

    @property
    def current(self) -> Version | None:
        return self._lineage.current

    @property
    def previous_versions(self) -> tuple[Version, ...]:
        return self._lineage.previous

    @property
    def checksum(self) -> str | None:
        """Checksum to publish: the staged one while marked for upload."""
        if self._action == Action.UPLOAD:
            return self.pending_checksum
        current = self._lineage.current
        return current.checksum if current is not None else None

    @property
    def timestamp(self) -> int:
        if self._action == Action.UPLOAD:
            return self.pending_timestamp
        current = self._lineage.current
        return current.timestamp if current is not None else 0

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def set_status(self, status: Status) -> None:
        """Replace the status and reset the action to its default."""
        if status != self._status:
            logger.debug(
                "%s: status %s -> %s", self.filename, self._status.value, status.value
            )
        self._status = status
        self.reset_to_default_action()

    def reset_to_default_action(self) -> None:
        self._action = self._actions.default_action(self._status)

    def set_action(self, action: Action) -> None:
        """Request *action*, running the upload or removal protocol first.

        Raises ``IllegalTransitionError`` if *action* is not legal for the
        current status. When a protocol moves the artifact to a status where
        *action* is no longer legal, the artifact keeps that status's
        default action instead.
        """
        if not self._actions.is_legal(self._status, action):
            logger.warning(
                "Rejected action %s for %s (status %s)",
                action.value, self.filename, self._status.value,
            )
            raise IllegalTransitionError(
                f"Invalid action requested for {self.filename} "
                f"({action.value}, {self._status.value}). "
                f"Allowed: {[a.value for a in self._actions.actions_for(self._status)]}"
            )
        if action == Action.UPLOAD:
            self._mark_for_upload()
        elif action == Action.REMOVE:
            self._mark_for_removal()

        if self._actions.is_legal(self._status, action):
            self._action = action

    def set_first_legal_action(self, candidates: Iterable[Action]) -> bool:
        """Commit the first legal action among *candidates*.

        Returns ``False`` (leaving the artifact untouched) if none is legal.
        """
        for action in candidates:
            if self._actions.is_legal(self._status, action):
                self.set_action(action)
                return True
        return False

    # ------------------------------------------------------------------
    # Lineage
    # ------------------------------------------------------------------

    def has_seen_checksum(self, checksum: str) -> bool:
        return self._lineage.has_seen_checksum(checksum)

    def is_strictly_newer_than(self, timestamp: int) -> bool:
        return self._lineage.is_strictly_newer_than(timestamp)

    def add_previous_version(self, checksum: str, timestamp: int) -> None:
        self._lineage.add_previous(checksum, timestamp)

    def commit_version(self, checksum: str, timestamp: int) -> None:
        """Adopt a new current version, archiving the old one."""
        self._lineage.commit(checksum, timestamp)

    def record_local_observation(self, checksum: str, timestamp: int) -> None:
        """Classify the locally found ``(checksum, timestamp)`` and set status.

        A match with the current version means up to date. Otherwise the
        pair is staged as pending and the status reflects whether the
        content is a known older build or an unknown local modification.
        """
        lineage = self._lineage
        if lineage.is_current_checksum(checksum):
            self.set_status(Status.INSTALLED)
            return

        has_current = lineage.current is not None
        if lineage.has_seen_checksum(checksum):
            status = Status.UPDATEABLE if has_current else Status.OBSOLETE
        else:
            status = Status.MODIFIED if has_current else Status.OBSOLETE_MODIFIED
        self.set_status(status)
        self.pending_checksum = checksum
        self.pending_timestamp = timestamp

    # ------------------------------------------------------------------
    # Upload / removal protocols
    # ------------------------------------------------------------------

    def _mark_for_upload(self) -> None:
        if not self.is_managed:
            current = self._lineage.current
            if current is None:
                raise NothingToUploadError(
                    f"{self.filename} has no local version to upload"
                )
            file_size = self._filesystem.file_size(self.filename)
            self.set_status(Status.INSTALLED)
            self.pending_checksum = current.checksum
            self.pending_timestamp = current.timestamp
        else:
            if self.pending_checksum is None or self._lineage.is_current_checksum(
                self.pending_checksum
            ):
                raise NothingToUploadError(
                    f"{self.filename} is already uploaded"
                )
            file_size = self._filesystem.file_size(self.filename)
            self._lineage.commit(self.pending_checksum, self.pending_timestamp)
        self.file_size = file_size

        if self._analyzer is not None:
            for dependency in self._analyzer.analyze_dependencies(self):
                self.add_dependency(dependency)
        logger.info(
            "Marked %s for upload (%s, %d bytes)",
            self.filename, self.pending_checksum, self.file_size,
        )

    def _mark_for_removal(self) -> None:
        if self._lineage.current is None:
            raise InvalidRemovalError(
                f"{self.filename} has no current version to remove"
            )
        archived = self._lineage.archive_current()
        self.set_status(Status.OBSOLETE)
        logger.info(
            "Marked %s for removal (archived %s)", self.filename, archived.checksum
        )

    def stage_for_uninstall(self) -> None:
        """Leave a placeholder in the staging directory and demote the status.

        The placeholder tells the launcher to delete the file on next start.
        Raises ``InvalidRemovalError`` unless the action is ``UNINSTALL``.
        """
        if self._action != Action.UNINSTALL:
            raise InvalidRemovalError(
                f"{self.filename} was not marked for uninstall"
            )
        self._filesystem.touch_or_create(self._filesystem.update_path(self.filename))
        if self.is_managed:
            self.set_status(
                Status.OBSOLETE_UNINSTALLED if self.is_obsolete else Status.NOT_INSTALLED
            )
        logger.info("Staged %s for uninstall", self.filename)

    # ------------------------------------------------------------------
    # Derived queries
    # ------------------------------------------------------------------

    @property
    def to_install(self) -> bool:
        return self._action == Action.INSTALL

    @property
    def to_update(self) -> bool:
        return self._action == Action.UPDATE

    @property
    def to_uninstall(self) -> bool:
        return self._action == Action.UNINSTALL

    @property
    def to_upload(self) -> bool:
        return self._action == Action.UPLOAD

    @property
    def action_specified(self) -> bool:
        """True unless the action is a plain not-installed/up-to-date no-op."""
        return self._action not in (Action.NOT_INSTALLED, Action.INSTALLED)

    @property
    def is_obsolete(self) -> bool:
        return self._status in OBSOLETE_STATUSES

    @property
    def is_managed(self) -> bool:
        """False for files found locally that the updater does not track."""
        return self._status != Status.NOT_FIJI

    @property
    def is_installable(self) -> bool:
        return self._actions.is_legal(self._status, Action.INSTALL)

    @property
    def is_updateable(self) -> bool:
        return self._actions.is_legal(self._status, Action.UPDATE)

    @property
    def is_uninstallable(self) -> bool:
        return self._actions.is_legal(self._status, Action.UNINSTALL)

    @property
    def is_locally_modified(self) -> bool:
        return self._actions.default_action(self._status) == Action.MODIFIED

    def is_update_available(self, force: bool = False) -> bool:
        """Whether an update applies; *force* also counts modified files."""
        if self._status in (Status.UPDATEABLE, Status.OBSOLETE):
            return True
        return force and (self.is_updateable or self.is_uninstallable)

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    def add_dependency(
        self,
        dependency: Dependency | str,
        timestamp: int = 0,
        relation: str | None = None,
    ) -> None:
        """Add a dependency unless one with the same filename and relation exists."""
        if isinstance(dependency, str):
            dependency = Dependency(
                filename=dependency, timestamp=timestamp, relation=relation
            )
        self._dependencies.setdefault(dependency.key, dependency)

    @property
    def dependencies(self) -> tuple[Dependency, ...]:
        return tuple(self._dependencies.values())

    def add_author(self, author: str) -> None:
        self._authors.setdefault(author, None)

    @property
    def authors(self) -> tuple[str, ...]:
        return tuple(self._authors)

    def add_link(self, link: str) -> None:
        self._links.setdefault(link, None)

    @property
    def links(self) -> tuple[str, ...]:
        return tuple(self._links)

    def add_platform(self, platform: str) -> None:
        self._platforms.setdefault(platform, None)

    @property
    def platforms(self) -> tuple[str, ...]:
        return tuple(self._platforms)

    def add_category(self, category: str) -> None:
        self._categories.setdefault(category, None)

    @property
    def categories(self) -> tuple[str, ...]:
        return tuple(self._categories)
