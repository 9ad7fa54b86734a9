"""Version lineage — the current build of an artifact and every build before it.

The lineage knows nothing about statuses. It answers two questions about an
observed ``(checksum, timestamp)`` pair (has this content been seen, does all
known history postdate it) and records adoption of new versions. Versions
that enter the history are never removed from it. A version that becomes
current again keeps its history slot but is hidden from ``previous`` while
it is current, so current and previous never overlap.
"""

from __future__ import annotations

from collections.abc import Iterator

from plugintrack.models.versions import Version


class VersionLineage:
    """Current version plus an insertion-ordered set of previous versions.

    Parameters
    ----------
    current:
        The installed or current version, or ``None`` when there is none.
    """

    def __init__(self, current: Version | None = None) -> None:
        self._current = current
        # dict keys keep insertion order and reject duplicates
        self._previous: dict[Version, None] = {}

    @property
    def current(self) -> Version | None:
        return self._current

    @property
    def previous(self) -> tuple[Version, ...]:
        """Previous versions in the order they were first recorded."""
        return tuple(v for v in self._previous if v != self._current)

    def __iter__(self) -> Iterator[Version]:
        """Iterate over every known version, current first."""
        if self._current is not None:
            yield self._current
        yield from self.previous

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has_seen_checksum(self, checksum: str) -> bool:
        """True if *checksum* matches the current or any previous version."""
        return any(version.checksum == checksum for version in self)

    def is_current_checksum(self, checksum: str | None) -> bool:
        return self._current is not None and self._current.checksum == checksum

    def is_strictly_newer_than(self, timestamp: int) -> bool:
        """True only if every known version is strictly newer than *timestamp*.

        An empty lineage is vacuously newer than anything.
        """
        return all(version.timestamp > timestamp for version in self)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_previous(self, checksum: str, timestamp: int) -> Version:
        """Record a historical version without touching the current one."""
        version = Version(checksum=checksum, timestamp=timestamp)
        if version != self._current:
            self._previous.setdefault(version, None)
        return version

    def commit(self, checksum: str, timestamp: int) -> Version:
        """Archive the current version (if any) and adopt a new one."""
        version = Version(checksum=checksum, timestamp=timestamp)
        if version == self._current:
            return version
        if self._current is not None:
            self._previous.setdefault(self._current, None)
        self._current = version
        return self._current

    def archive_current(self) -> Version:
        """Move the current version into history and leave none current.

        Raises ``ValueError`` when there is no current version.
        """
        if self._current is None:
            raise ValueError("No current version to archive")
        archived = self._current
        self._previous.setdefault(archived, None)
        self._current = None
        return archived
