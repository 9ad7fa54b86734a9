"""Artifact statuses, actions, and the per-status table of legal actions.

Each status owns a fixed, ordered tuple of actions. The first entry is the
status's no-op default. Developer-only actions (upload/remove) are appended
when the table is built with ``developer_mode=True``; the choice is baked in
at construction and never re-read.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from plugintrack.config import TrackerConfig


class Action(str, Enum):
    """What the updater intends to do with an artifact."""

    # no changes
    NOT_FIJI = "not_fiji"
    NOT_INSTALLED = "not_installed"
    INSTALLED = "installed"
    UPDATEABLE = "updateable"
    MODIFIED = "modified"
    NEW = "new"
    OBSOLETE = "obsolete"

    # changes
    UNINSTALL = "uninstall"
    INSTALL = "install"
    UPDATE = "update"

    # developer-only changes
    UPLOAD = "upload"
    REMOVE = "remove"

    @property
    def label(self) -> str:
        """Human-readable label, as shown in update tables."""
        return ACTION_LABELS[self]


ACTION_LABELS: dict[Action, str] = {
    Action.NOT_FIJI: "Not in Fiji",
    Action.NOT_INSTALLED: "Not installed",
    Action.INSTALLED: "Up-to-date",
    Action.UPDATEABLE: "Update available",
    Action.MODIFIED: "Locally modified",
    Action.NEW: "New plugin",
    Action.OBSOLETE: "Obsolete",
    Action.UNINSTALL: "Uninstall it",
    Action.INSTALL: "Install it",
    Action.UPDATE: "Update it",
    Action.UPLOAD: "Upload it",
    Action.REMOVE: "Remove it",
}


class Status(str, Enum):
    """Coarse lifecycle classification of an artifact."""

    NOT_INSTALLED = "not_installed"
    INSTALLED = "installed"
    UPDATEABLE = "updateable"
    MODIFIED = "modified"
    NOT_FIJI = "not_fiji"
    NEW = "new"
    OBSOLETE_UNINSTALLED = "obsolete_uninstalled"
    OBSOLETE = "obsolete"
    OBSOLETE_MODIFIED = "obsolete_modified"


OBSOLETE_STATUSES: frozenset[Status] = frozenset({
    Status.OBSOLETE,
    Status.OBSOLETE_MODIFIED,
    Status.OBSOLETE_UNINSTALLED,
})

# status -> (regular actions, developer action or None)
STATUS_ACTIONS: dict[Status, tuple[tuple[Action, ...], Action | None]] = {
    Status.NOT_INSTALLED: ((Action.NOT_INSTALLED, Action.INSTALL), Action.REMOVE),
    Status.INSTALLED: ((Action.INSTALLED, Action.UNINSTALL), None),
    Status.UPDATEABLE: (
        (Action.UPDATEABLE, Action.UNINSTALL, Action.UPDATE), Action.UPLOAD,
    ),
    Status.MODIFIED: (
        (Action.MODIFIED, Action.UNINSTALL, Action.UPDATE), Action.UPLOAD,
    ),
    Status.NOT_FIJI: ((Action.NOT_FIJI, Action.UNINSTALL), Action.UPLOAD),
    Status.NEW: ((Action.NEW, Action.INSTALL), None),
    Status.OBSOLETE_UNINSTALLED: ((Action.OBSOLETE,), None),
    Status.OBSOLETE: ((Action.OBSOLETE, Action.UNINSTALL), Action.UPLOAD),
    Status.OBSOLETE_MODIFIED: ((Action.MODIFIED, Action.UNINSTALL), Action.UPLOAD),
}


class ActionTable:
    """Read-only mapping from each status to its ordered legal actions.

    Parameters
    ----------
    developer_mode:
        When ``True``, statuses that declare a developer action expose it
        as their last legal action.
    """

    def __init__(self, developer_mode: bool = False) -> None:
        self._developer_mode = developer_mode
        table: dict[Status, tuple[Action, ...]] = {}
        for status, (actions, developer_action) in STATUS_ACTIONS.items():
            if developer_action is not None and developer_mode:
                actions = actions + (developer_action,)
            table[status] = actions
        self._table: Mapping[Status, tuple[Action, ...]] = MappingProxyType(table)

    @classmethod
    def from_config(cls, config: TrackerConfig) -> ActionTable:
        """Build a table from the developer-mode setting of *config*."""
        return cls(developer_mode=config.developer_mode)

    @property
    def developer_mode(self) -> bool:
        return self._developer_mode

    @property
    def table(self) -> Mapping[Status, tuple[Action, ...]]:
        return self._table

    def actions_for(self, status: Status) -> tuple[Action, ...]:
        """Return the legal actions of *status*, default first."""
        return self._table[status]

    def is_legal(self, status: Status, action: Action) -> bool:
        return action in self._table[status]

    def default_action(self, status: Status) -> Action:
        """Return the no-op action of *status*."""
        return self._table[status][0]


DEFAULT_ACTION_TABLE = ActionTable(developer_mode=False)
