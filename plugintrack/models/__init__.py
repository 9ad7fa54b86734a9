"""plugintrack data models — statuses, actions, and immutable version records."""

from plugintrack.models.status import (
    ACTION_LABELS,
    DEFAULT_ACTION_TABLE,
    OBSOLETE_STATUSES,
    STATUS_ACTIONS,
    Action,
    ActionTable,
    Status,
)
from plugintrack.models.versions import Dependency, Version

__all__ = [
    # status
    "Action",
    "Status",
    "ActionTable",
    "ACTION_LABELS",
    "STATUS_ACTIONS",
    "OBSOLETE_STATUSES",
    "DEFAULT_ACTION_TABLE",
    # versions
    "Version",
    "Dependency",
]
