"""plugintrack: lifecycle tracking for installable plugin files.

Tracks one artifact at a time: its current and previous versions, its
status relative to local and remote copies, and the action the updater
intends to take (install, update, uninstall, upload, remove).
"""

__version__ = "0.1.0"

from plugintrack.core.artifact import (
    Artifact,
    ArtifactStateError,
    IllegalTransitionError,
    InvalidRemovalError,
    NothingToUploadError,
)
from plugintrack.models.status import Action, ActionTable, Status
from plugintrack.models.versions import Dependency, Version

__all__ = [
    "Artifact",
    "ArtifactStateError",
    "IllegalTransitionError",
    "InvalidRemovalError",
    "NothingToUploadError",
    "Action",
    "ActionTable",
    "Status",
    "Dependency",
    "Version",
    "__version__",
]
