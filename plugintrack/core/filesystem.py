"""Filesystem collaborator — size lookup, placeholder touching, checksums.

All calls block and are not retried. ``OSError`` propagates unchanged.
"""

from __future__ import annotations

import hashlib
import logging
import os
import time
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from plugintrack.config import TrackerConfig

logger = logging.getLogger(__name__)

# Logical timestamps are local wall-clock times rendered as digits
TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"


@runtime_checkable
class Filesystem(Protocol):
    """What an artifact needs from the filesystem."""

    def file_size(self, filename: str) -> int:
        """Return the size of *filename* in bytes."""
        ...

    def touch_or_create(self, path: Path) -> None:
        """Bump the mtime of *path*, creating it and its parents if needed."""
        ...

    def update_path(self, filename: str) -> Path:
        """Return the staging location for *filename*."""
        ...


def logical_timestamp(epoch_seconds: float) -> int:
    """Render a Unix time as a ``yyyyMMddHHmmss`` build token."""
    return int(datetime.fromtimestamp(epoch_seconds).strftime(TIMESTAMP_FORMAT))


class LocalFilesystem:
    """``Filesystem`` backed by the local disk, relative to an install root.

    Parameters
    ----------
    root:
        The installation root. Artifact filenames are resolved against it.
    update_dir:
        Name of the staging directory under *root*.
    """

    def __init__(self, root: Path = Path("."), update_dir: str = "update") -> None:
        self._root = Path(root)
        self._update_dir = update_dir

    @classmethod
    def from_config(cls, config: TrackerConfig) -> LocalFilesystem:
        """Build a filesystem rooted at the configured installation root."""
        return cls(config.root, config.update_dir)

    def resolve(self, filename: str) -> Path:
        return self._root / filename

    def file_size(self, filename: str) -> int:
        return self.resolve(filename).stat().st_size

    def update_path(self, filename: str) -> Path:
        return self._root / self._update_dir / filename

    def touch_or_create(self, path: Path) -> None:
        path = Path(path)
        if path.exists():
            now = time.time()
            os.utime(path, (now, now))
            logger.debug("Touched %s", path)
            return
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch()
        logger.debug("Created placeholder %s", path)

    def checksum(self, filename: str) -> str:
        """Return the SHA-256 hex digest of the file's bytes."""
        digest = hashlib.sha256()
        with self.resolve(filename).open("rb") as fh:
            for chunk in iter(lambda: fh.read(65536), b""):
                digest.update(chunk)
        return digest.hexdigest()

    def logical_timestamp(self, filename: str) -> int:
        """Return the file's mtime as a logical build token."""
        return logical_timestamp(self.resolve(filename).stat().st_mtime)
