"""Version and dependency records — immutable, hashable value objects."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Version(BaseModel):
    """One known build of an artifact.

    The ``timestamp`` is not a Unix epoch. It is a logical build token
    (``yyyyMMddHHmmss`` read as an integer) that only orders builds.
    """

    model_config = ConfigDict(frozen=True)

    checksum: str
    timestamp: int


class Dependency(BaseModel):
    """A requirement on another artifact, at least as new as ``timestamp``."""

    model_config = ConfigDict(frozen=True)

    filename: str
    timestamp: int = 0
    relation: str | None = None

    @property
    def key(self) -> tuple[str, str | None]:
        """Identity used when merging dependency sets."""
        return (self.filename, self.relation)
