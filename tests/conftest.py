"""Shared test fixtures for plugintrack."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from plugintrack.core.artifact import Artifact
from plugintrack.core.dependencies import StaticAnalyzer
from plugintrack.core.filesystem import LocalFilesystem
from plugintrack.models.status import ActionTable, Status
from plugintrack.models.versions import Dependency


@pytest.fixture
def root(tmp_path: Path) -> Path:
    """Provide a temporary installation root with one plugin file on disk."""
    plugins = tmp_path / "plugins"
    plugins.mkdir()
    (plugins / "Foo_.jar").write_bytes(b"x" * 1234)
    return tmp_path


@pytest.fixture
def filesystem(root: Path) -> LocalFilesystem:
    """Provide a LocalFilesystem rooted at the temp installation."""
    return LocalFilesystem(root)


@pytest.fixture
def actions() -> ActionTable:
    """Provide the regular (non-developer) action table."""
    return ActionTable(developer_mode=False)


@pytest.fixture
def developer_actions() -> ActionTable:
    """Provide an action table exposing upload/remove."""
    return ActionTable(developer_mode=True)


@pytest.fixture
def analyzer() -> StaticAnalyzer:
    """Provide an analyzer reporting one dependency for plugins/Foo_.jar."""
    return StaticAnalyzer({
        "plugins/Foo_.jar": [
            Dependency(filename="jars/bar.jar", timestamp=20090101000000),
        ],
    })


@pytest.fixture
def make_artifact(
    filesystem: LocalFilesystem, actions: ActionTable
) -> Callable[..., Artifact]:
    """Factory fixture: build an Artifact with sensible defaults."""

    def _factory(
        filename: str = "plugins/Foo_.jar",
        checksum: str | None = "abc",
        timestamp: int = 100,
        status: Status = Status.INSTALLED,
        **overrides: Any,
    ) -> Artifact:
        defaults: dict[str, Any] = {
            "actions": actions,
            "filesystem": filesystem,
        }
        defaults.update(overrides)
        return Artifact(filename, checksum, timestamp, status, **defaults)

    return _factory


@pytest.fixture
def artifact(make_artifact: Callable[..., Artifact]) -> Artifact:
    """Convenience: an installed artifact with current version ("abc", 100)."""
    return make_artifact()
