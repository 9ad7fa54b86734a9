"""Dependency analyzer contract consumed by the upload protocol.

The analyzer belongs to whatever registry holds every tracked artifact; the
artifact only calls it, through an injected object, while being uploaded.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from plugintrack.models.versions import Dependency

if TYPE_CHECKING:
    from plugintrack.core.artifact import Artifact


@runtime_checkable
class DependencyAnalyzer(Protocol):
    """Computes the dependencies of an artifact about to be uploaded."""

    def analyze_dependencies(self, artifact: Artifact) -> list[Dependency]:
        ...


class CallableAnalyzer:
    """Adapts a plain function to the ``DependencyAnalyzer`` protocol."""

    def __init__(self, func: Callable[[Artifact], Iterable[Dependency]]) -> None:
        self._func = func

    def analyze_dependencies(self, artifact: Artifact) -> list[Dependency]:
        return list(self._func(artifact))


class StaticAnalyzer:
    """Returns a fixed dependency list per filename.

    Useful for registries whose dependency data was computed elsewhere.
    """

    def __init__(self, dependencies: dict[str, list[Dependency]] | None = None) -> None:
        self._dependencies = dict(dependencies or {})

    def analyze_dependencies(self, artifact: Artifact) -> list[Dependency]:
        return list(self._dependencies.get(artifact.filename, []))
