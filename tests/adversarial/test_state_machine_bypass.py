"""Adversarial tests — attempts to leave an artifact with an illegal action.

These tests verify that:
1. Every (status, action) pair either commits a legal action or is rejected
2. A rejected request leaves status, action, and lineage unchanged
3. Developer actions stay out of reach without developer mode
4. Status changes can never strand an illegal action
"""

from __future__ import annotations

import itertools

import pytest

from plugintrack.core.artifact import Artifact, ArtifactStateError
from plugintrack.core.dependencies import StaticAnalyzer
from plugintrack.models.status import Action, ActionTable, Status

PAIRS = list(itertools.product(Status, Action))


def _snapshot(artifact: Artifact):
    return (
        artifact.status,
        artifact.action,
        artifact.current,
        artifact.previous_versions,
        artifact.dependencies,
    )


def _build(make_artifact, status: Status, actions: ActionTable) -> Artifact:
    artifact = make_artifact(
        status=status, actions=actions, analyzer=StaticAnalyzer()
    )
    # give managed artifacts something to upload
    artifact.pending_checksum = "pending"
    artifact.pending_timestamp = 200
    return artifact


class TestActionInvariant:
    @pytest.mark.parametrize("developer_mode", [False, True])
    @pytest.mark.parametrize("status,action", PAIRS)
    def test_set_action_keeps_action_legal(
        self, make_artifact, status: Status, action: Action, developer_mode: bool
    ):
        table = ActionTable(developer_mode=developer_mode)
        artifact = _build(make_artifact, status, table)
        before = _snapshot(artifact)
        try:
            artifact.set_action(action)
        except ArtifactStateError:
            assert _snapshot(artifact) == before
        assert table.is_legal(artifact.status, artifact.action)

    @pytest.mark.parametrize("status,action", PAIRS)
    def test_illegal_requests_always_raise(self, make_artifact, status, action):
        table = ActionTable(developer_mode=True)
        if table.is_legal(status, action):
            pytest.skip("legal pair")
        artifact = _build(make_artifact, status, table)
        with pytest.raises(ArtifactStateError):
            artifact.set_action(action)

    @pytest.mark.parametrize("status", list(Status))
    def test_no_developer_actions_without_developer_mode(self, make_artifact, status):
        artifact = _build(make_artifact, status, ActionTable(developer_mode=False))
        for action in (Action.UPLOAD, Action.REMOVE):
            with pytest.raises(ArtifactStateError):
                artifact.set_action(action)

    @pytest.mark.parametrize("start,target", list(itertools.product(Status, Status)))
    def test_set_status_never_strands_action(self, make_artifact, start, target):
        table = ActionTable(developer_mode=True)
        artifact = _build(make_artifact, start, table)
        artifact.set_first_legal_action([Action.UNINSTALL, Action.INSTALL])
        artifact.set_status(target)
        assert artifact.action == table.default_action(target)


class TestLineageCannotShrink:
    def test_history_survives_every_operation(self, make_artifact):
        artifact = make_artifact(actions=ActionTable(developer_mode=True))
        artifact.add_previous_version("old", 10)
        artifact.record_local_observation("xyz", 150)
        artifact.set_action(Action.UPLOAD)
        artifact.record_local_observation("old", 10)
        artifact.commit_version("newest", 300)
        checksums = [v.checksum for v in artifact.previous_versions]
        assert checksums == ["old", "abc", "xyz"]
