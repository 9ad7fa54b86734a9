"""Tests for the status/action table — defaults, developer actions, immutability."""

from __future__ import annotations

import pytest

from plugintrack.config import TrackerConfig
from plugintrack.models.status import (
    ACTION_LABELS,
    DEFAULT_ACTION_TABLE,
    Action,
    ActionTable,
    Status,
)


class TestAction:
    def test_every_action_has_a_label(self):
        assert set(ACTION_LABELS) == set(Action)

    def test_labels(self):
        assert Action.INSTALLED.label == "Up-to-date"
        assert Action.UPLOAD.label == "Upload it"
        assert Action.NOT_FIJI.label == "Not in Fiji"


class TestActionTable:
    @pytest.mark.parametrize("developer_mode", [False, True])
    @pytest.mark.parametrize("status", list(Status))
    def test_default_action_is_legal(self, status: Status, developer_mode: bool):
        table = ActionTable(developer_mode=developer_mode)
        assert table.is_legal(status, table.default_action(status))

    def test_defaults(self, actions: ActionTable):
        assert actions.default_action(Status.INSTALLED) == Action.INSTALLED
        assert actions.default_action(Status.NOT_INSTALLED) == Action.NOT_INSTALLED
        assert actions.default_action(Status.OBSOLETE_MODIFIED) == Action.MODIFIED
        assert actions.default_action(Status.OBSOLETE_UNINSTALLED) == Action.OBSOLETE

    def test_order_is_preserved(self, actions: ActionTable):
        assert actions.actions_for(Status.UPDATEABLE) == (
            Action.UPDATEABLE, Action.UNINSTALL, Action.UPDATE,
        )

    def test_no_developer_actions_by_default(self, actions: ActionTable):
        for status in Status:
            assert Action.UPLOAD not in actions.actions_for(status)
            assert Action.REMOVE not in actions.actions_for(status)

    def test_developer_actions_appended_last(self, developer_actions: ActionTable):
        assert developer_actions.actions_for(Status.MODIFIED)[-1] == Action.UPLOAD
        assert developer_actions.actions_for(Status.NOT_INSTALLED)[-1] == Action.REMOVE
        # statuses without a developer action are unchanged
        assert developer_actions.actions_for(Status.INSTALLED) == (
            Action.INSTALLED, Action.UNINSTALL,
        )
        assert developer_actions.actions_for(Status.NEW) == (Action.NEW, Action.INSTALL)

    def test_is_legal(self, developer_actions: ActionTable):
        assert developer_actions.is_legal(Status.NOT_FIJI, Action.UPLOAD)
        assert not developer_actions.is_legal(Status.INSTALLED, Action.UPDATE)
        assert not developer_actions.is_legal(Status.OBSOLETE_UNINSTALLED, Action.UNINSTALL)

    def test_table_is_read_only(self, actions: ActionTable):
        with pytest.raises(TypeError):
            actions.table[Status.INSTALLED] = (Action.INSTALLED,)  # type: ignore[index]

    def test_module_default_is_not_developer(self):
        assert DEFAULT_ACTION_TABLE.developer_mode is False


class TestActionTableFromConfig:
    def test_reads_developer_mode(self):
        table = ActionTable.from_config(TrackerConfig(developer_mode=True))
        assert table.developer_mode is True
        assert table.is_legal(Status.MODIFIED, Action.UPLOAD)

    def test_config_read_once(self):
        config = TrackerConfig(developer_mode=False)
        table = ActionTable.from_config(config)
        config.developer_mode = True
        assert not table.is_legal(Status.MODIFIED, Action.UPLOAD)
