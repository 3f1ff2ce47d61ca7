"""Tests for the file-backed view config store."""

import json

import pytest

from tododash.adapters.file_config_store import FileConfigStore
from tododash.ports.config_repo import CompletionStatsConfig, TaskPanelConfig
from tododash.ports.errors import RepositoryError


@pytest.fixture
def store(tmp_path):
    return FileConfigStore(tmp_path / "data" / "view_config.json")


class TestTaskPanelConfig:
    def test_default_when_missing(self, store):
        assert store.get_task_panel_config() == TaskPanelConfig(filter="")

    def test_round_trip(self, store):
        store.set_task_panel_config(TaskPanelConfig(filter="today | overdue"))
        assert store.get_task_panel_config().filter == "today | overdue"

    def test_legacy_filter_key(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text(json.dumps({"todoist_filter_query": "#Work"}))
        assert store.get_task_panel_config().filter == "#Work"

    def test_malformed_file_falls_back(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text("{not json")
        assert store.get_task_panel_config() == TaskPanelConfig()


class TestCompletionStatsConfig:
    def test_default_when_missing(self, store):
        assert store.get_completion_stats_config() == CompletionStatsConfig()

    def test_labels_normalized_on_write(self, store):
        store.set_completion_stats_config(
            CompletionStatsConfig(excluded_labels=["@noise", "noise", " ", "@@misc"], window_days=30)
        )
        saved = json.loads(store.path.read_text())["completion_stats_config"]
        assert saved["excluded_labels"] == ["noise", "misc"]

        config = store.get_completion_stats_config()
        assert config.excluded_labels == ["noise", "misc"]
        assert config.window_days == 30
        assert config.moving_average_days == 7

    def test_invalid_values_fall_back(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text(
            json.dumps(
                {"completion_stats_config": {"excluded_labels": "nope", "window_days": -3, "moving_average_days": True}}
            )
        )
        assert store.get_completion_stats_config() == CompletionStatsConfig()

    def test_records_share_one_file(self, store):
        store.set_task_panel_config(TaskPanelConfig(filter="p1"))
        store.set_completion_stats_config(CompletionStatsConfig(excluded_labels=["x"]))
        assert store.get_task_panel_config().filter == "p1"
        assert store.get_completion_stats_config().excluded_labels == ["x"]

    def test_write_failure_raises_repository_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("file, not a directory")
        store = FileConfigStore(blocker / "view_config.json")
        with pytest.raises(RepositoryError):
            store.set_task_panel_config(TaskPanelConfig(filter="x"))
