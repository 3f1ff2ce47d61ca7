"""File-based view configuration adapter."""

import json
import logging
from pathlib import Path

from tododash.core.labels import normalize_labels
from tododash.ports.config_repo import CompletionStatsConfig, TaskPanelConfig
from tododash.ports.errors import RepositoryError

logger = logging.getLogger(__name__)

TASK_PANEL_CONFIG_KEY = "task_panel_config"
LEGACY_FILTER_KEY = "todoist_filter_query"
COMPLETION_STATS_CONFIG_KEY = "completion_stats_config"


class FileConfigStore:
    """
    JSON file config storage.

    Implements ConfigRepository protocol. Both records share one file, keyed
    by record name. Unreadable content falls back to defaults.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def _load(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text())
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Ignoring unreadable config {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self, key: str, value: dict) -> None:
        data = self._load()
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2, ensure_ascii=False))
        except OSError as e:
            raise RepositoryError(f"Failed to write {self.path}: {e}") from e

    def get_task_panel_config(self) -> TaskPanelConfig:
        data = self._load()
        panel = data.get(TASK_PANEL_CONFIG_KEY)
        if isinstance(panel, dict) and isinstance(panel.get("filter"), str):
            return TaskPanelConfig(filter=panel["filter"])

        legacy = data.get(LEGACY_FILTER_KEY)
        if isinstance(legacy, str):
            return TaskPanelConfig(filter=legacy)

        return TaskPanelConfig()

    def set_task_panel_config(self, config: TaskPanelConfig) -> None:
        self._save(TASK_PANEL_CONFIG_KEY, {"filter": config.filter})

    def get_completion_stats_config(self) -> CompletionStatsConfig:
        raw = self._load().get(COMPLETION_STATS_CONFIG_KEY)
        if not isinstance(raw, dict):
            return CompletionStatsConfig()

        defaults = CompletionStatsConfig()
        labels = raw.get("excluded_labels")
        if not isinstance(labels, list):
            labels = []

        def positive_int(name: str, default: int) -> int:
            value = raw.get(name)
            if isinstance(value, int) and not isinstance(value, bool) and value > 0:
                return value
            return default

        return CompletionStatsConfig(
            excluded_labels=normalize_labels([label for label in labels if isinstance(label, str)]),
            window_days=positive_int("window_days", defaults.window_days),
            moving_average_days=positive_int("moving_average_days", defaults.moving_average_days),
        )

    def set_completion_stats_config(self, config: CompletionStatsConfig) -> None:
        self._save(
            COMPLETION_STATS_CONFIG_KEY,
            {
                "excluded_labels": normalize_labels(config.excluded_labels),
                "window_days": config.window_days,
                "moving_average_days": config.moving_average_days,
            },
        )
