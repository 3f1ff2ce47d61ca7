"""View configuration repository interface."""

from dataclasses import dataclass, field
from typing import Protocol


@dataclass
class TaskPanelConfig:
    """Task panel settings: the filter query for the task tree."""

    filter: str = ""


@dataclass
class CompletionStatsConfig:
    """Completion stats settings."""

    excluded_labels: list[str] = field(default_factory=list)
    window_days: int = 90
    moving_average_days: int = 7


class ConfigRepository(Protocol):
    """Interface for persisting view configuration as plain records."""

    def get_task_panel_config(self) -> TaskPanelConfig:
        ...

    def set_task_panel_config(self, config: TaskPanelConfig) -> None:
        ...

    def get_completion_stats_config(self) -> CompletionStatsConfig:
        ...

    def set_completion_stats_config(self, config: CompletionStatsConfig) -> None:
        ...
