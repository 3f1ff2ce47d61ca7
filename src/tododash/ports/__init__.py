"""Ports - interfaces/protocols for external dependencies."""

from .task_repo import TaskRepository
from .completion_stats_repo import CompletionStatsRepository
from .config_repo import CompletionStatsConfig, ConfigRepository, TaskPanelConfig
from .errors import RepositoryError, RequestError, TododashError

__all__ = [
    "TaskRepository",
    "CompletionStatsRepository",
    "ConfigRepository",
    "TaskPanelConfig",
    "CompletionStatsConfig",
    "TododashError",
    "RequestError",
    "RepositoryError",
]
