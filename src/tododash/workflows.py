"""Workflow layer between the CLI and the functional core.

Each fetch_* function pulls data through a repository port and hands it to a
pure core function. Repository errors are not caught here; they propagate
to the caller unchanged.
"""

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime, time, timedelta

from .adapters.file_config_store import FileConfigStore
from .adapters.todoist_api import TodoistAdapter
from .config import DATED_GOAL_FILTER, GOAL_FILTER, VIEW_CONFIG_FILE, WORK_FILTER, Config
from .core.goals import GoalRate, compute_goal_rate, count_remaining_work, select_dated_goals
from .core.stats import CompletionStats, compute_completion_stats, filter_work_completions
from .core.tasks import CompletedTask, DatedGoalTask, TaskTreeNode
from .core.tree import build_task_trees, index_tasks, sort_task_trees
from .ports import (
    CompletionStatsConfig,
    CompletionStatsRepository,
    ConfigRepository,
    TaskPanelConfig,
    TaskRepository,
)

logger = logging.getLogger(__name__)


def get_task_repository(config: Config) -> TodoistAdapter:
    return TodoistAdapter(config)


def get_config_store() -> FileConfigStore:
    return FileConfigStore(VIEW_CONFIG_FILE)


def fetch_goal_rate(task_repository: TaskRepository, query: str = GOAL_FILTER) -> GoalRate:
    """Goal rate over every task matching the goal query."""
    return compute_goal_rate(task_repository.get_all(query))


def fetch_dated_goals(
    task_repository: TaskRepository, query: str = DATED_GOAL_FILTER
) -> list[DatedGoalTask]:
    """Goal tasks with a deadline, earliest first."""
    return select_dated_goals(task_repository.get_all(query))


def fetch_remaining_work(
    task_repository: TaskRepository,
    excluded_labels: list[str] | None = None,
    query: str = WORK_FILTER,
) -> int:
    """Number of open work tasks not carrying an excluded label."""
    return count_remaining_work(task_repository.get_all(query), excluded_labels)


def _to_local(tasks: list[CompletedTask]) -> list[CompletedTask]:
    """Shift completion timestamps into the local timezone (naive ones are taken as local)."""
    return [replace(t, completed_at=t.completed_at.astimezone()) for t in tasks]


def fetch_completion_stats(
    stats_repository: CompletionStatsRepository,
    excluded_labels: list[str] | None = None,
    days: int = 90,
    span: int = 7,
    today: date | None = None,
) -> CompletionStats:
    """
    Completion stats for the `days` calendar days ending today (inclusive).

    The fetch covers local midnight of the first day up to local midnight
    after today, sent as offset-aware datetimes. Completions are bucketed by
    their local calendar date.
    """
    today = today or date.today()
    since = today - timedelta(days=max(days, 1) - 1)
    fetched = stats_repository.fetch_completed_tasks(
        datetime.combine(since, time.min).astimezone(),
        datetime.combine(today + timedelta(days=1), time.min).astimezone(),
    )
    work = _to_local(filter_work_completions(fetched, excluded_labels))
    logger.debug(f"{len(work)} of {len(fetched)} completions count as work")
    return compute_completion_stats(work, since, today, span)


def fetch_task_trees(task_repository: TaskRepository, filter_query: str = "") -> list[TaskTreeNode]:
    """
    Task trees for the tasks matching `filter_query`.

    Parents are resolved against the full task collection, so ancestors
    outside the filter still appear in the chain.
    """
    query = filter_query.strip()
    all_tasks = task_repository.get_all("")
    display = task_repository.get_all(query) if query else all_tasks

    index = index_tasks(all_tasks)
    display_ids = {t.id for t in display}
    nodes = build_task_trees([t for t in all_tasks if t.id in display_ids], index)
    return sort_task_trees(nodes)


def complete_task(task_repository: TaskRepository, task_id: str) -> None:
    """Close a task. Failures are logged and re-raised."""
    try:
        task_repository.complete(task_id)
    except Exception:
        logger.exception(f"Failed to complete task {task_id}")
        raise


def load_task_panel_config(config_repository: ConfigRepository) -> TaskPanelConfig:
    return config_repository.get_task_panel_config()


def update_task_panel_config(config_repository: ConfigRepository, panel: TaskPanelConfig) -> None:
    config_repository.set_task_panel_config(panel)


def load_completion_stats_config(config_repository: ConfigRepository) -> CompletionStatsConfig:
    return config_repository.get_completion_stats_config()


def update_completion_stats_config(
    config_repository: ConfigRepository, stats_config: CompletionStatsConfig
) -> None:
    config_repository.set_completion_stats_config(stats_config)


# ============== Dashboard ==============


@dataclass
class DashboardData:
    """Every derived view, computed in one refresh."""

    generated_at: datetime
    goal_rate: GoalRate
    dated_goals: list[DatedGoalTask]
    remaining_work: int
    completion_stats: CompletionStats
    task_trees: list[TaskTreeNode]


def build_dashboard(
    config: Config,
    task_repository: TaskRepository,
    stats_repository: CompletionStatsRepository,
    config_repository: ConfigRepository,
    today: date | None = None,
) -> DashboardData:
    """Fetch and compute every view. The first repository failure propagates."""
    panel = config_repository.get_task_panel_config()
    stats_config = config_repository.get_completion_stats_config()

    return DashboardData(
        generated_at=datetime.now(),
        goal_rate=fetch_goal_rate(task_repository, config.goal_filter),
        dated_goals=fetch_dated_goals(task_repository, config.dated_goal_filter),
        remaining_work=fetch_remaining_work(
            task_repository, stats_config.excluded_labels, config.work_filter
        ),
        completion_stats=fetch_completion_stats(
            stats_repository,
            stats_config.excluded_labels,
            days=stats_config.window_days,
            span=stats_config.moving_average_days,
            today=today,
        ),
        task_trees=fetch_task_trees(task_repository, panel.filter),
    )
