"""Functional core - pure business logic with no I/O."""

from .labels import normalize_label, normalize_labels, labels_match, extract_labels
from .tasks import Task, CompletedTask, DatedGoalTask, ParentTask, TaskTreeNode
from .goals import GoalRate, compute_goal_rate, select_dated_goals, count_remaining_work
from .stats import (
    CompletionStats,
    CompletionSummary,
    DailyCompletionCount,
    compute_completion_stats,
    filter_work_completions,
)
from .tree import (
    ancestors,
    build_task_trees,
    has_dependency_label_in_ancestors,
    index_tasks,
    resolve_ancestor_chain,
    sort_task_trees,
)
from .deadline import DeadlineDisplay, Urgency, classify_deadline

__all__ = [
    # Labels
    "normalize_label",
    "normalize_labels",
    "labels_match",
    "extract_labels",
    # Tasks
    "Task",
    "CompletedTask",
    "DatedGoalTask",
    "ParentTask",
    "TaskTreeNode",
    # Goals
    "GoalRate",
    "compute_goal_rate",
    "select_dated_goals",
    "count_remaining_work",
    # Stats
    "CompletionStats",
    "CompletionSummary",
    "DailyCompletionCount",
    "compute_completion_stats",
    "filter_work_completions",
    # Tree
    "ancestors",
    "build_task_trees",
    "has_dependency_label_in_ancestors",
    "index_tasks",
    "resolve_ancestor_chain",
    "sort_task_trees",
    # Deadline
    "DeadlineDisplay",
    "Urgency",
    "classify_deadline",
]
