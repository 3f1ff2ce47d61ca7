"""Goal views: goal rate, dated goals and remaining work - no I/O."""

from dataclasses import dataclass

from .labels import NON_MILESTONE_LABEL, build_exclusion_set, has_label, normalize_label
from .tasks import DatedGoalTask, Task


@dataclass(frozen=True)
class GoalRate:
    """Share of goal tasks that are ongoing (non-milestone) goals."""

    goal_count: int
    non_milestone_count: int
    percentage: int


def compute_goal_rate(tasks: list[Task]) -> GoalRate:
    """
    Compute the goal rate over tasks already filtered to goals.

    The goal label is not re-checked: the fetch query selects goals.
    Pure function - no I/O.
    """
    goal_count = len(tasks)
    non_milestone_count = sum(1 for t in tasks if has_label(t.labels, NON_MILESTONE_LABEL))

    percentage = 0
    if goal_count > 0:
        # Integer round-half-up of non_milestone_count / goal_count * 100
        percentage = (200 * non_milestone_count + goal_count) // (2 * goal_count)

    return GoalRate(
        goal_count=goal_count,
        non_milestone_count=non_milestone_count,
        percentage=percentage,
    )


def select_dated_goals(tasks: list[Task]) -> list[DatedGoalTask]:
    """
    Keep tasks with a deadline, sorted by deadline then manual order.

    Pure function - no I/O. `sorted` is stable, so full ties keep input order.
    """
    dated = [
        DatedGoalTask(id=t.id, summary=t.summary, deadline=t.deadline, order=t.order)
        for t in tasks
        if t.deadline is not None
    ]
    return sorted(dated, key=lambda g: (g.deadline, g.order))


def count_remaining_work(tasks: list[Task], excluded_labels: list[str] | None = None) -> int:
    """
    Count tasks carrying none of the excluded labels.

    Recurring daily tasks are always excluded, whatever the caller passes.
    """
    excluded = build_exclusion_set(excluded_labels or [])
    return sum(
        1
        for t in tasks
        if not any(normalize_label(label) in excluded for label in t.labels)
    )
