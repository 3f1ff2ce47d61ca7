"""Completion statistics - daily buckets and moving average, no I/O."""

import re
from collections import Counter
from dataclasses import dataclass, field
from datetime import date, timedelta

from .labels import WORK_LABEL, build_exclusion_set, has_label, normalize_label
from .tasks import CompletedTask

MILESTONE_SUFFIX_RE = re.compile(r"のマイルストーンを置く\s*$")


@dataclass(frozen=True)
class DailyCompletionCount:
    """Completions on one calendar day plus the trailing average ending there."""

    date: date
    count: int
    moving_average: float


@dataclass(frozen=True)
class CompletionSummary:
    total: int = 0
    latest_count: int = 0
    recent_total: int = 0
    recent_average: float = 0.0


@dataclass(frozen=True)
class CompletionStats:
    daily: list[DailyCompletionCount] = field(default_factory=list)
    summary: CompletionSummary = field(default_factory=CompletionSummary)


def is_milestone_content(content: str) -> bool:
    return MILESTONE_SUFFIX_RE.search(content) is not None


def is_work_completion(task: CompletedTask) -> bool:
    """A completion counts as work if labelled @task or it placed a milestone."""
    return has_label(task.labels, WORK_LABEL) or is_milestone_content(task.content)


def filter_work_completions(
    tasks: list[CompletedTask],
    excluded_labels: list[str] | None = None,
) -> list[CompletedTask]:
    """
    Keep work completions that carry no excluded label.

    Pure function - no I/O. The daily-task label is always excluded.
    """
    excluded = build_exclusion_set(excluded_labels or [])
    return [
        t
        for t in tasks
        if is_work_completion(t)
        and not any(normalize_label(label) in excluded for label in t.labels)
    ]


def date_range(since: date, until: date) -> list[date]:
    """Every calendar day in [since, until]; empty when until < since."""
    days = (until - since).days + 1
    return [since + timedelta(days=i) for i in range(max(days, 0))]


def compute_completion_stats(
    tasks: list[CompletedTask],
    since: date,
    until: date,
    span: int = 7,
) -> CompletionStats:
    """
    Bucket completions by day over [since, until] and compute a moving average.

    Every day in the window gets a bucket, zero days included. The moving
    average for a day is the mean over the trailing `span` days ending on it,
    clipped at `since`: early days average over the days available.
    Completion timestamps are bucketed by their own calendar date; no
    timezone conversion happens here.

    Pure function - no I/O.
    """
    if span < 1:
        raise ValueError(f"Moving-average span must be at least 1, got {span}")

    days = date_range(since, until)
    counts = Counter(
        t.completed_at.date() for t in tasks if since <= t.completed_at.date() <= until
    )

    ordered = [counts.get(d, 0) for d in days]
    daily = []
    running = 0
    for i, day in enumerate(days):
        running += ordered[i]
        if i >= span:
            running -= ordered[i - span]
        window = min(i + 1, span)
        daily.append(DailyCompletionCount(date=day, count=ordered[i], moving_average=running / window))

    recent = ordered[-span:]
    summary = CompletionSummary(
        total=sum(ordered),
        latest_count=ordered[-1] if ordered else 0,
        recent_total=sum(recent),
        recent_average=sum(recent) / len(recent) if recent else 0.0,
    )
    return CompletionStats(daily=daily, summary=summary)
