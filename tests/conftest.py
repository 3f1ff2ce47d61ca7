"""Shared test helpers and in-memory port implementations."""

from datetime import date, datetime, timedelta

import pytest

from tododash.core.tasks import CompletedTask, Task
from tododash.ports.config_repo import CompletionStatsConfig, TaskPanelConfig


def make_task(id: str, **kwargs) -> Task:
    kwargs.setdefault("summary", f"Task {id}")
    return Task(id=id, **kwargs)


@pytest.fixture
def today():
    return date(2024, 1, 10)


class FakeTaskRepository:
    """In-memory TaskRepository keyed by filter query."""

    def __init__(self, by_query: dict, error: Exception | None = None):
        self.by_query = by_query
        self.error = error
        self.queries: list[str] = []
        self.completed: list[str] = []

    def get_all(self, filter_query: str):
        self.queries.append(filter_query)
        if self.error:
            raise self.error
        return self.by_query.get(filter_query, [])

    def complete(self, task_id: str) -> None:
        if self.error:
            raise self.error
        self.completed.append(task_id)


class FakeStatsRepository:
    def __init__(self, tasks, error: Exception | None = None):
        self.tasks = tasks
        self.error = error
        self.calls: list[tuple[datetime, datetime]] = []

    def fetch_completed_tasks(self, since, until):
        self.calls.append((since, until))
        if self.error:
            raise self.error
        return self.tasks


class InMemoryConfigRepository:
    def __init__(self):
        self.panel = TaskPanelConfig()
        self.stats = CompletionStatsConfig()

    def get_task_panel_config(self):
        return self.panel

    def set_task_panel_config(self, config):
        self.panel = config

    def get_completion_stats_config(self):
        return self.stats

    def set_completion_stats_config(self, config):
        self.stats = config


def completed(day: date, labels=("task",), content="work") -> CompletedTask:
    return CompletedTask(
        id=f"{day}-{content}-{len(labels)}",
        content=content,
        completed_at=datetime.combine(day, datetime.min.time()) + timedelta(hours=9),
        labels=labels,
    )
