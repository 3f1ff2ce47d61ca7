"""Completion history repository interface."""

from datetime import datetime
from typing import Protocol

from tododash.core.tasks import CompletedTask


class CompletionStatsRepository(Protocol):
    """Interface for fetching completed-task events."""

    def fetch_completed_tasks(self, since: datetime, until: datetime) -> list[CompletedTask]:
        """Fetch completions in [since, until). Raises RepositoryError."""
        ...
