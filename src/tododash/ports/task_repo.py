"""Task repository interface."""

from typing import Protocol

from tododash.core.tasks import Task


class TaskRepository(Protocol):
    """Interface for reading and completing tasks on any backend."""

    def get_all(self, filter_query: str) -> list[Task]:
        """Fetch every task matching a filter query ("" for all). Raises RequestError."""
        ...

    def complete(self, task_id: str) -> None:
        """Mark a task complete. Raises RequestError."""
        ...
