"""Task domain records - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date, datetime

from .labels import extract_labels


def _freeze_labels(record) -> None:
    """Store labels as a tuple so frozen records stay immutable."""
    object.__setattr__(record, "labels", tuple(record.labels))


@dataclass(frozen=True)
class Task:
    """An open task as fetched from Todoist."""

    id: str
    summary: str
    labels: tuple[str, ...] = ()
    deadline: date | None = None
    priority: int = 1
    parent_id: str | None = None
    order: int = 0

    def __post_init__(self):
        _freeze_labels(self)

    @classmethod
    def from_api(cls, data: dict) -> "Task":
        """Create Task from a Todoist API task payload."""
        deadline = None
        due = data.get("due")
        if due and due.get("date"):
            deadline = date.fromisoformat(due["date"][:10])
        parent_id = data.get("parent_id")
        return cls(
            id=str(data["id"]),
            summary=data.get("content", ""),
            labels=tuple(data.get("labels") or ()),
            deadline=deadline,
            priority=data.get("priority", 1),
            parent_id=str(parent_id) if parent_id else None,
            order=data.get("child_order", data.get("order", 0)),
        )


@dataclass(frozen=True)
class CompletedTask:
    """A historical completion event."""

    id: str
    content: str
    completed_at: datetime
    labels: tuple[str, ...] = ()

    def __post_init__(self):
        _freeze_labels(self)

    @classmethod
    def from_api(cls, data: dict) -> "CompletedTask":
        """
        Create CompletedTask from a completed-task API item.

        The completion endpoint often omits labels, so @labels written in the
        content are merged in.
        """
        completed_at = datetime.fromisoformat(data["completed_at"].replace("Z", "+00:00"))
        merged = dict.fromkeys([*(data.get("labels") or []), *extract_labels(data.get("content", ""))])
        return cls(
            id=str(data["id"]),
            content=data.get("content", ""),
            completed_at=completed_at,
            labels=tuple(merged),
        )


@dataclass(frozen=True)
class DatedGoalTask:
    """A goal task that is guaranteed to carry a deadline."""

    id: str
    summary: str
    deadline: date
    order: int


@dataclass(frozen=True)
class ParentTask:
    """One link of an ancestor chain; `parent` is None at the root."""

    id: str
    summary: str
    order: int
    parent: "ParentTask | None" = None


@dataclass(frozen=True)
class TaskTreeNode:
    """A Task whose parent reference has been resolved into a chain."""

    id: str
    summary: str
    labels: tuple[str, ...]
    deadline: date | None
    priority: int
    order: int
    parent: ParentTask | None = None

    def __post_init__(self):
        _freeze_labels(self)
