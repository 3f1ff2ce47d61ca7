"""Deadline urgency classification - pure date arithmetic."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class Urgency(Enum):
    """Urgency bucket for a deadline; value is the display colour."""

    OVERDUE = "red"
    DUE_TODAY = "yellow"
    IMMINENT = "blue"
    SOON = "teal"
    DISTANT = "gray"

    @property
    def color(self) -> str:
        return self.value


@dataclass(frozen=True)
class DeadlineDisplay:
    label: str
    urgency: Urgency
    days: int


def classify_deadline(deadline: date, today: date | None = None) -> DeadlineDisplay:
    """
    Map a deadline's distance from today to a label and urgency.

    <0 overdue, 0 today, 1-3 imminent, 4-7 soon, >7 distant.
    """
    today = today or date.today()
    diff = (deadline - today).days

    if diff < 0:
        return DeadlineDisplay(f"{abs(diff)} days ago", Urgency.OVERDUE, diff)
    if diff == 0:
        return DeadlineDisplay("today", Urgency.DUE_TODAY, diff)
    if diff <= 3:
        urgency = Urgency.IMMINENT
    elif diff <= 7:
        urgency = Urgency.SOON
    else:
        urgency = Urgency.DISTANT
    return DeadlineDisplay(f"in {diff} days", urgency, diff)
