"""Label normalization - pure string helpers shared by every view."""

import re

# Standing label for recurring daily chores; never counted as remaining work.
DAILY_TASK_LABEL = "毎日のタスク"
GOAL_LABEL = "goal"
NON_MILESTONE_LABEL = "non-milestone"
WORK_LABEL = "task"
DEPENDENCY_LABEL_PREFIX = "dep-"

_CONTENT_LABEL_RE = re.compile(r"@([^\s@]+)")


def normalize_label(label: str) -> str:
    """Strip surrounding whitespace and any leading '@' characters."""
    return label.strip().lstrip("@").strip()


def labels_match(a: str, b: str) -> bool:
    """Two labels are equal when their normalized forms are equal."""
    return normalize_label(a) == normalize_label(b)


def normalize_labels(labels: list[str]) -> list[str]:
    """Normalize, drop empties and dedupe, keeping first-seen order."""
    seen: dict[str, None] = {}
    for label in labels:
        key = normalize_label(label)
        if key:
            seen.setdefault(key, None)
    return list(seen)


def has_label(labels: list[str], wanted: str) -> bool:
    wanted = normalize_label(wanted)
    return any(normalize_label(label) == wanted for label in labels)


def build_exclusion_set(excluded_labels: list[str]) -> set[str]:
    """Standing daily-task label plus the caller's labels, normalized."""
    return {DAILY_TASK_LABEL, *normalize_labels(excluded_labels)}


def extract_labels(content: str) -> list[str]:
    """
    Extract @-prefixed labels from task content.

    "Write report @task @goal" -> ["task", "goal"]
    """
    return _CONTENT_LABEL_RE.findall(content)
