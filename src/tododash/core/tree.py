"""Ancestor chains and task trees - pure logic over a flat task collection."""

from functools import cmp_to_key

from .labels import DEPENDENCY_LABEL_PREFIX, normalize_label
from .tasks import ParentTask, Task, TaskTreeNode


def index_tasks(tasks: list[Task]) -> dict[str, Task]:
    """Lookup table keyed by task id. Later duplicates win."""
    return {t.id: t for t in tasks}


def _walk_parents(task: Task, index: dict[str, Task]) -> list[Task]:
    """
    Follow parent_id links from `task` upwards.

    Returns [immediate parent, ..., root]. Stops at a root, at an id missing
    from the index, or at an id already visited (cyclic data).
    """
    visited = {task.id}
    chain: list[Task] = []
    parent_id = task.parent_id
    while parent_id is not None and parent_id not in visited:
        parent = index.get(parent_id)
        if parent is None:
            break
        visited.add(parent_id)
        chain.append(parent)
        parent_id = parent.parent_id
    return chain


def resolve_ancestor_chain(task: Task, index: dict[str, Task]) -> ParentTask | None:
    """Resolve the nested parent chain of `task`, or None for a root task."""
    node = None
    for ancestor in reversed(_walk_parents(task, index)):
        node = ParentTask(id=ancestor.id, summary=ancestor.summary, order=ancestor.order, parent=node)
    return node


def ancestors(task: Task, index: dict[str, Task]) -> list[ParentTask]:
    """Flat breadcrumb from the root down to the immediate parent."""
    chain = []
    node = resolve_ancestor_chain(task, index)
    while node is not None:
        chain.append(node)
        node = node.parent
    chain.reverse()
    return chain


def build_task_tree_node(task: Task, index: dict[str, Task]) -> TaskTreeNode:
    return TaskTreeNode(
        id=task.id,
        summary=task.summary,
        labels=task.labels,
        deadline=task.deadline,
        priority=task.priority,
        order=task.order,
        parent=resolve_ancestor_chain(task, index),
    )


def build_task_trees(tasks: list[Task], index: dict[str, Task] | None = None) -> list[TaskTreeNode]:
    """
    Resolve every task's parent chain.

    `index` defaults to the tasks themselves; pass the full unfiltered
    collection's index when `tasks` is only the subset to display.
    """
    if index is None:
        index = index_tasks(tasks)
    return [build_task_tree_node(t, index) for t in tasks]


def _path(node: TaskTreeNode) -> list[tuple[str, int]]:
    """(id, order) pairs from the root down to the node itself."""
    path = []
    current = node.parent
    while current is not None:
        path.append((current.id, current.order))
        current = current.parent
    path.reverse()
    path.append((node.id, node.order))
    return path


def _compare_hierarchically(a: TaskTreeNode, b: TaskTreeNode) -> int:
    path_a, path_b = _path(a), _path(b)
    for (id_a, order_a), (id_b, order_b) in zip(path_a, path_b):
        if id_a != id_b:
            return order_a - order_b
    if len(path_a) != len(path_b):
        return len(path_a) - len(path_b)
    return a.order - b.order


def sort_task_trees(nodes: list[TaskTreeNode]) -> list[TaskTreeNode]:
    """
    Sort by priority (descending), then by position in the task hierarchy.

    Within a priority, tasks sharing ancestors are ordered by the first
    ancestor where their paths diverge; a parent precedes its children.
    """

    def compare(a: TaskTreeNode, b: TaskTreeNode) -> int:
        if a.priority != b.priority:
            return b.priority - a.priority
        return _compare_hierarchically(a, b)

    return sorted(nodes, key=cmp_to_key(compare))


def has_dependency_label_in_ancestors(task: Task, index: dict[str, Task]) -> bool:
    """True if the task or any resolvable ancestor carries a dep-* label."""
    for t in [task, *_walk_parents(task, index)]:
        if any(normalize_label(label).startswith(DEPENDENCY_LABEL_PREFIX) for label in t.labels):
            return True
    return False
