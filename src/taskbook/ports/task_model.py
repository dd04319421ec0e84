"""Task list model interface."""

from typing import Callable, Protocol

from taskbook.core.predicates import TaskPredicate
from taskbook.core.tasks import Task


class TaskModel(Protocol):
    """Interface for the task list that commands read and write."""

    def has_task(self, task: Task) -> bool:
        """Whether an equal task is already in the list."""
        ...

    def replace_task(self, old: Task, new: Task) -> None:
        """Replace ``old`` with ``new`` in place."""
        ...

    def update_filtered_task_list(self, predicate: TaskPredicate) -> int:
        """Swap the active predicate and return the number of visible tasks."""
        ...

    def get_filtered_task_list(self) -> list[Task]:
        """Tasks currently matching the active predicate, in list order."""
        ...

    def sort_tasks(self, key: Callable[[Task], int]) -> None:
        """Reorder the full task list by ``key`` (stable)."""
        ...
