"""In-memory task list adapter."""

import logging
from typing import Callable, Iterable

from ..core.predicates import TaskPredicate, show_all_tasks
from ..core.tasks import Task
from ..exceptions import TaskNotFoundError

logger = logging.getLogger(__name__)


class InMemoryTaskModel:
    """
    Task list held in memory with a filtered view.

    Implements TaskModel protocol. The filtered view is re-derived from the
    full list, in insertion order, whenever the list or the predicate changes.
    """

    def __init__(self, tasks: Iterable[Task] = ()):
        self._tasks: list[Task] = list(tasks)
        self._predicate: TaskPredicate = show_all_tasks
        self._filtered: list[Task] = list(self._tasks)

    @property
    def tasks(self) -> tuple[Task, ...]:
        """The full task list."""
        return tuple(self._tasks)

    def _refresh(self) -> None:
        self._filtered = [t for t in self._tasks if self._predicate(t)]

    def has_task(self, task: Task) -> bool:
        return task in self._tasks

    def add_task(self, task: Task) -> None:
        self._tasks.append(task)
        self._refresh()

    def delete_task(self, task: Task) -> None:
        try:
            self._tasks.remove(task)
        except ValueError:
            raise TaskNotFoundError(f"Task '{task.name}' is not in the task list") from None
        self._refresh()

    def replace_task(self, old: Task, new: Task) -> None:
        try:
            index = self._tasks.index(old)
        except ValueError:
            raise TaskNotFoundError(f"Task '{old.name}' is not in the task list") from None
        self._tasks[index] = new
        self._refresh()

    def update_filtered_task_list(self, predicate: TaskPredicate) -> int:
        self._predicate = predicate
        self._refresh()
        logger.debug(f"Filtered view now shows {len(self._filtered)} of {len(self._tasks)} tasks")
        return len(self._filtered)

    def get_filtered_task_list(self) -> list[Task]:
        return list(self._filtered)

    def sort_tasks(self, key: Callable[[Task], int]) -> None:
        self._tasks.sort(key=key)
        self._refresh()
