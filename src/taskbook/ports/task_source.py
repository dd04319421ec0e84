"""Task source interface."""

from typing import Protocol

from taskbook.core.tasks import Task


class TaskSource(Protocol):
    """Interface for loading the initial task list from any backend."""

    def fetch_all(self) -> list[Task]:
        """Fetch all tasks."""
        ...
