"""Commands that apply edits and filters to a task model.

Each command is built from pre-validated inputs, does one logical operation
in ``execute``, and returns a CommandResult for the caller to render.
"""

import logging
from dataclasses import dataclass, field

from .core.descriptors import EditTaskDescriptor, FilterTaskDescriptor, apply_edit
from .core.predicates import FilterPredicate, build_filter_predicate, show_all_tasks
from .core.tasks import Task, status_key
from .exceptions import CommandError
from .ports.task_model import TaskModel

logger = logging.getLogger(__name__)

MESSAGE_TASKS_LISTED_OVERVIEW = "{count} tasks listed!"
MESSAGE_LIST_ALL_SUCCESS = "Listed all tasks"
MESSAGE_SORT_SUCCESS = "Sorted tasks by status"
MESSAGE_EDIT_TASK_SUCCESS = "Edited Task: {task}"
MESSAGE_NOT_EDITED = "At least one field to edit must be provided."
MESSAGE_NOT_FILTERED = "At least one of category or date must be provided to filter."
MESSAGE_NOT_CHANGED = "The edited task is identical to the original."
MESSAGE_DUPLICATE_TASK = "This task already exists in the task list."
MESSAGE_INVALID_TASK_INDEX = "The task index provided is invalid"


@dataclass(frozen=True)
class CommandResult:
    """Outcome of executing a command."""

    feedback: str
    tasks: tuple[Task, ...] = field(default_factory=tuple)


def format_task(task: Task) -> str:
    """One-line summary of a task for feedback messages."""
    parts = [
        f"{task.name}",
        f"Category: {task.category}",
        f"Description: {task.description}",
        f"Priority: {task.priority}",
        f"Deadline: {task.deadline}",
    ]
    if task.email:
        parts.append(f"Email: {task.email}")
    parts.append(f"Done: {'yes' if task.is_done else 'no'}")
    return "; ".join(parts)


class EditTaskCommand:
    """Edits the task at a 1-based index of the filtered task list."""

    def __init__(self, index: int, descriptor: EditTaskDescriptor):
        if not descriptor.is_any_field_edited():
            raise CommandError(MESSAGE_NOT_EDITED)
        self.index = index
        self.descriptor = descriptor.copy()

    def execute(self, model: TaskModel) -> CommandResult:
        visible = model.get_filtered_task_list()
        if not 1 <= self.index <= len(visible):
            raise CommandError(MESSAGE_INVALID_TASK_INDEX)

        original = visible[self.index - 1]
        edited = apply_edit(original, self.descriptor)

        if edited == original:
            raise CommandError(MESSAGE_NOT_CHANGED)
        if model.has_task(edited):
            raise CommandError(MESSAGE_DUPLICATE_TASK)

        model.replace_task(original, edited)
        model.update_filtered_task_list(show_all_tasks)
        logger.info(f"Edited task {self.index}: '{original.name}' -> '{edited.name}'")
        return CommandResult(MESSAGE_EDIT_TASK_SUCCESS.format(task=format_task(edited)), (edited,))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EditTaskCommand):
            return NotImplemented
        return self.index == other.index and self.descriptor == other.descriptor

    def __repr__(self) -> str:
        return f"EditTaskCommand(index={self.index!r}, descriptor={self.descriptor!r})"


class FilterTaskCommand:
    """
    Filters the task list by category and/or deadline.

    The predicate variant is chosen once, here, from whichever filter inputs
    are present. Two commands are equal when their descriptors are equal.
    """

    def __init__(self, descriptor: FilterTaskDescriptor):
        if not descriptor.is_any_field_edited():
            raise CommandError(MESSAGE_NOT_FILTERED)
        self.descriptor = descriptor.copy()
        self.predicate: FilterPredicate = build_filter_predicate(self.descriptor)
        logger.debug(f"Selected {type(self.predicate).__name__} for {self.descriptor}")

    def execute(self, model: TaskModel) -> CommandResult:
        count = model.update_filtered_task_list(self.predicate)
        logger.info(f"Filter matched {count} tasks")
        return CommandResult(
            MESSAGE_TASKS_LISTED_OVERVIEW.format(count=count),
            tuple(model.get_filtered_task_list()),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FilterTaskCommand):
            return NotImplemented
        return self.descriptor == other.descriptor

    def __repr__(self) -> str:
        return f"FilterTaskCommand(descriptor={self.descriptor!r})"


class ListTasksCommand:
    """Clears any filter so every task is visible."""

    def execute(self, model: TaskModel) -> CommandResult:
        model.update_filtered_task_list(show_all_tasks)
        return CommandResult(MESSAGE_LIST_ALL_SUCCESS, tuple(model.get_filtered_task_list()))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ListTasksCommand)


class SortTasksCommand:
    """Reorders the task list so incomplete tasks come first."""

    def execute(self, model: TaskModel) -> CommandResult:
        model.sort_tasks(status_key)
        logger.info("Sorted task list by status")
        return CommandResult(MESSAGE_SORT_SUCCESS, tuple(model.get_filtered_task_list()))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SortTasksCommand)
