"""Sparse patch objects for editing and filtering tasks - no I/O dependencies."""

from dataclasses import dataclass, fields, replace

from .tasks import Task
from .values import (
    Description,
    Email,
    Priority,
    TaskCategory,
    TaskDeadline,
    TaskName,
)


@dataclass(frozen=True)
class EditTaskDescriptor:
    """
    The fields to change on a task.

    Each slot left as None keeps the original task's value. Descriptors are
    immutable: every ``with_*`` call returns a new descriptor.
    """

    name: TaskName | None = None
    category: TaskCategory | None = None
    description: Description | None = None
    priority: Priority | None = None
    deadline: TaskDeadline | None = None
    email: Email | None = None
    is_done: bool | None = None

    @classmethod
    def from_task(cls, task: Task) -> "EditTaskDescriptor":
        """Descriptor with every slot populated from ``task``."""
        return cls(
            name=task.name,
            category=task.category,
            description=task.description,
            priority=task.priority,
            deadline=task.deadline,
            email=task.email,
            is_done=task.is_done,
        )

    def copy(self) -> "EditTaskDescriptor":
        return replace(self)

    def is_any_field_edited(self) -> bool:
        return any(getattr(self, f.name) is not None for f in fields(self))

    def with_name(self, name: TaskName) -> "EditTaskDescriptor":
        return replace(self, name=name)

    def with_category(self, category: TaskCategory) -> "EditTaskDescriptor":
        return replace(self, category=category)

    def with_description(self, description: Description) -> "EditTaskDescriptor":
        return replace(self, description=description)

    def with_priority(self, priority: Priority) -> "EditTaskDescriptor":
        return replace(self, priority=priority)

    def with_deadline(self, deadline: TaskDeadline) -> "EditTaskDescriptor":
        return replace(self, deadline=deadline)

    def with_email(self, email: Email) -> "EditTaskDescriptor":
        return replace(self, email=email)

    def with_is_done(self, is_done: bool) -> "EditTaskDescriptor":
        return replace(self, is_done=is_done)


def apply_edit(task: Task, descriptor: EditTaskDescriptor) -> Task:
    """
    Build the edited version of ``task``.

    Pure function - neither argument is modified. Fields set on the
    descriptor overwrite the task's; the rest are copied across.
    """
    changes = {
        f.name: getattr(descriptor, f.name)
        for f in fields(descriptor)
        if getattr(descriptor, f.name) is not None
    }
    return replace(task, **changes)


@dataclass(frozen=True)
class FilterTaskDescriptor:
    """The constraints to filter the task list by."""

    category: TaskCategory | None = None
    date: TaskDeadline | None = None

    def copy(self) -> "FilterTaskDescriptor":
        return replace(self)

    def is_any_field_edited(self) -> bool:
        return self.category is not None or self.date is not None

    def with_category(self, category: TaskCategory) -> "FilterTaskDescriptor":
        return replace(self, category=category)

    def with_date(self, date: TaskDeadline) -> "FilterTaskDescriptor":
        return replace(self, date=date)
