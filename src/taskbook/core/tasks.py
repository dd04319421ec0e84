"""Pure task domain logic - no I/O dependencies."""

from dataclasses import dataclass, replace

from ..exceptions import ValidationError
from .values import (
    Description,
    Email,
    Priority,
    TaskCategory,
    TaskDeadline,
    TaskName,
)


@dataclass(frozen=True)
class Task:
    """
    A task in the task list.

    Tasks are compared by value across every field. Edits never mutate a task;
    they produce a replacement instance.
    """

    name: TaskName
    category: TaskCategory
    description: Description
    priority: Priority
    deadline: TaskDeadline
    email: Email | None = None
    is_done: bool = False

    def mark_done(self) -> "Task":
        return replace(self, is_done=True)

    def mark_undone(self) -> "Task":
        return replace(self, is_done=False)

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        """Create Task from plain JSON-like data."""
        try:
            category = data["category"]
            is_done = data.get("is_done", False)
            if not isinstance(is_done, bool):
                raise ValidationError(f"Task is_done must be true or false, got {is_done!r}")
            return cls(
                name=TaskName(data["name"]),
                category=TaskCategory.parse(category["type"], category.get("level", 1)),
                description=Description(data["description"]),
                priority=Priority.parse(data["priority"]),
                deadline=TaskDeadline.parse(data["deadline"]),
                email=Email(data["email"]) if data.get("email") else None,
                is_done=is_done,
            )
        except ValidationError:
            raise
        except KeyError as e:
            raise ValidationError(f"Task is missing required field {e}") from None
        except (TypeError, AttributeError, ValueError) as e:
            raise ValidationError(f"Task data is malformed: {e}") from None

    def to_dict(self) -> dict:
        return {
            "name": str(self.name),
            "category": {"level": self.category.level, "type": self.category.type.value},
            "description": str(self.description),
            "priority": self.priority.level.value,
            "deadline": str(self.deadline),
            "email": str(self.email) if self.email else None,
            "is_done": self.is_done,
        }


def status_key(task: Task) -> int:
    """Sort key placing incomplete tasks before completed ones."""
    return 1 if task.is_done else 0


def sort_by_status(tasks: list[Task]) -> list[Task]:
    """
    Sort tasks so incomplete tasks come first.

    Pure function - no I/O. Stable, so tasks with the same status keep
    their relative order.
    """
    return sorted(tasks, key=status_key)
