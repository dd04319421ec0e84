"""Boolean tests over tasks used to derive the filtered view - no I/O dependencies."""

from dataclasses import dataclass
from typing import Callable

from ..exceptions import CommandError
from .descriptors import FilterTaskDescriptor
from .tasks import Task
from .values import TaskCategory, TaskDeadline


@dataclass(frozen=True)
class CategoryPredicate:
    """Matches tasks whose category equals the target (level and type)."""

    category: TaskCategory

    def __call__(self, task: Task) -> bool:
        return task.category == self.category


@dataclass(frozen=True)
class DeadlineBeforePredicate:
    """Matches tasks due strictly before the target date."""

    date: TaskDeadline

    def __call__(self, task: Task) -> bool:
        return task.deadline.is_before(self.date)


@dataclass(frozen=True)
class CategoryAndDeadlinePredicate:
    """Matches tasks satisfying both the category and the deadline test."""

    category: TaskCategory
    date: TaskDeadline

    def __call__(self, task: Task) -> bool:
        return (
            CategoryPredicate(self.category)(task)
            and DeadlineBeforePredicate(self.date)(task)
        )


FilterPredicate = CategoryPredicate | DeadlineBeforePredicate | CategoryAndDeadlinePredicate


def show_all_tasks(task: Task) -> bool:
    """Predicate that matches every task."""
    return True


TaskPredicate = Callable[[Task], bool]


def build_filter_predicate(descriptor: FilterTaskDescriptor) -> FilterPredicate:
    """
    Choose the one predicate variant matching the filter inputs supplied.

    | category | date | variant                      |
    |----------|------|------------------------------|
    | yes      | yes  | CategoryAndDeadlinePredicate |
    | yes      | no   | CategoryPredicate            |
    | no       | yes  | DeadlineBeforePredicate      |
    | no       | no   | CommandError                 |
    """
    match descriptor.category, descriptor.date:
        case (TaskCategory() as category, TaskDeadline() as date):
            return CategoryAndDeadlinePredicate(category, date)
        case (TaskCategory() as category, None):
            return CategoryPredicate(category)
        case (None, TaskDeadline() as date):
            return DeadlineBeforePredicate(date)
        case _:
            raise CommandError("At least one of category or date must be provided to filter.")
