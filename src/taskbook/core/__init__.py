"""Functional core - pure business logic with no I/O."""

from .values import (
    Description,
    Email,
    Priority,
    PriorityLevel,
    TaskCategory,
    TaskCategoryType,
    TaskDeadline,
    TaskName,
)
from .tasks import Task, sort_by_status, status_key
from .descriptors import EditTaskDescriptor, FilterTaskDescriptor, apply_edit
from .predicates import (
    CategoryAndDeadlinePredicate,
    CategoryPredicate,
    DeadlineBeforePredicate,
    FilterPredicate,
    TaskPredicate,
    build_filter_predicate,
    show_all_tasks,
)

__all__ = [
    # Values
    "Description",
    "Email",
    "Priority",
    "PriorityLevel",
    "TaskCategory",
    "TaskCategoryType",
    "TaskDeadline",
    "TaskName",
    # Tasks
    "Task",
    "sort_by_status",
    "status_key",
    # Descriptors
    "EditTaskDescriptor",
    "FilterTaskDescriptor",
    "apply_edit",
    # Predicates
    "CategoryAndDeadlinePredicate",
    "CategoryPredicate",
    "DeadlineBeforePredicate",
    "FilterPredicate",
    "TaskPredicate",
    "build_filter_predicate",
    "show_all_tasks",
]
