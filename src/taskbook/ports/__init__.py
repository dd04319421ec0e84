"""Ports - interfaces/protocols for external dependencies."""

from .task_model import TaskModel
from .task_source import TaskSource

__all__ = [
    "TaskModel",
    "TaskSource",
]
