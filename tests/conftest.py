"""Shared fixtures for taskbook tests."""

from datetime import date

import pytest

from taskbook.core.tasks import Task
from taskbook.core.values import (
    Description,
    Email,
    Priority,
    PriorityLevel,
    TaskCategory,
    TaskCategoryType,
    TaskDeadline,
    TaskName,
)


def make_task(
    name: str = "Write API",
    level: int = 2,
    category: TaskCategoryType = TaskCategoryType.BACKEND,
    description: str = "Build the REST endpoints",
    priority: PriorityLevel = PriorityLevel.HIGH,
    deadline: date = date(2022, 12, 12),
    email: str | None = None,
    is_done: bool = False,
) -> Task:
    return Task(
        name=TaskName(name),
        category=TaskCategory(level, category),
        description=Description(description),
        priority=Priority(priority),
        deadline=TaskDeadline(deadline),
        email=Email(email) if email else None,
        is_done=is_done,
    )


@pytest.fixture
def backend_task():
    return make_task()


@pytest.fixture
def sample_tasks():
    """Sample tasks covering various categories, deadlines and statuses."""
    return [
        make_task(),
        make_task(
            name="Design login page",
            level=1,
            category=TaskCategoryType.UIUX,
            description="Mockups for the login flow",
            priority=PriorityLevel.MEDIUM,
            deadline=date(2022, 11, 1),
            email="alice@example.com",
        ),
        make_task(
            name="Migrate schema",
            level=3,
            category=TaskCategoryType.DATABASE,
            description="Add the tasks table",
            priority=PriorityLevel.LOW,
            deadline=date(2022, 10, 15),
            is_done=True,
        ),
        make_task(
            name="Cache responses",
            description="Add caching to the API",
            priority=PriorityLevel.MEDIUM,
            deadline=date(2023, 1, 20),
        ),
        make_task(
            name="Demo slides",
            level=1,
            category=TaskCategoryType.PRESENTATION,
            description="Slides for the sprint demo",
            priority=PriorityLevel.LOW,
            deadline=date(2022, 12, 1),
            is_done=True,
        ),
    ]
