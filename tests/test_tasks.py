"""Tests for core task logic."""

from dataclasses import FrozenInstanceError

import pytest

from conftest import make_task
from taskbook.core.tasks import Task, sort_by_status
from taskbook.core.values import PriorityLevel, TaskCategoryType
from taskbook.exceptions import ValidationError


# Task class tests
class TestTask:
    def test_equality_is_structural(self):
        assert make_task() == make_task()
        assert make_task() != make_task(name="Other")
        assert make_task() != make_task(is_done=True)

    def test_hashable(self):
        assert len({make_task(), make_task()}) == 1

    def test_is_immutable(self, backend_task):
        with pytest.raises(FrozenInstanceError):
            backend_task.is_done = True

    def test_email_optional(self, backend_task):
        assert backend_task.email is None

    def test_mark_done_returns_new_task(self, backend_task):
        done = backend_task.mark_done()
        assert done.is_done is True
        assert backend_task.is_done is False
        assert done.mark_undone() == backend_task


class TestFromDict:
    def test_full_record(self):
        task = Task.from_dict(
            {
                "name": "Write API",
                "category": {"level": 2, "type": "backend"},
                "description": "Build the REST endpoints",
                "priority": "high",
                "deadline": "2022-12-12",
                "email": "alice@example.com",
                "is_done": True,
            }
        )

        assert task == make_task(email="alice@example.com", is_done=True)

    def test_defaults(self):
        task = Task.from_dict(
            {
                "name": "Slides",
                "category": {"type": "presentation"},
                "description": "Demo slides",
                "priority": "low",
                "deadline": "2022-12-01",
            }
        )

        assert task.category.level == 1
        assert task.category.type is TaskCategoryType.PRESENTATION
        assert task.priority.level is PriorityLevel.LOW
        assert task.email is None
        assert task.is_done is False

    def test_missing_field(self):
        with pytest.raises(ValidationError, match="missing required field 'deadline'"):
            Task.from_dict(
                {
                    "name": "Slides",
                    "category": {"type": "presentation"},
                    "description": "Demo slides",
                    "priority": "low",
                }
            )

    def test_malformed_value_propagates(self):
        with pytest.raises(ValidationError, match="YYYY-MM-DD"):
            Task.from_dict(
                {
                    "name": "Slides",
                    "category": {"type": "presentation"},
                    "description": "Demo slides",
                    "priority": "low",
                    "deadline": "soon",
                }
            )

    def test_malformed_shape(self):
        with pytest.raises(ValidationError, match="malformed"):
            Task.from_dict(
                {
                    "name": "Slides",
                    "category": "presentation",
                    "description": "Demo slides",
                    "priority": "low",
                    "deadline": "2022-12-01",
                }
            )

    @pytest.mark.parametrize("is_done", ["false", "true", 0, 1, None])
    def test_is_done_must_be_boolean(self, is_done):
        data = make_task().to_dict()
        data["is_done"] = is_done

        with pytest.raises(ValidationError, match="is_done must be true or false"):
            Task.from_dict(data)

    @pytest.mark.parametrize("level", [True, 2.9, "2"])
    def test_category_level_must_be_integer(self, level):
        data = make_task().to_dict()
        data["category"]["level"] = level

        with pytest.raises(ValidationError, match="Category level must be an integer"):
            Task.from_dict(data)

    def test_to_dict_matches_from_dict_shape(self):
        task = make_task(email="bob@example.com")
        data = task.to_dict()

        assert data["category"] == {"level": 2, "type": "backend"}
        assert data["priority"] == "high"
        assert data["deadline"] == "2022-12-12"
        assert data["email"] == "bob@example.com"
        assert Task.from_dict(data) == task


class TestSortByStatus:
    def test_incomplete_first(self, sample_tasks):
        sorted_tasks = sort_by_status(sample_tasks)
        assert [t.is_done for t in sorted_tasks] == [False, False, False, True, True]

    def test_stable_within_status(self, sample_tasks):
        sorted_tasks = sort_by_status(sample_tasks)
        assert [str(t.name) for t in sorted_tasks] == [
            "Write API",
            "Design login page",
            "Cache responses",
            "Migrate schema",
            "Demo slides",
        ]

    def test_does_not_mutate_input(self, sample_tasks):
        original = list(sample_tasks)
        sort_by_status(sample_tasks)
        assert sample_tasks == original

    def test_empty(self):
        assert sort_by_status([]) == []
