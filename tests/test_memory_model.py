"""Tests for the in-memory task model."""

import pytest

from conftest import make_task
from taskbook.adapters.memory_model import InMemoryTaskModel
from taskbook.core.predicates import show_all_tasks
from taskbook.core.tasks import status_key
from taskbook.exceptions import TaskNotFoundError


@pytest.fixture
def model(sample_tasks):
    return InMemoryTaskModel(sample_tasks)


class TestInMemoryTaskModel:
    def test_starts_unfiltered(self, model, sample_tasks):
        assert model.get_filtered_task_list() == sample_tasks

    def test_does_not_alias_input(self, sample_tasks):
        model = InMemoryTaskModel(sample_tasks)
        sample_tasks.clear()
        assert len(model.tasks) == 5

    def test_update_filter_returns_count(self, model):
        count = model.update_filtered_task_list(lambda t: t.is_done)
        assert count == 2
        assert all(t.is_done for t in model.get_filtered_task_list())

    def test_filtered_list_is_a_copy(self, model):
        model.get_filtered_task_list().clear()
        assert len(model.get_filtered_task_list()) == 5

    def test_replace_task_keeps_position(self, model, sample_tasks):
        new = make_task(name="Replacement")
        model.replace_task(sample_tasks[2], new)

        assert model.tasks[2] == new
        assert not model.has_task(sample_tasks[2])

    def test_replace_refreshes_filtered_view(self, model, sample_tasks):
        model.update_filtered_task_list(lambda t: not t.is_done)
        model.replace_task(sample_tasks[0], sample_tasks[0].mark_done())

        assert len(model.get_filtered_task_list()) == 2

    def test_replace_missing_task(self, model):
        with pytest.raises(TaskNotFoundError, match="Nope"):
            model.replace_task(make_task(name="Nope"), make_task())

    def test_add_and_delete(self, model):
        extra = make_task(name="Extra")
        model.add_task(extra)
        assert model.has_task(extra)
        assert model.get_filtered_task_list()[-1] == extra

        model.delete_task(extra)
        assert not model.has_task(extra)

    def test_delete_missing_task(self, model):
        with pytest.raises(LookupError):
            model.delete_task(make_task(name="Nope"))

    def test_sort_tasks(self, model):
        model.sort_tasks(status_key)
        assert [t.is_done for t in model.tasks] == [False, False, False, True, True]

    def test_show_all_after_filter(self, model):
        model.update_filtered_task_list(lambda t: False)
        assert model.update_filtered_task_list(show_all_tasks) == 5
