"""Tests for TaskService with a mocked repository."""

from __future__ import annotations

from datetime import date
from unittest.mock import MagicMock

import pytest

from yawmak.errors import InvalidInputError
from yawmak.models import Task, TaskCreate, TaskFilters, TaskUpdate
from yawmak.services.task_service import TaskService


def _task(**kwargs) -> Task:
    data = {"id": 1, "name": "Write report"}
    data.update(kwargs)
    return Task(**data)


@pytest.fixture
def repo():
    return MagicMock()


@pytest.fixture
def service(repo):
    return TaskService(repo)


# ---------------------------------------------------------------------------
# list / get
# ---------------------------------------------------------------------------


class TestListTasks:
    def test_passes_done_filter(self, service, repo):
        repo.list_all.return_value = [_task()]
        assert service.list_tasks(done=True) == [_task()]
        repo.list_all.assert_called_once_with(TaskFilters(done=True))

    def test_default_lists_everything(self, service, repo):
        service.list_tasks()
        repo.list_all.assert_called_once_with(TaskFilters(done=None))


def test_get_task(service, repo):
    repo.get.return_value = _task()
    assert service.get_task(1).name == "Write report"
    repo.get.assert_called_once_with(1)


# ---------------------------------------------------------------------------
# add
# ---------------------------------------------------------------------------


class TestAddTask:
    def test_builds_task_create(self, service, repo):
        repo.add.return_value = _task()

        service.add_task(
            "Write report",
            category="Work",
            tags=["b,a", "c"],
            due_date=date(2026, 11, 1),
            priority=3,
        )

        repo.add.assert_called_once_with(
            TaskCreate(
                name="Write report",
                category="Work",
                tags=["a", "b", "c"],
                due_date=date(2026, 11, 1),
                priority=3,
            )
        )

    def test_blank_name_is_invalid_input(self, service, repo):
        with pytest.raises(InvalidInputError, match="must not be empty"):
            service.add_task("   ")
        repo.add.assert_not_called()


# ---------------------------------------------------------------------------
# update
# ---------------------------------------------------------------------------


class TestUpdateTask:
    def test_only_given_fields(self, service, repo):
        service.update_task(1, priority=4)
        repo.update.assert_called_once_with(1, TaskUpdate(priority=4))

    def test_undone(self, service, repo):
        service.update_task(1, undone=True)
        repo.update.assert_called_once_with(1, TaskUpdate(undone=True))

    def test_empty_update_just_loads(self, service, repo):
        repo.get.return_value = _task()
        assert service.update_task(1) == _task()
        repo.update.assert_not_called()

    def test_empty_tags_are_no_update(self, service, repo):
        service.update_task(1, tags=[" , "])
        repo.update.assert_not_called()

    def test_blank_name_is_invalid_input(self, service, repo):
        with pytest.raises(InvalidInputError):
            service.update_task(1, name="")


def test_complete_and_reopen(service, repo):
    service.complete_task(5)
    service.reopen_task(6)
    repo.complete.assert_called_once_with(5)
    repo.reopen.assert_called_once_with(6)


# ---------------------------------------------------------------------------
# search
# ---------------------------------------------------------------------------


def test_search_filters_all_tasks(service, repo):
    repo.list_all.return_value = [
        _task(id=1, name="Write report"),
        _task(id=2, name="Buy milk", tags=["report-card"]),
        _task(id=3, name="Call mom"),
    ]

    results = service.search_tasks("report")

    assert [t.id for t in results] == [1, 2]
    repo.list_all.assert_called_once_with(TaskFilters())
