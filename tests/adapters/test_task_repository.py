"""Unit tests for DuckDBTaskRepository.

Uses an in-memory DuckDB database so tests run without touching the filesystem.
"""

from __future__ import annotations

from datetime import date

import pytest

from yawmak.adapters.duckdb.task_repository import DuckDBTaskRepository
from yawmak.errors import NotFoundError
from yawmak.models import TaskCreate, TaskFilters, TaskUpdate


def _add(repo, name="Write report", **kwargs):
    return repo.add(TaskCreate(name=name, **kwargs))


# ---------------------------------------------------------------------------
# connection property
# ---------------------------------------------------------------------------


class TestConnectionProperty:
    def test_returns_injected_connection(self, task_repo, conn):
        assert task_repo.connection is conn

    def test_lazy_init_opens_db_path(self, db_path):
        repo = DuckDBTaskRepository(db_path)
        assert repo.list_all(TaskFilters()) == []

    def test_name_repositories_share_connection(self, task_repo, conn):
        assert task_repo.categories.connection is conn
        assert task_repo.tags.connection is conn


# ---------------------------------------------------------------------------
# add / get
# ---------------------------------------------------------------------------


class TestAdd:
    def test_round_trip(self, task_repo):
        created = _add(
            task_repo,
            category="Work",
            tags=["urgent", "q4"],
            due_date=date(2026, 11, 1),
            priority=2,
        )

        listed = task_repo.list_all(TaskFilters())
        assert len(listed) == 1
        task = listed[0]
        assert task == created
        assert task.name == "Write report"
        assert task.category == "Work"
        assert task.tags == ["q4", "urgent"]
        assert task.due_date == date(2026, 11, 1)
        assert task.priority == 2
        assert task.done is False
        assert task.completion_date is None

    def test_ids_increase(self, task_repo):
        first = _add(task_repo, "one")
        second = _add(task_repo, "two")
        assert second.id == first.id + 1

    def test_creates_missing_category_and_tags(self, task_repo):
        _add(task_repo, category="Home", tags=["a,b"])
        assert task_repo.categories.list_all() == ["Home"]
        assert task_repo.tags.list_all() == ["a", "b"]

    def test_reuses_existing_category(self, task_repo):
        _add(task_repo, "one", category="Home")
        _add(task_repo, "two", category="Home")
        assert task_repo.categories.list_all() == ["Home"]

    def test_blank_category_is_not_attached(self, task_repo):
        task = _add(task_repo, category="  ")
        assert task.category is None
        assert task_repo.categories.list_all() == []

    def test_text_is_stored_verbatim(self, task_repo):
        name = "Robert'); DROP TABLE todos;--"
        task = _add(task_repo, name)
        assert task_repo.get(task.id).name == name

    def test_get_missing_raises(self, task_repo):
        with pytest.raises(NotFoundError):
            task_repo.get(42)


# ---------------------------------------------------------------------------
# list_all
# ---------------------------------------------------------------------------


class TestListAll:
    def test_filters_by_done(self, task_repo):
        open_task = _add(task_repo, "open")
        done_task = _add(task_repo, "done")
        task_repo.complete(done_task.id)

        assert [t.id for t in task_repo.list_all(TaskFilters(done=False))] == [open_task.id]
        assert [t.id for t in task_repo.list_all(TaskFilters(done=True))] == [done_task.id]
        assert len(task_repo.list_all(TaskFilters())) == 2

    def test_empty(self, task_repo):
        assert task_repo.list_all(TaskFilters()) == []


# ---------------------------------------------------------------------------
# complete / reopen
# ---------------------------------------------------------------------------


class TestCompletion:
    def test_complete_sets_completion_date(self, task_repo):
        task = _add(task_repo)
        done = task_repo.complete(task.id)
        assert done.done is True
        assert done.completion_date == date.today()

    def test_reopen_clears_completion_date(self, task_repo):
        task = _add(task_repo)
        task_repo.complete(task.id)
        reopened = task_repo.reopen(task.id)
        assert reopened.done is False
        assert reopened.completion_date is None

    def test_complete_missing_raises(self, task_repo):
        with pytest.raises(NotFoundError):
            task_repo.complete(7)


# ---------------------------------------------------------------------------
# update
# ---------------------------------------------------------------------------


class TestUpdate:
    def test_partial_update_keeps_other_fields(self, task_repo):
        task = _add(
            task_repo,
            category="Work",
            tags=["x"],
            due_date=date(2026, 1, 2),
            priority=1,
        )

        updated = task_repo.update(task.id, TaskUpdate(priority=5))

        assert updated.priority == 5
        assert updated.name == task.name
        assert updated.category == "Work"
        assert updated.tags == ["x"]
        assert updated.due_date == date(2026, 1, 2)

    def test_replaces_category_and_tags(self, task_repo):
        task = _add(task_repo, category="Work", tags=["x", "y"])
        updated = task_repo.update(
            task.id, TaskUpdate(category="Home", tags=["z"])
        )
        assert updated.category == "Home"
        assert updated.tags == ["z"]

    def test_name_and_due_date(self, task_repo):
        task = _add(task_repo)
        updated = task_repo.update(
            task.id, TaskUpdate(name="Renamed", due_date=date(2027, 3, 4))
        )
        assert updated.name == "Renamed"
        assert updated.due_date == date(2027, 3, 4)

    def test_undone(self, task_repo):
        task = _add(task_repo)
        task_repo.complete(task.id)
        updated = task_repo.update(task.id, TaskUpdate(undone=True))
        assert updated.done is False
        assert updated.completion_date is None

    def test_missing_task_raises(self, task_repo):
        with pytest.raises(NotFoundError):
            task_repo.update(99, TaskUpdate(name="nope"))
