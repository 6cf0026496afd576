# tests/test_task_list.py

from __future__ import annotations

import pytest

from taskmate.core.errors import InvalidIndexError
from taskmate.tasks.task_list import TaskList
from taskmate.tasks.task_models import Deadline, ToDo


def _list() -> TaskList:
    return TaskList([ToDo("Buy milk"), Deadline("Return BOOK", "2020-01-01"), ToDo("read book")])


def test_add_returns_new_size_and_keeps_order() -> None:
    tl = TaskList()
    assert tl.add(ToDo("a")) == 1
    assert tl.add(ToDo("b")) == 2
    assert [t.description for t in tl] == ["a", "b"]


def test_insert_at_original_position() -> None:
    tl = _list()
    tl.insert(1, ToDo("middle"))
    assert [t.description for t in tl.tasks][:3] == ["Buy milk", "middle", "Return BOOK"]
    # Appending position (== size) is allowed.
    tl.insert(len(tl), ToDo("end"))
    assert tl.get(len(tl) - 1).description == "end"


def test_mark_and_unmark_by_index() -> None:
    tl = _list()
    assert tl.mark_done(0).completed is True
    assert tl.get(0).completed is True
    assert tl.mark_not_done(0).completed is False


def test_delete_returns_removed_task() -> None:
    tl = _list()
    removed = tl.delete(1)
    assert removed == Deadline("Return BOOK", "2020-01-01")
    assert len(tl) == 2


@pytest.mark.parametrize("index", [-1, 3, 99])
def test_out_of_range_indexes_fail_and_leave_list_unchanged(index: int) -> None:
    tl = _list()
    before = tl.tasks
    for op in (tl.get, tl.mark_done, tl.mark_not_done, tl.delete):
        with pytest.raises(InvalidIndexError):
            op(index)
    assert tl.tasks == before


def test_empty_list_index_error_message() -> None:
    with pytest.raises(InvalidIndexError, match="no tasks"):
        TaskList().delete(0)


def test_find_is_case_insensitive_substring_in_original_order() -> None:
    tl = _list()
    assert [t.description for t in tl.find("book")] == ["Return BOOK", "read book"]
    assert [t.description for t in tl.find("MILK")] == ["Buy milk"]
    assert tl.find("nothing") == []
    assert tl.find("") == []
    assert len(tl) == 3


def test_tasks_property_is_a_snapshot() -> None:
    tl = _list()
    snapshot = tl.tasks
    snapshot.clear()
    assert len(tl) == 3
