# tests/test_task_models.py

from __future__ import annotations

from datetime import date, datetime

import pytest

from taskmate.core.errors import DateParseError, MissingDescriptionError
from taskmate.tasks.task_models import Deadline, Event, ToDo, parse_date


def test_todo_display_and_completion_toggle() -> None:
    task = ToDo("  buy milk  ")
    assert task.description == "buy milk"
    assert str(task) == "[T][ ] buy milk"

    task.mark_done()
    assert task.completed is True
    assert str(task) == "[T][X] buy milk"

    task.mark_not_done()
    assert str(task) == "[T][ ] buy milk"


def test_empty_description_is_rejected() -> None:
    with pytest.raises(MissingDescriptionError):
        ToDo("   ")


def test_deadline_and_event_accept_iso_text() -> None:
    d = Deadline("return book", "2019-10-15")
    assert d.by == date(2019, 10, 15)
    assert str(d) == "[D][ ] return book (by: Oct 15 2019)"

    e = Event("camp", "2024-02-28", "2024-03-01")
    assert (e.start, e.end) == (date(2024, 2, 28), date(2024, 3, 1))
    assert str(e) == "[E][ ] camp (from: Feb 28 2024 to: Mar 01 2024)"


@pytest.mark.parametrize("raw", ["tomorrow", "2019-13-01", "2019-02-30", "19-10-15", "20191015", "2019-W40-1"])
def test_parse_date_rejects_anything_but_valid_iso_dates(raw: str) -> None:
    with pytest.raises(DateParseError):
        parse_date(raw)


def test_deadline_with_bad_date_is_a_date_failure_not_a_description_failure() -> None:
    with pytest.raises(DateParseError):
        Deadline("return book", "next week")


def test_equality_is_structural() -> None:
    assert ToDo("read") == ToDo("read")
    assert ToDo("read") != ToDo("read", completed=True)
    assert Deadline("read", "2020-01-01") == Deadline("read", date(2020, 1, 1))
    # Same description, different variant.
    assert ToDo("read") != Deadline("read", "2020-01-01")


def test_copy_is_independent() -> None:
    original = Event("trip", "2020-01-01", "2020-01-03")
    clone = original.copy()
    assert clone == original and clone is not original

    clone.mark_done()
    assert original.completed is False


def test_storage_rendering() -> None:
    assert ToDo("a", completed=True).to_storage() == "T | 1 | a"
    assert Deadline("b", "2019-10-15").to_storage() == "D | 0 | b | 2019-10-15"
    assert Event("c", "2019-10-15", "2019-10-16").to_storage() == "E | 0 | c | 2019-10-15 | 2019-10-16"


def test_datetime_values_are_reduced_to_calendar_dates() -> None:
    d = Deadline("call", datetime(2021, 5, 4, 13, 30))
    assert d.by == date(2021, 5, 4) and type(d.by) is date
    assert d.to_storage() == "D | 0 | call | 2021-05-04"

    e = Event("trip", datetime(2021, 5, 4, 8), datetime(2021, 5, 6, 20))
    assert e.to_storage() == "E | 0 | trip | 2021-05-04 | 2021-05-06"
