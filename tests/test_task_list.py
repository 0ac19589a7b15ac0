# tests/test_task_list.py

from __future__ import annotations

import pytest

from yapper.errors import UsageError
from yapper.tasks.task_list import TaskList
from yapper.tasks.task_models import Deadline, Todo


def test_positions_are_one_based() -> None:
    tasks = TaskList([Todo("a"), Todo("b")])
    assert tasks.get(1).description == "a"
    assert tasks.remove(2).description == "b"
    assert len(tasks) == 1


def test_mark_and_unmark_flip_in_place() -> None:
    task = Deadline("pay rent", by="1st")
    tasks = TaskList([task])
    assert tasks.mark(1) is task
    assert task.done
    tasks.unmark(1)
    assert not task.done


@pytest.mark.parametrize("n", [0, 3, -1])
def test_out_of_range(n) -> None:
    tasks = TaskList([Todo("a"), Todo("b")])
    with pytest.raises(UsageError):
        tasks.get(n)


def test_empty_list_message() -> None:
    with pytest.raises(UsageError, match="no tasks"):
        TaskList().remove(1)


def test_find_is_case_insensitive_and_keeps_positions() -> None:
    tasks = TaskList([Todo("Read book"), Todo("cook"), Todo("return BOOK")])
    assert [(i, t.description) for i, t in tasks.find("book")] == [
        (1, "Read book"),
        (3, "return BOOK"),
    ]
    assert tasks.find("zzz") == []
