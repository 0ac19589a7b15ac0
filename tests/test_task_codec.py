# tests/test_task_codec.py

from __future__ import annotations

import pytest

from yapper.errors import (
    InvalidFieldError,
    InvalidRangeError,
    MalformedRecordError,
    RecordFormatError,
    UnrecognizedStatusError,
    UnrecognizedTypeError,
)
from yapper.tasks.task_codec import decode_task, encode_task, kind_of
from yapper.tasks.task_models import Deadline, Event, TaskKind, Todo

TASKS = [
    Todo("read book"),
    Todo("read book", done=True),
    Deadline("submit report", by="2024-05-01"),
    Deadline("submit report", by="Friday 5pm", done=True),
    Event("offsite", start="Mon 9am", end="Tue 5pm"),
    Event("offsite", start="2024-01-01", end="2024-01-02", done=True),
]


@pytest.mark.parametrize("task", TASKS, ids=str)
def test_decode_inverts_encode(task) -> None:
    assert decode_task(encode_task(task)) == task


def test_canonical_lines() -> None:
    assert encode_task(Todo("read book")) == "| T |  | read book"
    assert encode_task(Deadline("submit report", by="2024-05-01", done=True)) == (
        "| D | X | submit report | 2024-05-01"
    )
    assert encode_task(Event("talk", start="2pm", end="4pm")) == "| E |  | talk | 2pm-----4pm"


def test_decode_trims_fields() -> None:
    task = decode_task("|E|X|  party  |  Sat 8pm ----- Sun 2am  ")
    assert task == Event("party", start="Sat 8pm", end="Sun 2am", done=True)


def test_decode_types_differ_by_tag() -> None:
    assert decode_task("| T |  | x") != decode_task("| D |  | x | y")
    assert kind_of(decode_task("| D |  | x | y")) is TaskKind.DEADLINE


@pytest.mark.parametrize(
    "line, error",
    [
        ("| Z |  | desc", UnrecognizedTypeError),
        ("| T | Y | desc", UnrecognizedStatusError),
        ("| E |  | desc | 2024-01-01", InvalidRangeError),
        ("| E |  | desc | a-----b-----c", InvalidRangeError),
        ("| T |  ", MalformedRecordError),
        ("", MalformedRecordError),
        ("| D |  | no due marker", MalformedRecordError),
        ("| E | X | no range", MalformedRecordError),
    ],
)
def test_decode_failures(line, error) -> None:
    with pytest.raises(error):
        decode_task(line)


def test_decode_errors_share_a_base() -> None:
    with pytest.raises(RecordFormatError):
        decode_task("| Z |  | desc")


@pytest.mark.parametrize(
    "task",
    [
        Todo("a | b"),
        Todo(" padded"),
        Todo("two\nlines"),
        Deadline("x", by="a|b"),
        Event("x", start="a-----b", end="c"),
        Event("x", start="a-", end="b"),
    ],
)
def test_encode_rejects_unstorable_fields(task) -> None:
    with pytest.raises(InvalidFieldError):
        encode_task(task)
