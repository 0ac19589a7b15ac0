# src/yapper/tasks/task_codec.py

"""
Stored line format (one task per line):

    | <T|D|E> | <X or blank> | <description> [| <due>] [| <start>-----<end>]

Fields are trimmed on decode, so spacing around the pipes is optional.
encode_task() writes the canonical spacing, and decode_task(encode_task(t)) == t
holds for every task encode_task() accepts.
"""

from __future__ import annotations

from ..errors import (
    InvalidFieldError,
    InvalidRangeError,
    MalformedRecordError,
    UnrecognizedStatusError,
    UnrecognizedTypeError,
)
from .task_models import Deadline, Event, Task, TaskKind, Todo

DELIMITER = "|"
RANGE_DELIMITER = "-----"
DONE_MARKER = "X"

# Field count each tag needs (leading empty field before the first pipe included).
_FIELD_COUNTS = {
    TaskKind.TODO: 4,
    TaskKind.DEADLINE: 5,
    TaskKind.EVENT: 5,
}


def decode_task(line: str) -> Task:
    fields = [f.strip() for f in line.split(DELIMITER)]
    if len(fields) < 4:
        raise MalformedRecordError("File is corrupted in one way or another")

    try:
        kind = TaskKind(fields[1])
    except ValueError:
        raise UnrecognizedTypeError(f"Task type not recognised: {fields[1]}") from None

    status = fields[2]
    if status == DONE_MARKER:
        done = True
    elif status == "":
        done = False
    else:
        raise UnrecognizedStatusError(f"Task status not recognised: {status}")

    if len(fields) < _FIELD_COUNTS[kind]:
        raise MalformedRecordError(f"Missing fields for task type {kind}: {line!r}")

    description = fields[3]
    task: Task
    match kind:
        case TaskKind.TODO:
            task = Todo(description)
        case TaskKind.DEADLINE:
            task = Deadline(description, by=fields[4])
        case TaskKind.EVENT:
            time_range = fields[4].split(RANGE_DELIMITER)
            if len(time_range) != 2:
                raise InvalidRangeError("Invalid event range detected")
            task = Event(description, start=time_range[0].strip(), end=time_range[1].strip())

    task.done = done
    return task


def encode_task(task: Task) -> str:
    _check_field(task.description, "description")
    head = f"| {kind_of(task)} | {DONE_MARKER if task.done else ''} | {task.description}"

    match task:
        case Todo():
            return head
        case Deadline(by=by):
            _check_field(by, "due marker")
            return f"{head} | {by}"
        case Event(start=start, end=end):
            for value, what in ((start, "start marker"), (end, "end marker")):
                _check_field(value, what)
                if RANGE_DELIMITER in value:
                    raise InvalidFieldError(f"The {what} may not contain {RANGE_DELIMITER!r}.")
            if start.endswith("-"):
                # "a-" + "-----" would split one dash early on decode
                raise InvalidFieldError("The start marker may not end with '-'.")
            return f"{head} | {start}{RANGE_DELIMITER}{end}"

    raise TypeError(f"Not a task: {task!r}")


def kind_of(task: Task) -> TaskKind:
    match task:
        case Todo():
            return TaskKind.TODO
        case Deadline():
            return TaskKind.DEADLINE
        case Event():
            return TaskKind.EVENT
    raise TypeError(f"Not a task: {task!r}")


def _check_field(value: str, what: str) -> None:
    """Reject values that would not survive a decode of the encoded line."""
    if DELIMITER in value or "\n" in value or "\r" in value:
        raise InvalidFieldError(f"The {what} may not contain '{DELIMITER}' or line breaks.")
    if value != value.strip():
        raise InvalidFieldError(f"The {what} may not start or end with whitespace.")
