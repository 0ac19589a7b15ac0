# src/yapper/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias


class TaskKind(StrEnum):
    """Type tag used in the stored line format."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


@dataclass(slots=True)
class _TaskBase:
    description: str
    done: bool = False

    def mark(self) -> None:
        self.done = True

    def unmark(self) -> None:
        self.done = False

    def _prefix(self, kind: TaskKind) -> str:
        return f"[{kind}][{'X' if self.done else ' '}] {self.description}"


@dataclass(slots=True)
class Todo(_TaskBase):
    def __str__(self) -> str:
        return self._prefix(TaskKind.TODO)


@dataclass(slots=True, kw_only=True)
class Deadline(_TaskBase):
    by: str

    def __str__(self) -> str:
        return f"{self._prefix(TaskKind.DEADLINE)} (by: {self.by})"


@dataclass(slots=True, kw_only=True)
class Event(_TaskBase):
    start: str
    end: str

    def __str__(self) -> str:
        return f"{self._prefix(TaskKind.EVENT)} (from: {self.start} to: {self.end})"


# Closed union: the codec matches on these three and nothing else.
Task: TypeAlias = Todo | Deadline | Event
