# src/yapper/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..errors import UsageError
from .task_models import Task


class TaskList:
    """Ordered in-memory task collection. Positions are 1-based, as the user sees them."""

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: list[Task] = list(tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def _index(self, n: int) -> int:
        if not self._tasks:
            raise UsageError("There are no tasks yet.")
        if not 1 <= n <= len(self._tasks):
            raise UsageError(f"Task number must be between 1 and {len(self._tasks)}.")
        return n - 1

    def add(self, task: Task) -> Task:
        self._tasks.append(task)
        return task

    def get(self, n: int) -> Task:
        return self._tasks[self._index(n)]

    def remove(self, n: int) -> Task:
        return self._tasks.pop(self._index(n))

    def mark(self, n: int) -> Task:
        task = self.get(n)
        task.mark()
        return task

    def unmark(self, n: int) -> Task:
        task = self.get(n)
        task.unmark()
        return task

    def find(self, keyword: str) -> list[tuple[int, Task]]:
        needle = keyword.lower()
        return [
            (i, t) for i, t in enumerate(self._tasks, start=1) if needle in t.description.lower()
        ]

    def clear(self) -> None:
        self._tasks.clear()
