# src/yapper/tasks/task_store.py

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ..errors import RecordFormatError, TaskStorageError
from .task_codec import decode_task, encode_task
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Flat-file task store: one encoded task per line.

    - the file (and its parent directories) is created on construction if missing;
      failures there are logged and tolerated
    - load() decodes the whole file; with strict=True the first bad line aborts the load
    - save() rewrites the whole file via a temp file + os.replace

    No file handle is kept open between calls.
    """

    def __init__(self, path: str | Path = "data/tasks.txt", *, strict: bool = True) -> None:
        self._path = Path(path)
        self._strict = strict
        self._bootstrap()
        logger.info("TaskStore ready path=%s strict=%s", self._path, self._strict)

    @property
    def path(self) -> Path:
        return self._path

    def _bootstrap(self) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            if not self._path.exists():
                self._path.touch()
                logger.info("Created empty task file %s", self._path)
        except OSError:
            logger.exception("Failed to create task file %s; starting without it.", self._path)

    # ---- public API ----

    def load(self) -> list[Task]:
        tasks: list[Task] = []
        skipped = 0
        try:
            # Binary read so one undecodable line is handled like any other bad record.
            with self._path.open("rb") as fh:
                for lineno, raw in enumerate(fh, start=1):
                    try:
                        line = raw.decode("utf-8").rstrip("\r\n")
                        if not line.strip():
                            continue
                        tasks.append(decode_task(line))
                    except UnicodeDecodeError as e:
                        if self._strict:
                            logger.error("Undecodable line at %s:%d: %s", self._path, lineno, e)
                            raise TaskStorageError(
                                f"Line {lineno} of {self._path} is not valid UTF-8."
                            ) from e
                        skipped += 1
                        logger.warning(
                            "Skipping undecodable line at %s:%d: %s", self._path, lineno, e
                        )
                    except RecordFormatError as e:
                        if self._strict:
                            logger.error("Bad record at %s:%d: %s", self._path, lineno, e)
                            raise
                        skipped += 1
                        logger.warning("Skipping bad record at %s:%d: %s", self._path, lineno, e)
        except FileNotFoundError:
            raise TaskStorageError("File not found") from None
        except OSError as e:
            raise TaskStorageError(f"Could not read {self._path}: {e}") from e

        logger.info("Loaded %d tasks from %s (skipped=%d)", len(tasks), self._path, skipped)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        lines = [encode_task(t) + "\n" for t in tasks]
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text("".join(lines), "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            tmp.unlink(missing_ok=True)
            raise TaskStorageError(f"Could not write {self._path}: {e}") from e
        logger.info("Saved %d tasks to %s", len(lines), self._path)
