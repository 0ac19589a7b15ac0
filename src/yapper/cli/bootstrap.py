# src/yapper/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- ensures local data directories exist,
- opens the task file and loads it into a TaskList,
- seeds a fresh AliasRegistry with the default vocabulary.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore
from .aliases import AliasRegistry
from .commands import Command, default_bindings

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings (falls back to get_settings()).

    Raises YapperError if the task file cannot be loaded; the caller decides
    whether that is fatal.
    """
    if settings is None:
        settings = get_settings()

    try:
        _ensure_local_dirs(settings)
    except OSError:
        logger.exception("Failed to create data directories under %s", settings.data_dir)

    store = TaskStore(settings.tasks_path, strict=getattr(settings, "strict_load", True))
    tasks = TaskList(store.load())
    aliases: AliasRegistry[Command] = AliasRegistry(default_bindings)

    return AppState(settings=settings, aliases=aliases, task_store=store, tasks=tasks)
