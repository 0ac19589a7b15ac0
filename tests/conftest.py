# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from yapper.cli.aliases import AliasRegistry
from yapper.cli.commands import default_bindings
from yapper.core.state import AppState
from yapper.tasks.task_list import TaskList
from yapper.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    A SimpleNamespace rather than the real config keeps tests independent
    of the environment and of any .env in the working directory.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="yapper-test",
        log_level="DEBUG",
        data_dir=data_dir,
        tasks_path=data_dir / "tasks.txt",
        log_dir=data_dir / "logs",
        strict_load=True,
    )


@pytest.fixture()
def registry() -> AliasRegistry:
    return AliasRegistry(default_bindings)


@pytest.fixture()
def state(settings: SimpleNamespace, registry: AliasRegistry) -> AppState:
    """
    AppState wired with the real flat-file TaskStore on tmp_path.
    """
    return AppState(
        settings=settings,
        aliases=registry,
        task_store=TaskStore(settings.tasks_path),
        tasks=TaskList(),
    )
