# src/yapper/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore

if TYPE_CHECKING:
    from ..cli.aliases import AliasRegistry
    from ..cli.commands import Command


@dataclass
class AppState:
    # Settings object (config.Settings or a test double with the same attributes).
    settings: Any

    aliases: AliasRegistry[Command]
    task_store: TaskStore
    tasks: TaskList = field(default_factory=TaskList)

    # Cleared by the "bye" command; the console loop stops after the current command.
    running: bool = True
