# src/yapper/cli/commands.py

"""
Built-in commands and the default name/alias vocabulary.

A Command is the opaque handle stored in the AliasRegistry; str(command) is its
display name. Handlers take (state, args) where args is everything after the
first token, and return the reply text. Errors are raised as YapperError.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core.state import AppState
from ..errors import UsageError
from ..tasks.task_codec import encode_task
from ..tasks.task_models import Deadline, Event, Task, Todo

CommandHandler = Callable[[AppState, str], str]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Command:
    name: str
    handler: CommandHandler
    help_text: str
    # True if the handler changes the task list (the loop saves afterwards).
    mutates: bool = False

    def __call__(self, state: AppState, args: str = "") -> str:
        return self.handler(state, args)

    def __str__(self) -> str:
        return self.name


# ---- argument helpers ----


def _require_description(text: str) -> str:
    text = text.strip()
    if not text:
        raise UsageError("Please provide a description")
    return text


def _split_flag(text: str, flag: str, usage: str) -> tuple[str, str]:
    """Split "left /flag right" into (left, right), both stripped and non-empty."""
    head, sep, tail = text.partition(f"/{flag}")
    if not sep:
        raise UsageError(f"Missing /{flag}. Usage: {usage}")
    tail = tail.strip()
    if not tail:
        raise UsageError(f"Nothing after /{flag}. Usage: {usage}")
    return head.strip(), tail


def _task_number(args: str) -> int:
    raw = args.strip()
    if not raw:
        raise UsageError("Which task? Give me its number.")
    try:
        return int(raw.split()[0])
    except ValueError:
        raise UsageError(f"Not a task number: {raw}") from None


def _added(state: AppState, task: Task) -> str:
    # Reject anything the task file could not store before it reaches the list.
    encode_task(task)
    state.tasks.add(task)
    return f"Got it. I've added this task:\n  {task}\nNow you have {len(state.tasks)} tasks in the list."


# ---- handlers ----


def cmd_help(state: AppState, args: str) -> str:
    lines = ["Available commands:"]
    seen: list[Command] = []
    for name in state.aliases.list_names():
        command = state.aliases.resolve(name)
        if command in seen:
            continue
        seen.append(command)
        names = state.aliases.names_for(command)
        lines.append(f"  {' / '.join(names)} - {command.help_text}")
    return "\n".join(lines)


def cmd_bind(state: AppState, args: str) -> str:
    parts = args.split()
    if len(parts) != 2:
        raise UsageError("Usage: bind <alias> <command>")
    alias, target = parts
    return state.aliases.bind(alias, target)


def cmd_unbind(state: AppState, args: str) -> str:
    parts = args.split()
    if len(parts) != 1:
        raise UsageError("Usage: unbind <alias>")
    return state.aliases.unbind(parts[0])


def cmd_reset(state: AppState, args: str) -> str:
    return state.aliases.reset()


def cmd_list(state: AppState, args: str) -> str:
    if not len(state.tasks):
        return "No tasks yet. Add one with todo, deadline or event."
    lines = ["Here are the tasks in your list:"]
    lines.extend(f"{i}. {t}" for i, t in enumerate(state.tasks, start=1))
    return "\n".join(lines)


def cmd_todo(state: AppState, args: str) -> str:
    return _added(state, Todo(_require_description(args)))


def cmd_deadline(state: AppState, args: str) -> str:
    usage = "deadline <description> /by <when>"
    desc, by = _split_flag(args, "by", usage)
    return _added(state, Deadline(_require_description(desc), by=by))


def cmd_event(state: AppState, args: str) -> str:
    usage = "event <description> /from <start> /to <end>"
    desc, rest = _split_flag(args, "from", usage)
    start, end = _split_flag(rest, "to", usage)
    if not start:
        raise UsageError(f"Nothing after /from. Usage: {usage}")
    return _added(state, Event(_require_description(desc), start=start, end=end))


def cmd_mark(state: AppState, args: str) -> str:
    task = state.tasks.mark(_task_number(args))
    return f"Nice! I've marked this task as done:\n  {task}"


def cmd_unmark(state: AppState, args: str) -> str:
    task = state.tasks.unmark(_task_number(args))
    return f"OK, I've marked this task as not done yet:\n  {task}"


def cmd_find(state: AppState, args: str) -> str:
    keyword = args.strip()
    if not keyword:
        raise UsageError("Usage: find <keyword>")
    matches = state.tasks.find(keyword)
    if not matches:
        return f"No tasks match {keyword!r}."
    lines = ["Here are the matching tasks in your list:"]
    lines.extend(f"{i}. {t}" for i, t in matches)
    return "\n".join(lines)


def cmd_delete(state: AppState, args: str) -> str:
    task = state.tasks.remove(_task_number(args))
    return f"Noted. I've removed this task:\n  {task}\nNow you have {len(state.tasks)} tasks in the list."


def cmd_clear(state: AppState, args: str) -> str:
    n = len(state.tasks)
    state.tasks.clear()
    logger.info("Cleared %d tasks.", n)
    return f"Cleared {n} tasks. The list is empty now."


def cmd_bye(state: AppState, args: str) -> str:
    state.running = False
    return "Bye. Hope to see you again soon!"


# ---- default vocabulary ----

HELP = Command("help", cmd_help, "Show available commands and their aliases.")
BIND = Command("bind", cmd_bind, "bind <alias> <command>: add your own alias.")
UNBIND = Command("unbind", cmd_unbind, "unbind <alias>: remove an alias you added.")
RESET = Command("reset", cmd_reset, "Drop all your aliases.")
LIST = Command("list", cmd_list, "List all tasks.")
TODO = Command("todo", cmd_todo, "todo <description>", mutates=True)
DEADLINE = Command("deadline", cmd_deadline, "deadline <description> /by <when>", mutates=True)
EVENT = Command(
    "event", cmd_event, "event <description> /from <start> /to <end>", mutates=True
)
MARK = Command("mark", cmd_mark, "mark <n>: mark task n as done.", mutates=True)
UNMARK = Command("unmark", cmd_unmark, "unmark <n>: mark task n as not done.", mutates=True)
FIND = Command("find", cmd_find, "find <keyword>: search task descriptions.")
DELETE = Command("delete", cmd_delete, "delete <n>: remove task n.", mutates=True)
CLEAR = Command("clear", cmd_clear, "Remove all tasks.", mutates=True)
BYE = Command("bye", cmd_bye, "Quit.")


def default_bindings() -> list[tuple[str, Command, tuple[str, ...]]]:
    return [
        ("help", HELP, ("?",)),
        ("bind", BIND, ()),
        ("unbind", UNBIND, ()),
        ("reset", RESET, ()),
        ("list", LIST, ("ls",)),
        ("todo", TODO, ("t", "T")),
        ("deadline", DEADLINE, ("d", "D")),
        ("event", EVENT, ("e", "E")),
        ("mark", MARK, ("m",)),
        ("unmark", UNMARK, ("um",)),
        ("find", FIND, ()),
        ("delete", DELETE, ("del",)),
        ("clear", CLEAR, ()),
        ("bye", BYE, ("exit", "quit")),
    ]
