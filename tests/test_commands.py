# tests/test_commands.py

from __future__ import annotations

import pytest

from yapper.cli.commands import (
    BIND,
    CLEAR,
    HELP,
    LIST,
    TODO,
    Command,
    default_bindings,
)
from yapper.errors import InvalidFieldError, ProtectedNameError, UsageError
from yapper.tasks.task_models import Deadline, Event, Todo


def run(state, name: str, args: str = "") -> str:
    return state.aliases.resolve(name)(state, args)


def test_command_display_name_is_its_name() -> None:
    assert str(TODO) == "todo"
    assert TODO.mutates
    assert not LIST.mutates


def test_default_vocabulary_is_complete() -> None:
    names = {name for name, _, _ in default_bindings()}
    assert names == {
        "help", "bind", "unbind", "reset", "list", "todo", "deadline", "event",
        "mark", "unmark", "find", "delete", "clear", "bye",
    }
    assert all(isinstance(c, Command) for _, c, _ in default_bindings())


def test_add_each_kind(state) -> None:
    assert "Now you have 1 tasks" in run(state, "todo", "read book")
    run(state, "d", "submit report /by 2024-05-01")
    run(state, "E", "offsite /from Mon 9am /to Tue 5pm")
    assert list(state.tasks) == [
        Todo("read book"),
        Deadline("submit report", by="2024-05-01"),
        Event("offsite", start="Mon 9am", end="Tue 5pm"),
    ]


@pytest.mark.parametrize(
    "name, args",
    [
        ("todo", ""),
        ("todo", "   "),
        ("deadline", "no marker"),
        ("deadline", "x /by"),
        ("deadline", "/by friday"),
        ("event", "x /from a"),
        ("event", "x /from /to b"),
        ("event", "x /to b"),
    ],
)
def test_add_usage_errors(state, name, args) -> None:
    with pytest.raises(UsageError):
        run(state, name, args)
    assert len(state.tasks) == 0


def test_unstorable_task_is_not_added(state) -> None:
    with pytest.raises(InvalidFieldError):
        run(state, "todo", "a | b")
    assert len(state.tasks) == 0


def test_mark_unmark_delete(state) -> None:
    run(state, "todo", "a")
    run(state, "todo", "b")
    assert "[T][X] b" in run(state, "m", "2")
    assert "[T][ ] b" in run(state, "um", "2")
    assert "a" in run(state, "del", "1")
    assert [t.description for t in state.tasks] == ["b"]

    with pytest.raises(UsageError):
        run(state, "mark", "two")
    with pytest.raises(UsageError):
        run(state, "mark", "")
    with pytest.raises(UsageError):
        run(state, "delete", "5")


def test_list_and_find(state) -> None:
    assert "No tasks" in run(state, "list")
    run(state, "todo", "read book")
    run(state, "todo", "cook")
    out = run(state, "ls")
    assert "1. [T][ ] read book" in out
    assert "2. [T][ ] cook" in out
    assert "1. [T][ ] read book" in run(state, "find", "BOOK")
    assert "No tasks match" in run(state, "find", "zzz")
    with pytest.raises(UsageError):
        run(state, "find", "")


def test_clear(state) -> None:
    run(state, "todo", "a")
    assert run(state, "clear") == "Cleared 1 tasks. The list is empty now."
    assert len(state.tasks) == 0
    assert CLEAR.mutates


def test_bind_unbind_reset_through_handlers(state) -> None:
    assert run(state, "bind", "tt todo") == "tt now bound to todo"
    run(state, "tt", "via alias")
    assert state.tasks.get(1) == Todo("via alias")

    with pytest.raises(ProtectedNameError):
        run(state, "bind", "h help")
    with pytest.raises(UsageError):
        run(state, "bind", "only-one")

    assert run(state, "unbind", "tt") == "tt now unbound from todo."
    run(state, "bind", "zz list")
    assert "No more aliases" in run(state, "reset")
    assert "zz" not in state.aliases


def test_help_lists_names_once_per_command(state) -> None:
    state.aliases.bind("tt", "todo")
    out = run(state, "?")
    assert out.splitlines()[0] == "Available commands:"
    assert "todo / t / T / tt - " in out
    assert "list / ls - " in out
    assert out.count(HELP.help_text) == 1
    assert BIND.help_text in out


def test_bye_stops_the_session(state) -> None:
    assert state.running
    run(state, "quit")
    assert not state.running
