# src/yapper/cli/aliases.py

"""
Alias registry: which typed name runs which command.

- defaults are seeded from an injected list of (name, handle, aliases) bindings
- names added with bind() are user aliases; only those can be unbound
- protected names can never be the target of bind() nor be unbound
- resolution is case-sensitive ("t" and "T" are separate default aliases)

Handles are opaque: the registry only compares them and prints them with str().
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Generic, TypeVar

from ..errors import (
    AliasInUseError,
    NotUserAliasError,
    ProtectedNameError,
    UnknownCommandError,
)

H = TypeVar("H")

DefaultBinding = tuple[str, H, Sequence[str]]

PROTECTED_NAMES: frozenset[str] = frozenset({"bind", "unbind", "reset", "help", "clear"})

UNKNOWN_COMMAND_MESSAGE = "..."
RESET_MESSAGE = "No more aliases! Command list reset to default mappings."

logger = logging.getLogger(__name__)


class AliasRegistry(Generic[H]):
    def __init__(
        self,
        defaults: Sequence[DefaultBinding] | Callable[[], Sequence[DefaultBinding]],
        protected: frozenset[str] = PROTECTED_NAMES,
    ) -> None:
        self._defaults = defaults
        self._protected = frozenset(protected)
        # dict keeps insertion order, which list_names() exposes
        self._names: dict[str, H] = {}
        self._user_aliases: set[str] = set()
        self.seed_defaults()

    @property
    def protected_names(self) -> frozenset[str]:
        return self._protected

    @property
    def user_aliases(self) -> frozenset[str]:
        return frozenset(self._user_aliases)

    def seed_defaults(self) -> None:
        """Replace the whole mapping with the defaults; user aliases are dropped."""
        defaults = self._defaults() if callable(self._defaults) else self._defaults
        self._names.clear()
        self._user_aliases.clear()
        for name, handle, aliases in defaults:
            self._names[name] = handle
            for alias in aliases:
                self._names[alias] = handle

    def bind(self, alias: str, target: str) -> str:
        # The protected check is on the target, not on the new alias.
        if target in self._protected:
            raise ProtectedNameError("I don't recommend doing that.")
        if target not in self._names:
            raise UnknownCommandError("No such command exists.")
        if alias in self._names:
            raise AliasInUseError(
                f"That one's already in use: {alias} mapped to {self._names[alias]}"
            )

        handle = self._names[target]
        self._names[alias] = handle
        self._user_aliases.add(alias)
        logger.info("Bound alias %r -> %s", alias, handle)
        return f"{alias} now bound to {handle}"

    def unbind(self, alias: str) -> str:
        if alias in self._protected:
            raise ProtectedNameError("I REALLY don't recommend doing that.")
        if alias not in self._user_aliases:
            raise NotUserAliasError("That command either doesn't exist or is built-in by default.")

        handle = self._names.pop(alias)
        self._user_aliases.discard(alias)
        logger.info("Unbound alias %r (was %s)", alias, handle)
        return f"{alias} now unbound from {handle}."

    def reset(self) -> str:
        self.seed_defaults()
        logger.info("Alias registry reset to defaults (%d names).", len(self._names))
        return RESET_MESSAGE

    def resolve(self, name: str) -> H:
        try:
            return self._names[name]
        except KeyError:
            raise UnknownCommandError(UNKNOWN_COMMAND_MESSAGE) from None

    def list_names(self) -> list[str]:
        return list(self._names)

    def names_for(self, handle: H) -> list[str]:
        """All names currently resolving to `handle`, in listing order."""
        return [name for name, h in self._names.items() if h == handle]

    def __contains__(self, name: object) -> bool:
        return name in self._names
