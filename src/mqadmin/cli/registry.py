"""Ordered registry of subcommands."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from ..lib.errors import DuplicateCommandError, RegistryFrozenError

if TYPE_CHECKING:
    from .commands.base import SubCommand


class CommandRegistry:
    """Subcommands in registration order.

    Populated once, then frozen. Registration order is the order of the
    help listing and of the lookup scan.
    """

    def __init__(self, commands: Iterable[SubCommand] = ()) -> None:
        self._commands: list[SubCommand] = []
        self._frozen = False
        for command in commands:
            self.register(command)

    def register(self, command: SubCommand) -> None:
        """Append *command*; its name and alias must not be taken yet."""
        if self._frozen:
            raise RegistryFrozenError(f"Cannot register '{command.name}': registry is frozen")
        if not command.name:
            raise ValueError("Command name must not be empty")
        for token in (command.name, command.alias):
            if not token:
                continue
            owner = self.find(token)
            if owner is not None:
                raise DuplicateCommandError(
                    f"'{token}' of command '{command.name}' is already used by '{owner.name}'"
                )
        self._commands.append(command)

    def freeze(self) -> CommandRegistry:
        self._frozen = True
        return self

    def find(self, name: str) -> SubCommand | None:
        """First command whose name or alias equals *name*, ignoring case."""
        for command in self._commands:
            if command.matches(name):
                return command
        return None

    def __iter__(self) -> Iterator[SubCommand]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)
