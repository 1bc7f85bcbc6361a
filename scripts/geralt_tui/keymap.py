"""
Command table: key to action mapping for view screens.

Built once by ``build_command_table`` when the application starts, so
user overrides are applied explicitly instead of at import time.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Command:
    """One bindable action."""

    action: str
    keys: tuple[str, ...]
    description: str


DEFAULT_COMMANDS: tuple[Command, ...] = (
    Command("add_task", ("a",), "Add task under cursor"),
    Command("add_root_task", ("A",), "Add root task"),
    Command("toggle", ("t", "space"), "Toggle completion"),
    Command("remove", ("D",), "Remove task"),
    Command("alias", ("l",), "Alias task"),
    Command("unalias", ("L",), "Remove alias"),
    Command("open_scoped", ("enter",), "Open scoped view"),
    Command("refresh", ("g",), "Refresh"),
    Command("help", ("question_mark",), "Show keys"),
    Command("close_view", ("q",), "Close view"),
)


class CommandTable:
    """Lookup from key names to actions, and back."""

    def __init__(self, commands: tuple[Command, ...]) -> None:
        self.commands = commands
        self._by_key: dict[str, str] = {}
        for command in commands:
            for key in command.keys:
                self._by_key[key] = command.action

    def action_for(self, key: str) -> str | None:
        return self._by_key.get(key)

    def keys_for(self, action: str) -> tuple[str, ...]:
        for command in self.commands:
            if command.action == action:
                return command.keys
        return ()

    def help_lines(self) -> list[str]:
        return [
            f"{'/'.join(command.keys):<16} {command.description}"
            for command in self.commands
        ]


def build_command_table(overrides: dict[str, str] | None = None) -> CommandTable:
    """Build the command table, replacing the keys of overridden actions.

    Args:
        overrides: action name to key name, e.g. ``{"remove": "x"}``.

    Raises:
        ValueError: an override names an unknown action, or leaves one key
            bound to more than one action.
    """
    overrides = overrides or {}
    known = {command.action for command in DEFAULT_COMMANDS}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise ValueError(f"Unknown action(s) in key overrides: {', '.join(unknown)}")

    commands = tuple(
        Command(command.action, (overrides[command.action],), command.description)
        if command.action in overrides
        else command
        for command in DEFAULT_COMMANDS
    )
    owners: dict[str, str] = {}
    for command in commands:
        for key in command.keys:
            if key in owners:
                raise ValueError(
                    f"Key {key!r} bound to both {owners[key]} and {command.action}"
                )
            owners[key] = command.action
    return CommandTable(commands)
