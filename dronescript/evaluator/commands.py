"""Command handler contracts and the built-in command table."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Protocol

from dronescript.ast import Command, format_argument
from dronescript.lexer import keyword_kind
from dronescript.world import WorldState

_COMMAND_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@dataclass(frozen=True, slots=True)
class CommandOutcome:
    """Result of one handler call. `performed=False` lets a bare or fallback command fall through."""

    performed: bool
    messages: tuple[str, ...] = ()

    @staticmethod
    def done(*messages: str) -> "CommandOutcome":
        return CommandOutcome(performed=True, messages=messages)

    @staticmethod
    def skipped(*messages: str) -> "CommandOutcome":
        return CommandOutcome(performed=False, messages=messages)


class CommandHandler(Protocol):
    """Behavior bound to a command name."""

    def __call__(self, command: Command, state: WorldState) -> CommandOutcome: ...


@dataclass(frozen=True, slots=True)
class CommandRegistry:
    """Immutable, case-insensitive command table injected into the evaluator."""

    handlers: Mapping[str, CommandHandler] = field(default_factory=lambda: MappingProxyType({}))

    def lookup(self, name: str) -> CommandHandler | None:
        return self.handlers.get(name.lower())

    def names(self) -> frozenset[str]:
        return frozenset(self.handlers)

    def with_handler(self, name: str, handler: CommandHandler) -> "CommandRegistry":
        """Return a registry that also maps `name` to `handler` (replacing any previous one)."""
        if not _COMMAND_NAME_RE.fullmatch(name):
            raise ValueError(f"Command name `{name}` is not a valid DroneScript identifier.")
        if keyword_kind(name) is not None:
            raise ValueError(f"Command name `{name}` is a reserved keyword.")
        if not callable(handler):
            raise ValueError(f"Handler for `{name}` is not callable.")
        updated = dict(self.handlers)
        updated[name.lower()] = handler
        return CommandRegistry(handlers=MappingProxyType(updated))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self.handlers

    def __len__(self) -> int:
        return len(self.handlers)


def goto_charger(command: Command, state: WorldState) -> CommandOutcome:
    return CommandOutcome.done("[Simulation] Drone pathfinding to nearest charger...")


def goto_outpost(command: Command, state: WorldState) -> CommandOutcome:
    return CommandOutcome.done("[Simulation] Drone pathfinding to nearest outpost...")


def goto_location(command: Command, state: WorldState) -> CommandOutcome:
    if len(command.arguments) < 2:
        return CommandOutcome.skipped("goto_location needs x and y coordinates.")
    x, y = (format_argument(argument) for argument in command.arguments[:2])
    return CommandOutcome.done(f"[Simulation] Drone pathfinding to ({x}, {y})...")


def mine_nearest(command: Command, state: WorldState) -> CommandOutcome:
    resource = format_argument(command.arguments[0]) if command.arguments else "any"
    searching = f"[Simulation] Searching for nearest {resource} deposit..."
    if not state.is_resource_nearby(resource):
        return CommandOutcome.skipped(searching, f"[Simulation] No {resource} deposits nearby.")
    return CommandOutcome.done(searching, f"[Simulation] Found {resource}! Starting mining...")


def patrol(command: Command, state: WorldState) -> CommandOutcome:
    if len(command.arguments) < 4:
        return CommandOutcome.skipped("patrol needs two waypoints (x1, y1, x2, y2).")
    return CommandOutcome.done("[Simulation] Starting patrol route...")


def wait(command: Command, state: WorldState) -> CommandOutcome:
    if not command.arguments:
        return CommandOutcome.skipped("wait needs a duration in seconds.")
    seconds = format_argument(command.arguments[0])
    return CommandOutcome.done(f"[Simulation] Waiting for {seconds} seconds...")


def deposit(command: Command, state: WorldState) -> CommandOutcome:
    amount = state.unload_cargo()
    return CommandOutcome.done(f"[Simulation] Depositing {amount:g} units at outpost...")


def explore(command: Command, state: WorldState) -> CommandOutcome:
    return CommandOutcome.done("[Simulation] Exploring unseen areas...")


def repair_nearest(command: Command, state: WorldState) -> CommandOutcome:
    return CommandOutcome.done("[Simulation] Repairing nearest damaged drone...")


def default_command_registry() -> CommandRegistry:
    registry = CommandRegistry()
    for name, handler in (
        ("goto_charger", goto_charger),
        ("goto_outpost", goto_outpost),
        ("goto_location", goto_location),
        ("mine_nearest", mine_nearest),
        ("patrol", patrol),
        ("wait", wait),
        ("deposit", deposit),
        ("explore", explore),
        ("repair_nearest", repair_nearest),
    ):
        registry = registry.with_handler(name, handler)
    return registry
