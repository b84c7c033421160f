"""World-state contracts consumed by the evaluator and command handlers."""

from __future__ import annotations

from enum import StrEnum
from typing import Protocol


class NameKind(StrEnum):
    QUERY = "query"
    VARIABLE = "variable"


class UnknownNameError(LookupError):
    """Raised by a world state asked about a name it does not provide."""

    def __init__(self, name: str, kind: NameKind) -> None:
        super().__init__(f"Unknown {kind.value}: {name}")
        self.name = name
        self.kind = kind


class UnknownQueryError(UnknownNameError):
    def __init__(self, name: str) -> None:
        super().__init__(name, NameKind.QUERY)


class UnknownVariableError(UnknownNameError):
    def __init__(self, name: str) -> None:
        super().__init__(name, NameKind.VARIABLE)


class WorldStateReader(Protocol):
    """Read-only lookups used while evaluating conditions."""

    def get_bool(self, name: str) -> bool:
        """Named boolean query; raises `UnknownQueryError` for unknown names."""
        ...

    def get_number(self, name: str) -> float:
        """Named numeric variable; raises `UnknownVariableError` for unknown names."""
        ...

    def is_resource_nearby(self, resource: str) -> bool: ...


class CargoHold(Protocol):
    """The one mutation commands may perform."""

    def unload_cargo(self) -> float:
        """Empty the cargo hold and return the amount unloaded."""
        ...


class WorldState(WorldStateReader, CargoHold, Protocol):
    """Everything built-in command handlers need from the host."""
