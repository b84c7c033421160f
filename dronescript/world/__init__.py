"""World-state contract and the local drone state."""

from dronescript.world.drone import QUERY_NAMES, VARIABLE_NAMES, DroneState
from dronescript.world.state import (
    CargoHold,
    NameKind,
    UnknownNameError,
    UnknownQueryError,
    UnknownVariableError,
    WorldState,
    WorldStateReader,
)

__all__ = [
    "QUERY_NAMES",
    "VARIABLE_NAMES",
    "CargoHold",
    "DroneState",
    "NameKind",
    "UnknownNameError",
    "UnknownQueryError",
    "UnknownVariableError",
    "WorldState",
    "WorldStateReader",
]
