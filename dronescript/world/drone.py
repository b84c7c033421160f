"""Mutable drone state for local runs and tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from dronescript.world.state import UnknownQueryError, UnknownVariableError

_QUERY_ATTRIBUTES: Final[dict[str, str]] = {
    "cargo_full": "cargo_full",
    "storm_active": "storm_active",
    "in_hazard_zone": "in_hazard_zone",
    "nearby_charger": "nearby_charger",
    "nearby_damaged_drone": "nearby_damaged_drone",
}

_VARIABLE_ATTRIBUTES: Final[dict[str, str]] = {
    "battery": "battery",
    "hp": "hp",
    "cargo": "cargo_amount",
}

QUERY_NAMES: Final[frozenset[str]] = frozenset(_QUERY_ATTRIBUTES)

VARIABLE_NAMES: Final[frozenset[str]] = frozenset(_VARIABLE_ATTRIBUTES)


def _default_resources() -> dict[str, bool]:
    return {"Iron": True, "Copper": True, "any": True}


@dataclass(slots=True)
class DroneState:
    """Simulated drone (Miner Mk1 defaults). Names are matched case-insensitively."""

    battery: float = 100.0
    hp: float = 100.0
    cargo_amount: float = 0.0
    max_cargo: float = 10.0
    position: tuple[float, float] = (0.0, 0.0)
    storm_active: bool = False
    in_hazard_zone: bool = False
    nearby_charger: bool = False
    nearby_damaged_drone: bool = False
    nearby_resources: dict[str, bool] = field(default_factory=_default_resources)

    @property
    def cargo_full(self) -> bool:
        return self.cargo_amount >= self.max_cargo

    def get_bool(self, name: str) -> bool:
        attribute = _QUERY_ATTRIBUTES.get(name.lower())
        if attribute is None:
            raise UnknownQueryError(name)
        return getattr(self, attribute)

    def get_number(self, name: str) -> float:
        attribute = _VARIABLE_ATTRIBUTES.get(name.lower())
        if attribute is None:
            raise UnknownVariableError(name)
        return getattr(self, attribute)

    def is_resource_nearby(self, resource: str) -> bool:
        return self.nearby_resources.get(resource, False)

    def unload_cargo(self) -> float:
        amount = self.cargo_amount
        self.cargo_amount = 0.0
        return amount

    def __str__(self) -> str:
        return (
            f"Drone[Battery:{self.battery:.1f}% HP:{self.hp:.1f}% "
            f"Cargo:{self.cargo_amount:g}/{self.max_cargo:g} Pos:{self.position} "
            f"Storm:{self.storm_active} Hazard:{self.in_hazard_zone}]"
        )
