#!/usr/bin/env python
"""Run the defensive-miner sample scenarios and print each evaluation trace."""

import argparse
import logging

from dronescript.diagnostics import format_diagnostic
from dronescript.pipeline import drone_options, run_check, run_tick
from dronescript.world import DroneState

DEFENSIVE_MINER = """\
# Defensive miner script
IF battery < 15 THEN goto_charger
IF hp < 40 THEN goto_outpost
IF storm_active THEN goto_outpost
IF in_hazard_zone AND hp < 80 THEN goto_outpost
IF cargo_full THEN goto_outpost
mine_nearest(Uranium)
ELSE mine_nearest(Titanium)
ELSE mine_nearest(any)
"""


def _resource_fallback_state() -> DroneState:
    state = DroneState(battery=80, hp=100, cargo_amount=3)
    state.nearby_resources["Uranium"] = False
    state.nearby_resources["Titanium"] = True
    return state


SCENARIOS: list[tuple[str, str, DroneState]] = [
    ("Low Battery", DEFENSIVE_MINER, DroneState(battery=12, hp=100, cargo_amount=3)),
    ("Low HP", DEFENSIVE_MINER, DroneState(battery=80, hp=35, cargo_amount=5)),
    ("Storm Active", DEFENSIVE_MINER, DroneState(battery=80, hp=100, storm_active=True)),
    ("Hazard Zone", DEFENSIVE_MINER, DroneState(battery=80, hp=75, in_hazard_zone=True)),
    ("Cargo Full", DEFENSIVE_MINER, DroneState(battery=80, hp=100, cargo_amount=10)),
    ("Normal Mining", DEFENSIVE_MINER, DroneState(battery=80, hp=100, cargo_amount=3)),
    ("Resource Fallback", DEFENSIVE_MINER, _resource_fallback_state()),
    (
        "Logical AND",
        "IF battery < 20 AND cargo_full THEN goto_outpost\nmine_nearest(Iron)\n",
        DroneState(battery=15, cargo_amount=10),
    ),
    (
        "Logical OR",
        "IF hp < 50 OR in_hazard_zone THEN goto_outpost\nmine_nearest(Iron)\n",
        DroneState(battery=80, hp=100, in_hazard_zone=True),
    ),
    (
        "Comparison Operators",
        "IF battery < 20 THEN goto_charger\n"
        "IF battery > 80 THEN mine_nearest(Iron)\n"
        "IF battery >= 80 THEN wait(10)\n"
        "IF battery == 80 THEN deposit\n",
        DroneState(battery=80),
    ),
]


def run_scenario(number: int, name: str, script: str, state: DroneState) -> None:
    print("=" * 60)
    print(f" Test {number}: {name}")
    print("=" * 60)
    print(f"\nDrone State: {state}")
    print("\nScript:")
    print(script)

    check = run_check(script, drone_options())
    for diagnostic in check.diagnostics:
        print(format_diagnostic(diagnostic))

    result = run_tick(script, state, parse=check.parse)
    for diagnostic in result.diagnostics:
        if diagnostic not in check.diagnostics:
            print(format_diagnostic(diagnostic))
    print("\nExecution Log:")
    for line in result.trace:
        print(f"  {line}")
    print()


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    for number, (name, script, state) in enumerate(SCENARIOS, start=1):
        run_scenario(number, name, script, state)


if __name__ == "__main__":
    main()
