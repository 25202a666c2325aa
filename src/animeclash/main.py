"""Entry point for the Anime Clash battle demo.

Sets up the ECS world, event bus and systems, then runs the demo in order:
roster, healing, validation, battle, random picks and roster transforms.
"""
from __future__ import annotations

import argparse
import logging
import random
from typing import Sequence

from animeclash.components.universe import Universe
from animeclash.errors import (
    BattleError,
    DeadFighterError,
    InvalidPowerError,
    SameFighterError,
)
from animeclash.events.bus import EventBus
from animeclash.factories.characters import spawn_default_roster
from animeclash.fighter import FighterHandle
from animeclash.observers import BattleLogger
from animeclash.systems.arena_system import BattleArena
from animeclash.systems.report_system import ConsoleReportSystem
from animeclash.utils.collections import (
    describe_roster,
    filter_healthy,
    pick_random,
    sort_by_power,
)
from animeclash.validation import validate_for_battle
from animeclash.world import create_world, roster_fighters

logger = logging.getLogger(__name__)


def run_battle(arena: BattleArena, a: FighterHandle, b: FighterHandle) -> str | None:
    """Validate the pairing and fight it. Returns the winner, ``None`` if rejected."""
    try:
        validate_for_battle(a, b)
    except DeadFighterError:
        print("Error: dead fighter cannot battle")
    except SameFighterError:
        print("Error: same fighter")
    except InvalidPowerError:
        print("Error: invalid power")
    except BattleError as exc:
        print(f"Error: battle rejected ({exc})")
    else:
        return arena.fight(a, b)
    return None


def run_demo(rng: random.Random | None = None) -> None:
    bus = EventBus()
    world = create_world(bus, rng=rng)
    ConsoleReportSystem(world, bus)

    print(f"Universe catalogue ready: {', '.join(u.title for u in Universe)}")

    spawn_default_roster(world)
    fighters = roster_fighters(world, bus)
    eren, gojo, _ = fighters

    print("\n--- Characters ---")
    for fighter in fighters:
        fighter.status()
        print(f"Attack damage: {fighter.attack()}\n")

    print(f"Healed for: {gojo.heal()}")

    battle_logger = BattleLogger()
    arena = BattleArena(bus, observer=battle_logger)
    run_battle(arena, eren, gojo)

    random_fighter = pick_random(fighters, world.random)
    if random_fighter is not None:
        print(f"\nRandom character: {random_fighter.name}")
    random_universe = pick_random(list(Universe), world.random)
    if random_universe is not None:
        print(f"Random universe: {random_universe.title}")

    print("\nFunctional Programming results:")
    print("map ->", describe_roster(fighters))
    print("filter ->", [f.name for f in filter_healthy(fighters)])
    print("sorted ->", [f"{f.name}: {f.power}" for f in sort_by_power(fighters)])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="anime-clash",
        description="Run the anime character battle demo.",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the random picks")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    rng = random.Random(args.seed) if args.seed is not None else None
    logger.debug("starting demo (seed=%s)", args.seed)
    run_demo(rng)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
