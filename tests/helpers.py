from __future__ import annotations

from esper import World

from animeclash.components.universe import Universe
from animeclash.events.bus import EventBus
from animeclash.factories.characters import create_character
from animeclash.fighter import FighterHandle


def spawn_fighter(
    world: World,
    bus: EventBus,
    name: str,
    *,
    hp: int = 100,
    power: int = 10,
    shield: int = 0,
    universe: Universe = Universe.DEMON_SLAYER,
) -> FighterHandle:
    """Spawn a plain character and wrap it in a handle."""

    entity = create_character(
        world, name=name, hp=hp, power=power, universe=universe, shield=shield
    )
    return FighterHandle(world, bus, entity)


class RecordingObserver:
    """Battle observer that remembers every notification it receives."""

    def __init__(self) -> None:
        self.started: list[tuple[str, str]] = []
        self.ended: list[str] = []

    def on_battle_start(self, name_a: str, name_b: str) -> None:
        self.started.append((name_a, name_b))

    def on_battle_end(self, winner_name: str) -> None:
        self.ended.append(winner_name)
