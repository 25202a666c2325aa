import random

from esper import World

from .events.bus import EventBus
from animeclash.components.roster import Roster
from animeclash.fighter import FighterHandle
from animeclash.systems.health_system import ensure_health_system


def create_world(
    event_bus: EventBus,
    *,
    rng: random.Random | None = None,
) -> World:
    """Create an empty world with its damage pipeline wired to ``event_bus``.

    Several worlds may share one bus; damage events carry their world.
    """
    world = World()
    setattr(world, "random", rng or random.Random())
    ensure_health_system(world, event_bus)
    return world


def roster_fighters(world: World, event_bus: EventBus) -> list[FighterHandle]:
    """Fighter handles for the first Roster in ``world``, in roster order."""
    for _, roster in world.get_component(Roster):
        return [FighterHandle(world, event_bus, entity) for entity in roster.entities]
    return []
