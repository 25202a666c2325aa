from __future__ import annotations

from esper import World

from animeclash.components.healable import Healable


def heal_amount(world: World, entity: int) -> int | None:
    """Return how much ``entity`` heals for, or ``None`` without the capability."""

    try:
        healable = world.component_for_entity(entity, Healable)
    except KeyError:
        return None
    return healable.amount
