from __future__ import annotations

from typing import Iterable

from esper import World

from animeclash.components.character import Character
from animeclash.components.health import Health
from animeclash.components.power import Power
from animeclash.components.shield import Shield
from animeclash.components.universe import Universe


def create_character(
    world: World,
    *,
    name: str,
    hp: int,
    power: int,
    universe: Universe,
    shield: int = 0,
    extra_components: Iterable[object] = (),
) -> int:
    """Spawn a plain fighter entity; specialisations pass extra components."""

    return world.create_entity(
        Character(name=name, universe=universe),
        Health(current=hp, max_hp=hp),
        Power(value=power),
        Shield(shield),
        *extra_components,
    )
