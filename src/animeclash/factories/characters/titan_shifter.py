from __future__ import annotations

from esper import World

from animeclash.components.specialization import TitanForm
from animeclash.components.universe import Universe
from .common import create_character


def create_titan_shifter(
    world: World,
    *,
    name: str,
    hp: int,
    power: int,
    titan_form: str,
    shield: int = 0,
) -> int:
    """Spawn a titan shifter. Always from Attack on Titan."""

    return create_character(
        world,
        name=name,
        hp=hp,
        power=power,
        universe=Universe.ATTACK_ON_TITAN,
        shield=shield,
        extra_components=(TitanForm(name=titan_form),),
    )
