from __future__ import annotations

from esper import World

from animeclash.components.healable import Healable
from animeclash.components.specialization import CursedEnergy
from animeclash.components.universe import Universe
from animeclash.constants import SORCERER_HEAL_AMOUNT
from .common import create_character


def create_sorcerer(
    world: World,
    *,
    name: str,
    hp: int,
    power: int,
    cursed_energy: int,
    shield: int = 0,
) -> int:
    """Spawn a jujutsu sorcerer, which can also heal."""

    return create_character(
        world,
        name=name,
        hp=hp,
        power=power,
        universe=Universe.JUJUTSU_KAISEN,
        shield=shield,
        extra_components=(
            CursedEnergy(amount=cursed_energy),
            Healable(amount=SORCERER_HEAL_AMOUNT),
        ),
    )
