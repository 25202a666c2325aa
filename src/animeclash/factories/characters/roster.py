from __future__ import annotations

from esper import World

from animeclash.components.roster import Roster
from animeclash.components.universe import Universe
from .common import create_character
from .sorcerer import create_sorcerer
from .titan_shifter import create_titan_shifter


def create_eren(world: World) -> int:
    return create_titan_shifter(
        world, name="Eren", hp=120, power=30, titan_form="Attack Titan", shield=30
    )


def create_gojo(world: World) -> int:
    return create_sorcerer(world, name="Gojo", hp=90, power=25, cursed_energy=100, shield=15)


def create_mikasa(world: World) -> int:
    return create_character(
        world, name="Mikasa", hp=90, power=20, universe=Universe.ATTACK_ON_TITAN
    )


def spawn_default_roster(world: World) -> int:
    """Spawn Eren, Gojo and Mikasa and return the entity holding their Roster."""

    entities = [create_eren(world), create_gojo(world), create_mikasa(world)]
    return world.create_entity(Roster(entities=entities))
