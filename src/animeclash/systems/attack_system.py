"""Attack computation for fighters.

A fighter hits for its base :class:`Power` plus the bonus of its
specialisation. Bonuses live in a table keyed by specialisation component
type, so new fighter kinds plug in by registering a component and a
formula instead of overriding anything.
"""
from __future__ import annotations

from typing import Any, Callable, Dict

from esper import World

from animeclash.components.power import Power
from animeclash.components.specialization import CursedEnergy, TitanForm
from animeclash.constants import CURSED_ENERGY_DIVISOR, TITAN_ATTACK_BONUS

AttackBonus = Callable[[Any], int]

_registry: Dict[type, AttackBonus] = {}


def register_attack_bonus(component_type: type, bonus: AttackBonus) -> None:
    """Register the bonus formula used by entities carrying ``component_type``."""

    if component_type in _registry:
        raise ValueError(f"Attack bonus for '{component_type.__name__}' already registered")
    _registry[component_type] = bonus


def _titan_bonus(form: TitanForm) -> int:
    return TITAN_ATTACK_BONUS


def _cursed_energy_bonus(energy: CursedEnergy) -> int:
    # Truncate toward zero, not floor.
    return int(energy.amount / CURSED_ENERGY_DIVISOR)


register_attack_bonus(TitanForm, _titan_bonus)
register_attack_bonus(CursedEnergy, _cursed_energy_bonus)


def attack_bonus(world: World, entity: int) -> int:
    for component_type, bonus in _registry.items():
        try:
            component = world.component_for_entity(entity, component_type)
        except KeyError:
            continue
        return bonus(component)
    return 0


def attack_value(world: World, entity: int) -> int:
    """Damage ``entity`` deals with one attack."""

    power = world.component_for_entity(entity, Power)
    return power.value + attack_bonus(world, entity)
