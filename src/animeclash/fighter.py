"""The fighter capability and its ECS-backed implementation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from esper import World

from animeclash.components.character import Character
from animeclash.components.health import Health
from animeclash.components.power import Power
from animeclash.components.shield import Shield
from animeclash.components.universe import Universe
from animeclash.events.bus import EventBus, EVENT_FIGHTER_STATUS, EVENT_HEALTH_DAMAGE
from animeclash.systems.attack_system import attack_value
from animeclash.systems.health_system import ensure_health_system
from animeclash.utils.healing import heal_amount


@runtime_checkable
class Fighter(Protocol):
    """Anything that can attack and take damage can enter the arena."""

    @property
    def name(self) -> str: ...

    @property
    def hp(self) -> int: ...

    @hp.setter
    def hp(self, value: int) -> None: ...

    @property
    def power(self) -> int: ...

    def attack(self) -> int: ...

    def take_damage(self, amount: int) -> None: ...


@dataclass
class FighterHandle:
    """Fighter view over a character entity living in an esper world.

    Reads go straight to the entity's components. Damage is routed through
    the event bus so the health system applies shields and clamping and
    listeners see the result.
    """

    world: World
    event_bus: EventBus
    entity: int

    @property
    def character(self) -> Character:
        return self.world.component_for_entity(self.entity, Character)

    @property
    def name(self) -> str:
        return self.character.name

    @property
    def universe(self) -> Universe:
        return self.character.universe

    @property
    def hp(self) -> int:
        return self.world.component_for_entity(self.entity, Health).current

    @hp.setter
    def hp(self, value: int) -> None:
        health = self.world.component_for_entity(self.entity, Health)
        health.current = max(0, value)

    @property
    def power(self) -> int:
        return self.world.component_for_entity(self.entity, Power).value

    @property
    def shield(self) -> int:
        return self._shield().points

    @shield.setter
    def shield(self, value: int) -> None:
        self._shield().points = value

    def attack(self) -> int:
        return attack_value(self.world, self.entity)

    def take_damage(self, amount: int) -> None:
        ensure_health_system(self.world, self.event_bus)
        self.event_bus.emit(
            EVENT_HEALTH_DAMAGE,
            world=self.world,
            target_entity=self.entity,
            amount=amount,
            source_owner=None,
            reason="attack",
        )

    def heal(self) -> int | None:
        """Heal amount for this fighter, ``None`` if it cannot heal."""
        return heal_amount(self.world, self.entity)

    def status(self) -> None:
        self.event_bus.emit(
            EVENT_FIGHTER_STATUS,
            world=self.world,
            entity=self.entity,
            name=self.name,
            hp=self.hp,
            power=self.power,
            shield=self.shield,
            universe=self.universe,
        )

    def _shield(self) -> Shield:
        return self.world.component_for_entity(self.entity, Shield)
