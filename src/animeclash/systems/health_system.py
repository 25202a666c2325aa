import logging

from esper import World

from animeclash.components.health import Health
from animeclash.components.shield import Shield
from animeclash.events.bus import (
    EventBus,
    EVENT_HEALTH_CHANGED,
    EVENT_HEALTH_DAMAGE,
    EVENT_SHIELD_ABSORBED,
)

logger = logging.getLogger(__name__)


class HealthSystem:
    """Applies incoming damage to fighters of one world.

    Subscribes to EVENT_HEALTH_DAMAGE and only handles events whose
    ``world`` is its own, since entity ids repeat across worlds sharing a
    bus. Damage is soaked by the target's Shield first; whatever gets
    through is taken off Health, which never drops below zero. Emits
    EVENT_SHIELD_ABSORBED when the shield soaked anything and
    EVENT_HEALTH_CHANGED after every hit, including zero-damage ones.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_HEALTH_DAMAGE, self.on_health_damage)

    def on_health_damage(self, sender, **kwargs):
        if kwargs.get('world') is not self.world:
            return
        target_entity = kwargs.get('target_entity')
        amount = kwargs.get('amount', 0)
        source_owner = kwargs.get('source_owner')
        reason = kwargs.get('reason', 'unknown')

        if target_entity is None or amount < 0:
            return

        try:
            health = self.world.component_for_entity(target_entity, Health)
        except KeyError:
            return

        remaining = amount
        try:
            shield = self.world.component_for_entity(target_entity, Shield)
        except KeyError:
            shield = None
        if shield is not None:
            absorbed = shield.absorb(remaining)
            remaining -= absorbed
            if absorbed > 0:
                self.event_bus.emit(
                    EVENT_SHIELD_ABSORBED,
                    world=self.world,
                    entity=target_entity,
                    absorbed=absorbed,
                    remaining=shield.points,
                )

        old_hp = health.current
        delta = health.lose(remaining)
        logger.debug(
            "entity %s took %d of %d damage (%s): hp %d -> %d",
            target_entity, remaining, amount, reason, old_hp, health.current,
        )

        self.event_bus.emit(
            EVENT_HEALTH_CHANGED,
            world=self.world,
            entity=target_entity,
            current=health.current,
            max_hp=health.max_hp,
            delta=delta,
            taken=remaining,
            reason=reason,
            source_owner=source_owner,
        )


def ensure_health_system(world: World, event_bus: EventBus) -> HealthSystem:
    """Return the health system of ``world`` on ``event_bus``, installing it if missing."""

    system = getattr(world, "health_system", None)
    if system is None or system.event_bus is not event_bus:
        system = HealthSystem(world, event_bus)
        setattr(world, "health_system", system)
    return system
