from __future__ import annotations

from typing import Callable

from esper import World

from animeclash.components.character import Character
from animeclash.events.bus import (
    EventBus,
    EVENT_FIGHTER_STATUS,
    EVENT_HEALTH_CHANGED,
    EVENT_ROUND_STARTED,
    EVENT_SHIELD_ABSORBED,
)


def format_status(name: str, hp: int, power: int, shield: int, universe_title: str) -> str:
    return f"Name: {name} | HP: {hp} | Power: {power} | Shield: {shield} | Universe: {universe_title}"


class ConsoleReportSystem:
    """Turns combat and roster events into console transcript lines."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        write: Callable[[str], None] = print,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._write = write
        self.event_bus.subscribe(EVENT_SHIELD_ABSORBED, self._on_shield_absorbed)
        self.event_bus.subscribe(EVENT_HEALTH_CHANGED, self._on_health_changed)
        self.event_bus.subscribe(EVENT_FIGHTER_STATUS, self._on_fighter_status)
        self.event_bus.subscribe(EVENT_ROUND_STARTED, self._on_round_started)

    def _on_shield_absorbed(self, sender, **payload) -> None:
        if not self._ours(payload):
            return
        name = self._name_of(payload.get("entity"))
        self._write(
            f"{name}'s shield absorbed {payload.get('absorbed', 0)}. "
            f"Shield now: {payload.get('remaining', 0)}"
        )

    def _on_health_changed(self, sender, **payload) -> None:
        if not self._ours(payload):
            return
        name = self._name_of(payload.get("entity"))
        self._write(f"{name} took {payload.get('taken', 0)} damage. HP now: {payload.get('current', 0)}")

    def _on_fighter_status(self, sender, **payload) -> None:
        if not self._ours(payload):
            return
        universe = payload.get("universe")
        self._write(
            format_status(
                payload.get("name", "?"),
                payload.get("hp", 0),
                payload.get("power", 0),
                payload.get("shield", 0),
                universe.title if universe is not None else "-",
            )
        )

    def _on_round_started(self, sender, **payload) -> None:
        self._write(f"\nRound {payload.get('round_number')}:")

    def _ours(self, payload: dict) -> bool:
        return payload.get("world", self.world) is self.world

    def _name_of(self, entity: int | None) -> str:
        if entity is None:
            return "?"
        try:
            return self.world.component_for_entity(entity, Character).name
        except KeyError:
            return f"entity {entity}"
