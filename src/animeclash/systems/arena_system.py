from __future__ import annotations

import logging

from animeclash.constants import ROUND_LIMIT
from animeclash.events.bus import (
    EventBus,
    EVENT_BATTLE_ENDED,
    EVENT_BATTLE_STARTED,
    EVENT_ROUND_STARTED,
)
from animeclash.fighter import Fighter
from animeclash.observers import BattleObserver

logger = logging.getLogger(__name__)


class BattleArena:
    """Runs the fixed-round exchange between two fighters.

    ``observer`` is a plain optional reference; the arena never owns it and
    simply skips notifications while it is ``None``. Callers validate the
    pairing beforehand, the arena itself accepts any two fighters.
    """

    def __init__(
        self,
        event_bus: EventBus | None = None,
        *,
        observer: BattleObserver | None = None,
        round_limit: int = ROUND_LIMIT,
    ) -> None:
        self.event_bus = event_bus
        self.observer = observer
        self.round_limit = round_limit

    def fight(self, a: Fighter, b: Fighter) -> str:
        """Fight ``a`` against ``b`` and return the winner's name."""

        if self.observer is not None:
            self.observer.on_battle_start(a.name, b.name)
        self._emit(
            EVENT_BATTLE_STARTED,
            first_entity=getattr(a, "entity", None),
            second_entity=getattr(b, "entity", None),
            first_name=a.name,
            second_name=b.name,
        )

        rounds = 0
        for round_number in range(1, self.round_limit + 1):
            rounds = round_number
            self._emit(EVENT_ROUND_STARTED, round_number=round_number)
            b.take_damage(a.attack())
            if b.hp == 0:
                logger.debug("%s fell in round %d", b.name, round_number)
                break
            a.take_damage(b.attack())
            if a.hp == 0:
                logger.debug("%s fell in round %d", a.name, round_number)
                break

        # Equal hp goes to the first fighter.
        winner = b if b.hp > a.hp else a
        logger.debug("winner %s (%d hp vs %d hp)", winner.name, a.hp, b.hp)

        if self.observer is not None:
            self.observer.on_battle_end(winner.name)
        self._emit(EVENT_BATTLE_ENDED, winner_name=winner.name, rounds=rounds)
        return winner.name

    def _emit(self, name: str, **payload) -> None:
        if self.event_bus is not None:
            self.event_bus.emit(name, **payload)
