from typing import Callable, Dict

from blinker import Signal

Handler = Callable[..., None]


class EventBus:
    """Named blinker signals. Handlers receive ``(sender, **payload)``."""

    def __init__(self) -> None:
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn: Handler) -> Handler:
        sig = self._signals.setdefault(name, Signal(name))
        # Strong reference: systems are often constructed without being stored.
        sig.connect(fn, weak=False)
        return fn

    def emit(self, name: str, **payload) -> None:
        sig = self._signals.get(name)
        if sig is not None:
            sig.send(self, **payload)


# ============================================================================
# HEALTH & DAMAGE
# ============================================================================
EVENT_HEALTH_DAMAGE = "health_damage"      # payload: world=World, source_owner=int|None, target_entity=int, amount=int, reason=str
EVENT_HEALTH_CHANGED = "health_changed"    # payload: world=World, entity=int, current=int, max_hp=int, delta=int, taken=int, reason=str
EVENT_SHIELD_ABSORBED = "shield_absorbed"  # payload: world=World, entity=int, absorbed=int, remaining=int


# ============================================================================
# ROSTER & STATUS
# ============================================================================
EVENT_FIGHTER_STATUS = "fighter_status"    # payload: world=World, entity=int, name=str, hp=int, power=int, shield=int, universe=Universe


# ============================================================================
# COMBAT
# ============================================================================
EVENT_BATTLE_STARTED = "battle_started"    # payload: first_entity=int|None, second_entity=int|None, first_name=str, second_name=str
EVENT_ROUND_STARTED = "round_started"      # payload: round_number=int
EVENT_BATTLE_ENDED = "battle_ended"        # payload: winner_name=str, rounds=int
