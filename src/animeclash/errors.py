from __future__ import annotations

from enum import Enum, auto


class BattleErrorKind(Enum):
    SAME_FIGHTER = auto()
    DEAD_FIGHTER = auto()
    INVALID_POWER = auto()


class BattleError(ValueError):
    """A pairing rejected before the fight starts."""

    kind: BattleErrorKind


class SameFighterError(BattleError):
    kind = BattleErrorKind.SAME_FIGHTER


class DeadFighterError(BattleError):
    kind = BattleErrorKind.DEAD_FIGHTER


class InvalidPowerError(BattleError):
    kind = BattleErrorKind.INVALID_POWER
