from __future__ import annotations

import logging

from animeclash.errors import DeadFighterError, InvalidPowerError, SameFighterError
from animeclash.fighter import Fighter

logger = logging.getLogger(__name__)


def validate_for_battle(a: Fighter, b: Fighter) -> None:
    """Raise a :class:`~animeclash.errors.BattleError` if ``a`` and ``b`` may not fight.

    Checks run in priority order: identity, then liveness, then power.
    """

    pair = (a.name, b.name)
    if a.name == b.name:
        logger.debug("rejected %s vs %s: same fighter", *pair)
        raise SameFighterError(f"{a.name} cannot fight itself")
    if a.hp == 0 or b.hp == 0:
        logger.debug("rejected %s vs %s: dead fighter", *pair)
        raise DeadFighterError(f"{a.name} vs {b.name}: a fighter has no hp left")
    if a.power <= 0 or b.power <= 0:
        logger.debug("rejected %s vs %s: invalid power", *pair)
        raise InvalidPowerError(f"{a.name} vs {b.name}: power must be positive")
