from dataclasses import dataclass

from animeclash.constants import DEFAULT_HEAL_AMOUNT


@dataclass(frozen=True, slots=True)
class Healable:
    """Opt-in healing capability. Types override the amount at spawn time."""

    amount: int = DEFAULT_HEAL_AMOUNT
