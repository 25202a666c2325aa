from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TitanForm:
    """Marks a titan shifter and names the titan it turns into."""

    name: str


@dataclass(frozen=True, slots=True)
class CursedEnergy:
    """Cursed energy reserve of a sorcerer; feeds the attack bonus."""

    amount: int
