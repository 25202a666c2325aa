"""Generic picking and functional views over a roster of fighters.

Every helper returns a new list; the input sequence is never reordered or
mutated.
"""
from __future__ import annotations

import random
from typing import Callable, List, Sequence, TypeVar

from animeclash.constants import HEALTHY_HP_THRESHOLD
from animeclash.fighter import Fighter

T = TypeVar("T")
R = TypeVar("R")
F = TypeVar("F", bound=Fighter)


def pick_random(items: Sequence[T], rng: random.Random | None = None) -> T | None:
    """Uniformly pick one element of ``items``; ``None`` when it is empty."""

    if not items:
        return None
    chooser = rng or random
    return chooser.choice(items)


def map_roster(fighters: Sequence[F], fn: Callable[[F], R]) -> List[R]:
    return [fn(fighter) for fighter in fighters]


def describe_roster(fighters: Sequence[Fighter]) -> List[str]:
    return map_roster(fighters, lambda f: f"{f.name} (HP: {f.hp})")


def filter_healthy(fighters: Sequence[F], threshold: int = HEALTHY_HP_THRESHOLD) -> List[F]:
    """Fighters with hp strictly above ``threshold``."""
    return [fighter for fighter in fighters if fighter.hp > threshold]


def sort_by_power(fighters: Sequence[F]) -> List[F]:
    """Strongest first; fighters with equal power keep their roster order."""
    return sorted(fighters, key=lambda f: f.power, reverse=True)
