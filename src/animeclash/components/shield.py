from __future__ import annotations

from animeclash.constants import SHIELD_MAX, SHIELD_MIN


class Shield:
    """Damage-absorption buffer bounded to ``[SHIELD_MIN, SHIELD_MAX]``.

    The raw value is private; writes go through :attr:`points`, which drops
    out-of-range assignments and keeps the previous value.
    """

    __slots__ = ("_points",)

    def __init__(self, points: int = 0) -> None:
        self._points = SHIELD_MIN
        self.points = points

    @property
    def points(self) -> int:
        return self._points

    @points.setter
    def points(self, value: int) -> None:
        if SHIELD_MIN <= value <= SHIELD_MAX:
            self._points = value

    def absorb(self, amount: int) -> int:
        """Soak up to ``amount`` damage and return how much was absorbed."""
        absorbed = min(self._points, max(0, amount))
        self._points -= absorbed
        return absorbed

    def __repr__(self) -> str:
        return f"Shield(points={self._points})"
