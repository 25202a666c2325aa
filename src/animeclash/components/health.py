from dataclasses import dataclass


@dataclass
class Health:
    """Hit points of a fighter. ``current`` never drops below zero.

    ``max_hp`` records the spawn value; it is reported, not enforced.
    """
    current: int
    max_hp: int

    def lose(self, amount: int) -> int:
        """Take ``amount`` off current hp, floored at zero; return the signed change."""
        before = self.current
        self.current = max(0, self.current - max(0, amount))
        return self.current - before
