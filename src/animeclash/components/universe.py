"""Narrative settings a character can belong to."""
from enum import Enum, auto


class Universe(Enum):
    """Closed catalogue of universes with their display titles."""
    ATTACK_ON_TITAN = auto()
    JUJUTSU_KAISEN = auto()
    DEMON_SLAYER = auto()

    @property
    def title(self) -> str:
        return _TITLES[self]


_TITLES = {
    Universe.ATTACK_ON_TITAN: "Attack on Titan",
    Universe.JUJUTSU_KAISEN: "Jujutsu Kaisen",
    Universe.DEMON_SLAYER: "Demon Slayer",
}
