from dataclasses import dataclass

from animeclash.components.universe import Universe


@dataclass(frozen=True)
class Character:
    """Identifies a fighter. ``name`` doubles as its identity in comparisons."""
    name: str
    universe: Universe
