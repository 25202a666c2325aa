"""Character factory helpers."""

from .common import create_character
from .roster import (
    create_eren,
    create_gojo,
    create_mikasa,
    spawn_default_roster,
)
from .sorcerer import create_sorcerer
from .titan_shifter import create_titan_shifter

__all__ = [
    "create_character",
    "create_titan_shifter",
    "create_sorcerer",
    "create_eren",
    "create_gojo",
    "create_mikasa",
    "spawn_default_roster",
]
