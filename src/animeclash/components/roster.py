from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass
class Roster:
    """Ordered fighter entities assembled for the demo."""

    entities: List[int]
