from __future__ import annotations

from typing import Callable, Protocol


class BattleObserver(Protocol):
    """Receives battle lifecycle notifications from the arena."""

    def on_battle_start(self, name_a: str, name_b: str) -> None: ...

    def on_battle_end(self, winner_name: str) -> None: ...


class BattleLogger:
    """Observer that writes battle start and end to the console."""

    def __init__(self, write: Callable[[str], None] = print) -> None:
        self._write = write

    def on_battle_start(self, name_a: str, name_b: str) -> None:
        self._write(f"\nBattle started: {name_a} vs {name_b}")

    def on_battle_end(self, winner_name: str) -> None:
        self._write(f"Winner: {winner_name}")
