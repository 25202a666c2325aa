from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Power:
    """Base attack strength before any specialisation bonus."""

    value: int
