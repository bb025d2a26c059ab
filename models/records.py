"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Sensor:
    """A registered sensor and its latest reading."""

    id: int
    name: str
    type: str
    value: float
