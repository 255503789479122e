"""Drum hit symbols and MIDI velocity values."""

from __future__ import annotations

from enum import Enum

__all__ = ["HitSymbol", "hit_velocity", "clamp_velocity"]


class HitSymbol(Enum):
    """Kind of hit in a drum step pattern."""

    Normal = "normal"
    Accent = "accent"
    Ghost = "ghost"
    Rest = "rest"


_VELOCITIES = {
    HitSymbol.Normal: 100,
    HitSymbol.Accent: 127,
    HitSymbol.Ghost: 40,
    HitSymbol.Rest: 0,
}


def hit_velocity(hit: HitSymbol) -> int:
    """Return the MIDI velocity for a hit symbol."""
    return _VELOCITIES[hit]


def clamp_velocity(v: int) -> int:
    """Clamp a velocity to the range 0-127."""
    return max(0, min(v, 127))