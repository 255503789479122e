"""Interpolation of MIDI control change values."""

from __future__ import annotations

import math

__all__ = ["interpolate_linear", "interpolate_exponential"]


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _clamp(value: float) -> int:
    return max(0, min(127, _round_half_away(value)))


def _interpolate(start: int, end: int, steps: int, exponent: int) -> list[int]:
    if steps <= 0:
        return []
    if steps == 1:
        return [min(end, 127)]
    span = end - start
    return [
        _clamp(start + span * (i / (steps - 1)) ** exponent) for i in range(steps)
    ]


def interpolate_linear(start: int, end: int, steps: int) -> list[int]:
    """Interpolate linearly from ``start`` to ``end`` in ``steps`` values.

    Zero steps give an empty list and one step gives ``[end]``; each value
    is rounded and clamped to 0-127.
    """
    return _interpolate(start, end, steps, 1)


def interpolate_exponential(start: int, end: int, steps: int) -> list[int]:
    """Interpolate along ``start + (end - start) * t**2`` in ``steps`` values.

    Zero steps give an empty list and one step gives ``[end]``; each value
    is rounded and clamped to 0-127.
    """
    return _interpolate(start, end, steps, 2)