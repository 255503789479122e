"""Probability-based decisions on whether drum steps sound."""

from __future__ import annotations

import random
from collections.abc import Sequence

__all__ = ["should_trigger", "apply_probability_mask"]


def should_trigger(probability: int | None, rng: random.Random) -> bool:
    """Decide whether a note sounds.

    ``probability`` is 0-9 meaning 0%-90%; ``None`` means it always sounds.
    """
    if probability is None:
        return True
    if probability == 0:
        return False
    return rng.random() * 100.0 < probability * 10.0


def apply_probability_mask(
    hits_len: int,
    probability: Sequence[int] | None,
    rng: random.Random,
) -> list[bool]:
    """Return, for each of ``hits_len`` steps, whether it sounds.

    Steps beyond the end of ``probability`` always sound, as does every step
    when ``probability`` is ``None``.
    """
    if probability is None:
        return [True] * hits_len
    return [
        should_trigger(probability[i] if i < len(probability) else None, rng)
        for i in range(hits_len)
    ]