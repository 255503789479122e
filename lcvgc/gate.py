"""Note durations and gate on/off timing."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["GateResult", "note_duration_ms", "calculate_gate"]

_MIN_OFF_MS = 5


@dataclass(frozen=True)
class GateResult:
    """How long a note sounds and how long it stays silent, in milliseconds."""

    on_duration_ms: int
    off_duration_ms: int


def note_duration_ms(bpm: float, duration: int, dotted: bool) -> int:
    """Return the length in milliseconds of a note value at a tempo.

    ``duration`` is the note denominator (1 whole, 4 quarter, 16 sixteenth);
    a dotted note lasts 1.5 times as long. The result is truncated.
    """
    quarter_ms = 60000.0 / bpm
    ms = quarter_ms * (4.0 / duration)
    if dotted:
        ms *= 1.5
    return int(ms)


def calculate_gate(note_duration_ms: int, gate_percent: int) -> GateResult:
    """Split a note duration into on and off periods by a gate percentage.

    100 percent is legato with no off period. Otherwise the off period is
    at least 5 ms.
    """
    if not 0 <= gate_percent <= 100:
        raise ValueError(f"gate percentage out of range 0-100: {gate_percent}")
    if gate_percent == 100:
        return GateResult(note_duration_ms, 0)

    on = note_duration_ms * gate_percent // 100
    off = note_duration_ms - on
    if off < _MIN_OFF_MS:
        return GateResult(max(note_duration_ms - _MIN_OFF_MS, 0), _MIN_OFF_MS)
    return GateResult(on, off)