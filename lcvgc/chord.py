"""Chord suffixes and expansion of chords into MIDI note numbers."""

from __future__ import annotations

from enum import Enum

from lcvgc.note import NoteName, note_number

__all__ = ["ChordSuffix", "chord_intervals", "chord_notes"]


class ChordSuffix(Enum):
    """Chord quality following the root note."""

    Maj = "maj"
    Min = "min"
    Maj7 = "maj7"
    Min7 = "min7"
    Dom7 = "7"
    Dim = "dim"
    Dim7 = "dim7"
    Aug = "aug"
    Min7b5 = "m7b5"
    MinMaj7 = "mmaj7"
    Sus4 = "sus4"
    Sus2 = "sus2"
    Sixth = "6"
    Min6 = "m6"
    Ninth = "9"
    Min9 = "m9"
    Add9 = "add9"
    Thirteenth = "13"
    Min13 = "m13"


_INTERVALS: dict[ChordSuffix, tuple[int, ...]] = {
    ChordSuffix.Maj: (0, 4, 7),
    ChordSuffix.Min: (0, 3, 7),
    ChordSuffix.Maj7: (0, 4, 7, 11),
    ChordSuffix.Min7: (0, 3, 7, 10),
    ChordSuffix.Dom7: (0, 4, 7, 10),
    ChordSuffix.Dim: (0, 3, 6),
    ChordSuffix.Dim7: (0, 3, 6, 9),
    ChordSuffix.Aug: (0, 4, 8),
    ChordSuffix.Min7b5: (0, 3, 6, 10),
    ChordSuffix.MinMaj7: (0, 3, 7, 11),
    ChordSuffix.Sus4: (0, 5, 7),
    ChordSuffix.Sus2: (0, 2, 7),
    ChordSuffix.Sixth: (0, 4, 7, 9),
    ChordSuffix.Min6: (0, 3, 7, 9),
    ChordSuffix.Ninth: (0, 4, 7, 10, 14),
    ChordSuffix.Min9: (0, 3, 7, 10, 14),
    ChordSuffix.Add9: (0, 4, 7, 14),
    ChordSuffix.Thirteenth: (0, 4, 7, 10, 14, 21),
    ChordSuffix.Min13: (0, 3, 7, 10, 14, 21),
}


def chord_intervals(suffix: ChordSuffix) -> list[int]:
    """Return the semitone offsets from the root for a chord suffix."""
    return list(_INTERVALS[suffix])


def chord_notes(root: NoteName, octave: int, suffix: ChordSuffix) -> list[int]:
    """Return MIDI note numbers of a chord; notes above 127 become 127."""
    base = note_number(root, octave)
    return [min(base + interval, 127) for interval in _INTERVALS[suffix]]