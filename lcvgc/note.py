"""Note names and conversion to MIDI note numbers."""

from __future__ import annotations

from enum import Enum

__all__ = ["NoteName", "note_number"]


class NoteName(Enum):
    """A pitch class spelled with a sharp, a flat or neither."""

    C = "c"
    Cs = "c#"
    Db = "db"
    D = "d"
    Ds = "d#"
    Eb = "eb"
    E = "e"
    F = "f"
    Fs = "f#"
    Gb = "gb"
    G = "g"
    Gs = "g#"
    Ab = "ab"
    A = "a"
    As = "a#"
    Bb = "bb"
    B = "b"

    @property
    def semitone(self) -> int:
        """Semitones above C (0-11); enharmonic spellings share a value."""
        return _SEMITONES[self]


_SEMITONES = {
    NoteName.C: 0,
    NoteName.Cs: 1,
    NoteName.Db: 1,
    NoteName.D: 2,
    NoteName.Ds: 3,
    NoteName.Eb: 3,
    NoteName.E: 4,
    NoteName.F: 5,
    NoteName.Fs: 6,
    NoteName.Gb: 6,
    NoteName.G: 7,
    NoteName.Gs: 8,
    NoteName.Ab: 8,
    NoteName.A: 9,
    NoteName.As: 10,
    NoteName.Bb: 10,
    NoteName.B: 11,
}


def note_number(name: NoteName, octave: int) -> int:
    """Return the MIDI note number for a note name and octave.

    C4 is 60; the formula is ``(octave + 1) * 12 + semitone``.
    The result is not clamped, so B9 gives 131.
    """
    return (octave + 1) * 12 + name.semitone