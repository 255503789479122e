"""Scale types and the diatonic chords built on each degree of a scale."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from lcvgc.note import NoteName

__all__ = [
    "ScaleType",
    "DiatonicChord",
    "scale_intervals",
    "note_to_semitone",
    "semitone_to_note",
    "diatonic_chords",
]


class ScaleType(Enum):
    """Kind of seven-note scale."""

    Major = "major"
    Minor = "minor"
    HarmonicMinor = "harmonic_minor"
    MelodicMinor = "melodic_minor"
    Dorian = "dorian"
    Phrygian = "phrygian"
    Lydian = "lydian"
    Mixolydian = "mixolydian"
    Locrian = "locrian"


@dataclass(frozen=True)
class DiatonicChord:
    """The triad on one degree of a scale."""

    degree: int
    root: NoteName
    quality: str
    label: str
    detail: str


_INTERVALS: dict[ScaleType, tuple[int, ...]] = {
    ScaleType.Major: (0, 2, 4, 5, 7, 9, 11),
    ScaleType.Minor: (0, 2, 3, 5, 7, 8, 10),
    ScaleType.HarmonicMinor: (0, 2, 3, 5, 7, 8, 11),
    ScaleType.MelodicMinor: (0, 2, 3, 5, 7, 9, 11),
    ScaleType.Dorian: (0, 2, 3, 5, 7, 9, 10),
    ScaleType.Phrygian: (0, 1, 3, 5, 7, 8, 10),
    ScaleType.Lydian: (0, 2, 4, 6, 7, 9, 11),
    ScaleType.Mixolydian: (0, 2, 4, 5, 7, 9, 10),
    ScaleType.Locrian: (0, 1, 3, 5, 6, 8, 10),
}

_SHARP_NOTES = (
    NoteName.C,
    NoteName.Cs,
    NoteName.D,
    NoteName.Ds,
    NoteName.E,
    NoteName.F,
    NoteName.Fs,
    NoteName.G,
    NoteName.Gs,
    NoteName.A,
    NoteName.As,
    NoteName.B,
)

_DISPLAY = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")

_QUALITIES = {
    (4, 3): "",
    (3, 4): "m",
    (3, 3): "dim",
    (4, 4): "aug",
}

_QUALITY_NAMES = {
    "": "major",
    "m": "minor",
    "dim": "diminished",
    "aug": "augmented",
}

_DEGREE_LABELS = ("I", "II", "III", "IV", "V", "VI", "VII")


def scale_intervals(scale_type: ScaleType) -> tuple[int, ...]:
    """Return the semitone offsets of the seven scale degrees."""
    return _INTERVALS[scale_type]


def note_to_semitone(note: NoteName) -> int:
    """Return the semitone (0-11) of a note name."""
    return note.semitone


def semitone_to_note(semitone: int) -> NoteName:
    """Return the sharp-spelled note name of a semitone, taken modulo 12."""
    return _SHARP_NOTES[semitone % 12]


def diatonic_chords(root: NoteName, scale_type: ScaleType) -> list[DiatonicChord]:
    """Return the seven triads built on the degrees of a scale."""
    intervals = scale_intervals(scale_type)
    root_semi = note_to_semitone(root)
    chords = []
    for i, (first, degree_label) in enumerate(zip(intervals, _DEGREE_LABELS)):
        third = intervals[(i + 2) % 7]
        fifth = intervals[(i + 4) % 7]
        steps = ((third - first) % 12, (fifth - third) % 12)
        quality = _QUALITIES.get(steps, "")
        chord_semi = (root_semi + first) % 12
        chords.append(
            DiatonicChord(
                degree=i + 1,
                root=semitone_to_note(chord_semi),
                quality=quality,
                label=f"{_DISPLAY[chord_semi]}{quality}",
                detail=f"{degree_label} - {_QUALITY_NAMES[quality]}",
            )
        )
    return chords