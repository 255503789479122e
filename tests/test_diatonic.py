import pytest

from lcvgc.diatonic import (
    ScaleType,
    diatonic_chords,
    note_to_semitone,
    scale_intervals,
    semitone_to_note,
)
from lcvgc.note import NoteName


def test_scale_intervals_major():
    assert tuple(scale_intervals(ScaleType.Major)) == (0, 2, 4, 5, 7, 9, 11)


def test_scale_intervals_minor():
    assert tuple(scale_intervals(ScaleType.Minor)) == (0, 2, 3, 5, 7, 8, 10)


def test_dorian_intervals():
    assert tuple(scale_intervals(ScaleType.Dorian)) == (0, 2, 3, 5, 7, 9, 10)


@pytest.mark.parametrize(
    "note, expected",
    [(NoteName.C, 0), (NoteName.Cs, 1), (NoteName.B, 11), (NoteName.Eb, 3)],
)
def test_note_to_semitone(note, expected):
    assert note_to_semitone(note) == expected


@pytest.mark.parametrize(
    "semitone, expected",
    [(0, NoteName.C), (1, NoteName.Cs), (11, NoteName.B), (13, NoteName.Cs)],
)
def test_semitone_to_note(semitone, expected):
    assert semitone_to_note(semitone) == expected


def test_c_major_diatonic_count():
    assert len(diatonic_chords(NoteName.C, ScaleType.Major)) == 7


def test_c_major_first_chord():
    chords = diatonic_chords(NoteName.C, ScaleType.Major)
    assert chords[0].label == "C"
    assert chords[0].quality == ""
    assert chords[0].degree == 1


def test_c_major_second_chord_dm():
    chords = diatonic_chords(NoteName.C, ScaleType.Major)
    assert chords[1].label == "Dm"
    assert chords[1].quality == "m"
    assert chords[1].detail == "II - minor"


def test_c_major_all_labels():
    labels = [c.label for c in diatonic_chords(NoteName.C, ScaleType.Major)]
    assert labels == ["C", "Dm", "Em", "F", "G", "Am", "Bdim"]


def test_a_minor_first_chord():
    chords = diatonic_chords(NoteName.A, ScaleType.Minor)
    assert chords[0].label == "Am"
    assert chords[0].quality == "m"


def test_harmonic_minor_has_augmented_third():
    chords = diatonic_chords(NoteName.A, ScaleType.HarmonicMinor)
    assert chords[2].label == "Caug"
    assert chords[2].detail == "III - augmented"


def test_diatonic_always_7():
    assert len(diatonic_chords(NoteName.Fs, ScaleType.Lydian)) == 7


def test_flat_root_spelled_with_sharps():
    chords = diatonic_chords(NoteName.Eb, ScaleType.Major)
    assert chords[0].root == NoteName.Ds
    assert chords[0].label == "D#"