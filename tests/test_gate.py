import pytest

from lcvgc.gate import GateResult, calculate_gate, note_duration_ms


def test_note_duration_quarter_at_120bpm():
    assert note_duration_ms(120.0, 4, False) == 500


def test_note_duration_eighth_at_120bpm():
    assert note_duration_ms(120.0, 8, False) == 250


def test_note_duration_dotted_quarter_at_120bpm():
    assert note_duration_ms(120.0, 4, True) == 750


def test_note_duration_whole_at_60bpm():
    assert note_duration_ms(60.0, 1, False) == 4000


def test_gate_80_percent():
    assert calculate_gate(500, 80) == GateResult(on_duration_ms=400, off_duration_ms=100)


def test_gate_100_percent_legato():
    assert calculate_gate(500, 100) == GateResult(on_duration_ms=500, off_duration_ms=0)


def test_gate_minimum_off_guarantee():
    assert calculate_gate(100, 98) == GateResult(on_duration_ms=95, off_duration_ms=5)


def test_gate_very_short_duration():
    assert calculate_gate(10, 80) == GateResult(on_duration_ms=5, off_duration_ms=5)


def test_gate_shorter_than_minimum_off():
    assert calculate_gate(3, 50) == GateResult(on_duration_ms=0, off_duration_ms=5)


def test_gate_above_100_rejected():
    with pytest.raises(ValueError):
        calculate_gate(500, 150)