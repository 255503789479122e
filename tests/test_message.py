from lcvgc.message import ControlChange, NoteOff, NoteOn, ProgramChange


def test_note_on_ch0():
    assert NoteOn(channel=0, note=60, velocity=100).to_bytes() == bytes([0x90, 60, 100])


def test_note_off_ch0():
    assert NoteOff(channel=0, note=60, velocity=0).to_bytes() == bytes([0x80, 60, 0])


def test_note_on_drum_ch9():
    assert NoteOn(channel=9, note=36, velocity=127).to_bytes() == bytes([0x99, 36, 127])


def test_control_change():
    assert ControlChange(channel=0, cc=74, value=64).to_bytes() == bytes([0xB0, 74, 64])


def test_program_change():
    assert ProgramChange(channel=0, program=0).to_bytes() == bytes([0xC0, 0])


def test_channel_15_boundary():
    assert NoteOn(channel=15, note=60, velocity=100).to_bytes() == bytes([0x9F, 60, 100])


def test_messages_compare_by_value():
    assert NoteOn(1, 60, 100) == NoteOn(1, 60, 100)
    assert NoteOn(1, 60, 100) != NoteOff(1, 60, 100)