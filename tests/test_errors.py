import pytest

from lcvgc.errors import (
    MidiConnectionError,
    MidiError,
    MidiSendError,
    PortNotFoundError,
)


def test_port_not_found_message():
    assert str(PortNotFoundError("synth")) == "MIDIポートが見つかりません: synth"


def test_connection_error_message():
    assert str(MidiConnectionError("busy")) == "MIDI接続エラー: busy"


def test_send_error_message():
    assert str(MidiSendError("closed")) == "MIDI送信エラー: closed"


@pytest.mark.parametrize("cls", [PortNotFoundError, MidiConnectionError, MidiSendError])
def test_subclasses_carry_detail_as_midi_error(cls):
    err = cls("reason")
    assert isinstance(err, MidiError)
    assert err.detail == "reason"
    assert str(err).endswith(": reason")