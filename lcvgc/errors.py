"""Errors raised by MIDI port operations."""

from __future__ import annotations

__all__ = [
    "MidiError",
    "PortNotFoundError",
    "MidiConnectionError",
    "MidiSendError",
]


class MidiError(Exception):
    """Base class of MIDI errors; ``detail`` holds the underlying reason."""

    prefix = "MIDIエラー"

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"{self.prefix}: {detail}")


class PortNotFoundError(MidiError):
    """The named MIDI port does not exist."""

    prefix = "MIDIポートが見つかりません"


class MidiConnectionError(MidiError):
    """Opening or enumerating MIDI ports failed."""

    prefix = "MIDI接続エラー"


class MidiSendError(MidiError):
    """Sending a MIDI message failed."""

    prefix = "MIDI送信エラー"