"""MIDI channel messages and their wire encoding."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["NoteOn", "NoteOff", "ControlChange", "ProgramChange"]


@dataclass(frozen=True)
class NoteOn:
    """Start sounding a note."""

    channel: int
    note: int
    velocity: int

    def to_bytes(self) -> bytes:
        """Encode as a three-byte MIDI message."""
        return bytes((0x90 | self.channel, self.note, self.velocity))


@dataclass(frozen=True)
class NoteOff:
    """Stop sounding a note."""

    channel: int
    note: int
    velocity: int

    def to_bytes(self) -> bytes:
        """Encode as a three-byte MIDI message."""
        return bytes((0x80 | self.channel, self.note, self.velocity))


@dataclass(frozen=True)
class ControlChange:
    """Set a controller to a value."""

    channel: int
    cc: int
    value: int

    def to_bytes(self) -> bytes:
        """Encode as a three-byte MIDI message."""
        return bytes((0xB0 | self.channel, self.cc, self.value))


@dataclass(frozen=True)
class ProgramChange:
    """Select an instrument program."""

    channel: int
    program: int

    def to_bytes(self) -> bytes:
        """Encode as a two-byte MIDI message."""
        return bytes((0xC0 | self.channel, self.program))