"""Listing, opening and managing MIDI output ports."""

from __future__ import annotations

from typing import Any

import mido

from lcvgc.errors import MidiConnectionError, MidiSendError, PortNotFoundError

__all__ = ["list_ports", "list_input_ports", "connect", "PortManager"]


def list_ports() -> list[str]:
    """Return the names of the available MIDI output ports."""
    try:
        return list(mido.get_output_names())
    except Exception as exc:
        raise MidiConnectionError(str(exc)) from exc


def list_input_ports() -> list[str]:
    """Return the names of the available MIDI input ports."""
    try:
        return list(mido.get_input_names())
    except Exception as exc:
        raise MidiConnectionError(str(exc)) from exc


def connect(port_name: str) -> Any:
    """Open the MIDI output port with exactly this name."""
    if port_name not in list_ports():
        raise PortNotFoundError(port_name)
    try:
        return mido.open_output(port_name)
    except Exception as exc:
        raise MidiConnectionError(str(exc)) from exc


class PortManager:
    """Open MIDI output connections keyed by a logical name."""

    def __init__(self) -> None:
        self._connections: dict[str, Any] = {}

    def connect(self, name: str, port_name: str) -> None:
        """Open ``port_name`` and register it under ``name``."""
        self._connections[name] = connect(port_name)

    def disconnect(self, name: str) -> None:
        """Close the connection for ``name``; unknown names are ignored."""
        conn = self._connections.pop(name, None)
        if conn is not None:
            conn.close()

    def send(self, name: str, msg: bytes) -> None:
        """Send raw MIDI bytes over the connection for ``name``."""
        conn = self._connections.get(name)
        if conn is None:
            raise PortNotFoundError(name)
        try:
            conn.send(mido.Message.from_bytes(list(msg)))
        except Exception as exc:
            raise MidiSendError(str(exc)) from exc

    def is_connected(self, name: str) -> bool:
        """Return whether ``name`` has an open connection."""
        return name in self._connections

    def connected_names(self) -> list[str]:
        """Return the logical names that have open connections."""
        return list(self._connections)