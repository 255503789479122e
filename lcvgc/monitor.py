"""Startup listing and polling-based hot-plug detection of MIDI ports."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

from lcvgc.errors import MidiError
from lcvgc.port import list_input_ports, list_ports

__all__ = [
    "PortMonitorConfig",
    "PortSnapshot",
    "collect_ports",
    "detect_changes",
    "log_startup_ports",
    "run_port_monitor",
]

logger = logging.getLogger(__name__)


@dataclass
class PortMonitorConfig:
    """Polling settings for the port monitor."""

    interval_ms: int = 2000


@dataclass(frozen=True)
class PortSnapshot:
    """Names of the MIDI ports present at one moment."""

    output: frozenset[str] = field(default_factory=frozenset)
    input: frozenset[str] = field(default_factory=frozenset)


def collect_ports() -> PortSnapshot | None:
    """Snapshot the current ports, or ``None`` if enumeration fails."""
    try:
        output = list_ports()
        inputs = list_input_ports()
    except MidiError:
        return None
    return PortSnapshot(frozenset(output), frozenset(inputs))


def detect_changes(prev: PortSnapshot, curr: PortSnapshot) -> bool:
    """Log ports connected or disconnected between two snapshots.

    Returns whether anything changed.
    """
    events = [
        ("MIDI出力ポート 接続", curr.output - prev.output),
        ("MIDI出力ポート 切断", prev.output - curr.output),
        ("MIDI入力ポート 接続", curr.input - prev.input),
        ("MIDI入力ポート 切断", prev.input - curr.input),
    ]
    changed = False
    for label, names in events:
        for name in sorted(names):
            logger.info("%s: %s", label, name)
            changed = True
    return changed


def log_startup_ports() -> None:
    """Log the MIDI ports present at startup; enumeration failures log none."""
    try:
        outputs = list_ports()
    except MidiError:
        outputs = []
    try:
        inputs = list_input_ports()
    except MidiError:
        inputs = []

    logger.info("MIDI出力ポート (%d個):", len(outputs))
    for name in outputs:
        logger.info("  out: %s", name)
    logger.info("MIDI入力ポート (%d個):", len(inputs))
    for name in inputs:
        logger.info("  in: %s", name)


async def run_port_monitor(config: PortMonitorConfig) -> None:
    """Poll for port changes forever; stop it by cancelling the task."""
    interval = config.interval_ms / 1000.0
    prev = collect_ports() or PortSnapshot()
    logger.info("MIDIポート監視開始 (間隔: %dms)", config.interval_ms)

    while True:
        await asyncio.sleep(interval)
        curr = collect_ports()
        if curr is None:
            continue
        detect_changes(prev, curr)
        prev = curr