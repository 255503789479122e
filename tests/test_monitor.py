import asyncio
import logging
from unittest.mock import patch

import pytest

from lcvgc.monitor import (
    PortMonitorConfig,
    PortSnapshot,
    collect_ports,
    detect_changes,
    log_startup_ports,
    run_port_monitor,
)


def test_default_config_interval():
    assert PortMonitorConfig().interval_ms == 2000


def test_detect_changes_no_change():
    snap = PortSnapshot(frozenset({"Port A", "Port B"}), frozenset({"Port C"}))
    assert detect_changes(snap, snap) is False


def test_detect_changes_output_connected():
    prev = PortSnapshot(frozenset({"Port A"}), frozenset())
    curr = PortSnapshot(frozenset({"Port A", "Port B"}), frozenset())
    assert detect_changes(prev, curr) is True


def test_detect_changes_output_disconnected():
    prev = PortSnapshot(frozenset({"Port A", "Port B"}), frozenset())
    curr = PortSnapshot(frozenset({"Port A"}), frozenset())
    assert detect_changes(prev, curr) is True


def test_detect_changes_input_connected():
    prev = PortSnapshot(frozenset(), frozenset())
    curr = PortSnapshot(frozenset(), frozenset({"Port X"}))
    assert detect_changes(prev, curr) is True


def test_detect_changes_input_disconnected():
    prev = PortSnapshot(frozenset(), frozenset({"Port X"}))
    curr = PortSnapshot(frozenset(), frozenset())
    assert detect_changes(prev, curr) is True


def test_detect_changes_logs_port_name(caplog):
    prev = PortSnapshot(frozenset(), frozenset())
    curr = PortSnapshot(frozenset({"Port B"}), frozenset())
    with caplog.at_level(logging.INFO, logger="lcvgc.monitor"):
        detect_changes(prev, curr)
    assert "Port B" in caplog.text


@patch("mido.get_input_names", return_value=["In 1"])
@patch("mido.get_output_names", return_value=["Out 1", "Out 2"])
def test_collect_ports(_out, _in):
    assert collect_ports() == PortSnapshot(
        frozenset({"Out 1", "Out 2"}), frozenset({"In 1"})
    )


@patch("mido.get_output_names", side_effect=OSError("no backend"))
def test_collect_ports_failure_returns_none(_out):
    assert collect_ports() is None


@patch("mido.get_input_names", return_value=["In 1"])
@patch("mido.get_output_names", return_value=["Out 1"])
def test_log_startup_ports(_out, _in, caplog):
    with caplog.at_level(logging.INFO, logger="lcvgc.monitor"):
        log_startup_ports()
    assert "out: Out 1" in caplog.text
    assert "in: In 1" in caplog.text


@pytest.mark.asyncio
async def test_run_port_monitor_cancel():
    with patch("mido.get_output_names", return_value=[]), patch(
        "mido.get_input_names", return_value=[]
    ):
        task = asyncio.create_task(run_port_monitor(PortMonitorConfig(interval_ms=50)))
        await asyncio.sleep(0.15)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
    assert task.cancelled()