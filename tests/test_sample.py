"""Tests for Sample row formatting."""

from datetime import datetime

import pytest

from proclog.models.sample import Sample, current_timestamp
from proclog.service.monitor.process_snapshot import ProcessSnapshot

TS = "2024-01-01T12:00:00.000000+00:00"


def test_to_row_formats_percentages():
    sample = Sample(timestamp=TS, pid=1234, process_name="some-process",
                    cpu_percent=0.5, memory_percent=1.2345)
    assert sample.to_row() == (TS, "1234", "some-process", "0.50", "1.23")


def test_from_snapshot_fills_missing_values():
    snapshot = ProcessSnapshot(pid=7, name=None, cpu_percent=None, memory_percent=None)
    assert Sample.from_snapshot(TS, snapshot).to_row() == (TS, "7", "", "0.00", "0.00")


@pytest.mark.parametrize("value", [float("nan"), float("inf"), -3.0])
def test_from_snapshot_clamps_bad_percentages(value):
    snapshot = ProcessSnapshot(pid=1, name="x", cpu_percent=value, memory_percent=value)
    sample = Sample.from_snapshot(TS, snapshot)
    assert sample.cpu_percent == 0.0
    assert sample.memory_percent == 0.0


def test_cpu_above_100_is_kept():
    snapshot = ProcessSnapshot(pid=1, name="busy", cpu_percent=250.0, memory_percent=3.0)
    assert Sample.from_snapshot(TS, snapshot).to_row()[3] == "250.00"


def test_sample_is_frozen():
    sample = Sample(TS, 1, "x", 0.0, 0.0)
    with pytest.raises(AttributeError):
        sample.pid = 2


def test_current_timestamp_has_offset():
    value = current_timestamp()
    parsed = datetime.fromisoformat(value)
    assert parsed.tzinfo is not None
    assert "." in value
