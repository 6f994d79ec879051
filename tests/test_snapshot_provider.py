"""Tests against the real process table through psutil."""

import math
import os

import pytest

from proclog.config.run_config import RunConfig
from proclog.service.cancel.cancellation_signal import CancellationSignal
from proclog.service.monitor.snapshot_provider import PsutilSnapshotProvider
from proclog.service.sampler.sampling_loop import run
from tests.conftest import read_csv


@pytest.mark.integration
def test_refresh_includes_current_process():
    snapshots = PsutilSnapshotProvider().refresh()

    assert snapshots
    pids = {s.pid for s in snapshots}
    assert os.getpid() in pids
    assert all(s.pid >= 0 for s in snapshots)


@pytest.mark.integration
def test_cpu_percent_measured_between_refreshes():
    provider = PsutilSnapshotProvider()
    provider.refresh()
    sum(i * i for i in range(200000))
    own = [s for s in provider.refresh() if s.pid == os.getpid()]

    assert len(own) == 1
    assert own[0].cpu_percent is not None and own[0].cpu_percent >= 0
    assert own[0].memory_percent is not None and own[0].memory_percent > 0


@pytest.mark.integration
def test_real_run_interval_one_duration_three(output_path):
    config = RunConfig(interval_seconds=1, output_path=str(output_path), max_duration_seconds=3)
    summary = run(config, CancellationSignal())

    assert 1 <= summary.ticks <= 4
    rows = read_csv(output_path)[1:]
    timestamps = {row[0] for row in rows}
    assert 1 <= len(timestamps) <= summary.ticks
    for row in rows:
        assert len(row) == 5
        assert int(row[1]) >= 0
        for field in row[3:]:
            value = float(field)
            assert math.isfinite(value) and value >= 0
            assert len(field.split(".")[1]) == 2
