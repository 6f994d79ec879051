"""
# run all tests:
# pytest -sv tests

# skip tests that read the real process table:
# pytest -m "not integration"
"""

import csv
import errno
from typing import Callable, List, Optional, Sequence

import pytest

from proclog.service.cancel.cancellation_signal import CancellationSignal
from proclog.service.monitor.process_snapshot import ProcessSnapshot
from proclog.service.monitor.snapshot_provider import SnapshotProvider
from proclog.service.sink.csv_sink import CsvSink


class FakeClock:
    """Monotonic clock that only advances when sleep() is called"""

    def __init__(self, start: float = 0.0):
        self.now = start
        self.sleeps: List[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class FakeProvider(SnapshotProvider):
    """Returns a fixed process list (or one list per tick) and counts refreshes"""

    def __init__(self, ticks: Sequence[Sequence[ProcessSnapshot]],
                 on_refresh: Optional[Callable[[int], None]] = None):
        self.ticks = [list(t) for t in ticks]
        self.on_refresh = on_refresh
        self.calls = 0

    def refresh(self) -> List[ProcessSnapshot]:
        snapshots = self.ticks[min(self.calls, len(self.ticks) - 1)]
        self.calls += 1
        if self.on_refresh is not None:
            self.on_refresh(self.calls)
        return snapshots


class FlakySink(CsvSink):
    """CsvSink that raises OSError on a chosen call"""

    def __init__(self, stream, path, fail_header=False, fail_row_at=None, fail_flush_at=None):
        super().__init__(stream, path)
        self.fail_header = fail_header
        self.fail_row_at = fail_row_at
        self.fail_flush_at = fail_flush_at
        self.row_calls = 0
        self.flush_calls = 0

    def write_header(self) -> None:
        if self.fail_header:
            raise OSError(errno.EACCES, "Permission denied")
        super().write_header()

    def write_row(self, fields) -> None:
        self.row_calls += 1
        if self.row_calls == self.fail_row_at:
            raise OSError(errno.ENOSPC, "No space left on device")
        super().write_row(fields)

    def flush(self) -> None:
        self.flush_calls += 1
        if self.flush_calls == self.fail_flush_at:
            raise OSError(errno.EIO, "Input/output error")
        super().flush()


class FlakySinkFactory:
    """sink_factory for SamplingLoop that remembers the sinks it created"""

    def __init__(self, **failures):
        self.failures = failures
        self.created: List[FlakySink] = []

    def __call__(self, path) -> FlakySink:
        sink = FlakySink(open(path, "w", newline="", encoding="utf-8"), path, **self.failures)
        self.created.append(sink)
        return sink


def make_processes(*pids: int) -> List[ProcessSnapshot]:
    return [
        ProcessSnapshot(pid=pid, name=f"proc-{pid}", cpu_percent=pid / 10, memory_percent=pid / 100)
        for pid in pids
    ]


def read_csv(path) -> List[List[str]]:
    with open(path, newline="", encoding="utf-8") as f:
        return list(csv.reader(f))


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cancel():
    return CancellationSignal()


@pytest.fixture
def output_path(tmp_path):
    return tmp_path / "process_usage.csv"
