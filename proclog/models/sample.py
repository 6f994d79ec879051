"""Sample data model: one CSV data row."""

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Tuple

from proclog.service.monitor.process_snapshot import ProcessSnapshot


def current_timestamp() -> str:
    """Local wall-clock time as ISO-8601 with UTC offset, microsecond precision."""
    return datetime.now().astimezone().isoformat(timespec="microseconds")


def _clean_percent(value: float) -> float:
    if value is None or not math.isfinite(value) or value < 0:
        return 0.0
    return float(value)


@dataclass(frozen=True)
class Sample:
    """Single process observation taken during one tick"""
    timestamp: str
    pid: int
    process_name: str
    cpu_percent: float
    memory_percent: float

    @classmethod
    def from_snapshot(cls, timestamp: str, snapshot: ProcessSnapshot) -> "Sample":
        return cls(
            timestamp=timestamp,
            pid=snapshot.pid,
            process_name=snapshot.name or "",
            cpu_percent=_clean_percent(snapshot.cpu_percent),
            memory_percent=_clean_percent(snapshot.memory_percent),
        )

    def to_row(self) -> Tuple[str, str, str, str, str]:
        """Serialize to the five CSV fields, in column order"""
        return (
            self.timestamp,
            str(self.pid),
            self.process_name,
            f"{self.cpu_percent:.2f}",
            f"{self.memory_percent:.2f}",
        )
