from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ProcessSnapshot:
    """Single process as reported by one refresh of the process table"""
    pid: int
    name: Optional[str]
    cpu_percent: Optional[float]
    memory_percent: Optional[float]  # RSS as a share of total physical memory
