"""
Snapshot Provider Module

This module provides the process table source for the sampling loop.
The production binding enumerates every running process through psutil.
"""
from abc import ABC, abstractmethod
from typing import List

import psutil

from proclog.service.monitor.process_snapshot import ProcessSnapshot
from proclog.util.log_config import setup_logger

logger = setup_logger(__name__)

PROCESS_ATTRS = ['pid', 'name', 'cpu_percent', 'memory_percent']


class SnapshotProvider(ABC):
    """Abstract source of process table snapshots.

    Enumeration order of the returned processes is unspecified.
    """

    @abstractmethod
    def refresh(self) -> List[ProcessSnapshot]:
        """Refresh the process table and return every process currently running."""
        pass


class PsutilSnapshotProvider(SnapshotProvider):
    """Process table snapshots backed by psutil"""

    def refresh(self) -> List[ProcessSnapshot]:
        """
        Take a snapshot of all running processes.

        CPU usage is measured since the previous refresh of the same process,
        so every process reports 0.0 the first time it is seen.

        Returns:
            List of ProcessSnapshot, one per process
        """
        snapshots = []
        # process_iter caches Process instances between calls, which is what
        # makes cpu_percent meaningful across refreshes
        for proc in psutil.process_iter(attrs=PROCESS_ATTRS, ad_value=None):
            info = proc.info
            snapshots.append(ProcessSnapshot(
                pid=info['pid'],
                name=info['name'],
                cpu_percent=info['cpu_percent'],
                memory_percent=info['memory_percent'],
            ))
        logger.debug(f"Snapshot refreshed: {len(snapshots)} processes")
        return snapshots


if __name__ == "__main__":

    # python3 -m proclog.service.monitor.snapshot_provider

    provider = PsutilSnapshotProvider()
    for snapshot in provider.refresh()[:10]:
        print(snapshot)
