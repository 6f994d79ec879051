"""Process table snapshot sources."""

from .process_snapshot import ProcessSnapshot
from .snapshot_provider import PsutilSnapshotProvider, SnapshotProvider

__all__ = ["ProcessSnapshot", "PsutilSnapshotProvider", "SnapshotProvider"]
