"""Models for process logger data structures."""

from .run_summary import RunSummary
from .sample import Sample, current_timestamp

__all__ = ["RunSummary", "Sample", "current_timestamp"]
