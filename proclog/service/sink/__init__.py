"""Output sinks for process samples."""

from .csv_sink import CsvSink

__all__ = ["CsvSink"]
