"""
CSV Sink Module

Structured record writer over a single output file. Every call is
synchronous and failures surface as OSError (or csv.Error) to the caller.
"""
import csv
import os
from pathlib import Path
from typing import IO, Sequence, Union

from proclog.consts.csv_columns import CSV_HEADER, FIELD_COUNT
from proclog.util.log_config import setup_logger

logger = setup_logger(__name__)


class CsvSink:
    """Write process samples to a CSV file"""

    def __init__(self, stream: IO[str], path: Union[str, Path] = "<stream>"):
        self.path = path
        self._stream = stream
        self._writer = csv.writer(stream, lineterminator="\n")
        self.header_written = False
        self.rows_written = 0

    @classmethod
    def create(cls, path: Union[str, Path]) -> "CsvSink":
        """
        Create (or truncate) the output file and wrap it in a sink.

        Args:
            path: Output CSV path. The parent directory must already exist.

        Returns:
            CsvSink owning the open file handle
        """
        logger.info(f"Creating CSV file: {path}")
        stream = open(path, "w", newline="", encoding="utf-8")
        logger.info("CSV file created successfully!")
        return cls(stream, path)

    def write_header(self) -> None:
        if self.header_written:
            raise RuntimeError(f"Header already written to {self.path}")
        self._writer.writerow(CSV_HEADER)
        self.header_written = True

    def write_row(self, fields: Sequence[str]) -> None:
        if len(fields) != FIELD_COUNT:
            raise ValueError(f"Expected {FIELD_COUNT} fields, got {len(fields)}")
        if not self.header_written:
            raise RuntimeError("Header must be written before any data row")
        self._writer.writerow(fields)
        self.rows_written += 1

    def flush(self) -> None:
        """Push buffered rows to the file and ask the OS to persist them"""
        self._stream.flush()
        os.fsync(self._stream.fileno())

    def close(self) -> None:
        """Release the file handle. Rows are already durable after flush()"""
        if self._stream.closed:
            return
        try:
            self._stream.close()
        except OSError as e:
            # Must not mask the error that is unwinding the sampling loop
            logger.warning(f"Failed to close CSV file {self.path}: {e}")

    @property
    def closed(self) -> bool:
        return self._stream.closed

    def __enter__(self) -> "CsvSink":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
