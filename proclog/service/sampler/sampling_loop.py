"""
Sampling Loop Module

Drives repeated snapshot-and-persist cycles under a time budget and a
cooperative cancellation flag. Owns the output sink for the whole run.
"""
import csv
import time
from typing import Callable, Optional

from proclog.config.run_config import RunConfig
from proclog.consts.SinkOperation import SinkOperation
from proclog.consts.StopReason import StopReason
from proclog.models.run_summary import RunSummary
from proclog.models.sample import Sample, current_timestamp
from proclog.service.cancel.cancellation_signal import CancellationSignal
from proclog.service.monitor.snapshot_provider import PsutilSnapshotProvider, SnapshotProvider
from proclog.service.sampler.loop_error import LoopError
from proclog.service.sink.csv_sink import CsvSink
from proclog.util.log_config import setup_logger

logger = setup_logger(__name__)

SINK_ERRORS = (OSError, csv.Error)

_FAILURE_MESSAGES = {
    SinkOperation.CREATE: "Failed to create CSV file!",
    SinkOperation.HEADER: "Failed to write header",
    SinkOperation.ROW: "Failed to write record!",
    SinkOperation.FLUSH: "Failed to flush writer!",
}


class SamplingLoop:
    """Periodically write the process table to a CSV sink"""

    def __init__(
        self,
        config: RunConfig,
        cancel: CancellationSignal,
        provider: Optional[SnapshotProvider] = None,
        sink_factory: Callable[[str], CsvSink] = CsvSink.create,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        timestamp: Callable[[], str] = current_timestamp,
    ):
        """
        Initialize sampling loop.

        Args:
            config: Validated run configuration
            cancel: Cancellation flag, only ever read by the loop
            provider: Process table source (default: psutil)
            sink_factory: Opens the output sink for a path (default: CsvSink.create)
            clock: Monotonic clock used for the duration budget
            sleep: Called with interval_seconds between ticks
            timestamp: Produces the per-tick timestamp string
        """
        self.config = config
        self.cancel = cancel
        self.provider = provider if provider is not None else PsutilSnapshotProvider()
        self.sink_factory = sink_factory
        self.clock = clock
        self.sleep = sleep
        self.timestamp = timestamp
        self.ticks = 0
        self.rows_written = 0

    def run(self) -> RunSummary:
        """
        Create the output file, write the header, then sample until the
        duration budget is spent or cancellation is observed.

        Returns:
            RunSummary describing the completed run

        Raises:
            LoopError: If creating, writing or flushing the sink fails
        """
        sink = self._sink_call(SinkOperation.CREATE, self.sink_factory, self.config.output_path)
        with sink:
            logger.info("Writing CSV header...")
            self._sink_call(SinkOperation.HEADER, sink.write_header)
            self._sink_call(SinkOperation.FLUSH, sink.flush)
            logger.info("CSV header written successfully!")

            logger.info(f"Writing process information every {self.config.interval_seconds} second(s) "
                        f"for {self.config.max_duration_seconds} second(s)...")
            start_time = self.clock()
            # Budget is checked only before a tick starts; a started tick always completes
            while self._should_continue(start_time):
                self._tick(sink)
                self.sleep(self.config.interval_seconds)
            elapsed = self.clock() - start_time

        stop_reason = StopReason.CANCELLED if self.cancel.is_set() else StopReason.DURATION_ELAPSED
        if stop_reason == StopReason.CANCELLED:
            logger.info("Received termination signal, stopping...")
        return RunSummary(
            ticks=self.ticks,
            rows_written=self.rows_written,
            elapsed_seconds=elapsed,
            stop_reason=stop_reason,
        )

    def _should_continue(self, start_time: float) -> bool:
        return (self.clock() - start_time < self.config.max_duration_seconds
                and not self.cancel.is_set())

    def _tick(self, sink: CsvSink) -> None:
        processes = self.provider.refresh()
        timestamp = self.timestamp()

        for process in processes:
            sample = Sample.from_snapshot(timestamp, process)
            self._sink_call(SinkOperation.ROW, sink.write_row, sample.to_row())
            self.rows_written += 1

        self._sink_call(SinkOperation.FLUSH, sink.flush)
        self.ticks += 1
        logger.debug(f"Tick {self.ticks}: {len(processes)} processes at {timestamp}")

    @staticmethod
    def _sink_call(operation: SinkOperation, func: Callable, *args):
        try:
            return func(*args)
        except SINK_ERRORS as e:
            raise LoopError(operation, f"{_FAILURE_MESSAGES[operation]}: {e}") from e


def run(
    config: RunConfig,
    cancel: CancellationSignal,
    provider: Optional[SnapshotProvider] = None,
    **kwargs
) -> RunSummary:
    """
    Run a sampling loop to completion.

    Args:
        config: Validated run configuration
        cancel: Cancellation flag
        provider: Process table source (default: psutil)
        **kwargs: Passed through to SamplingLoop (sink_factory, clock, sleep, timestamp)

    Returns:
        RunSummary of the completed run
    """
    loop = SamplingLoop(config, cancel, provider=provider, **kwargs)
    return loop.run()
