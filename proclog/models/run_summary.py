from dataclasses import dataclass

from proclog.consts.StopReason import StopReason


@dataclass
class RunSummary:
    """Outcome of a sampling run that ended normally"""
    ticks: int
    rows_written: int
    elapsed_seconds: float
    stop_reason: StopReason
