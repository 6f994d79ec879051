from enum import Enum


class StopReason(Enum):
    DURATION_ELAPSED = "duration_elapsed"
    CANCELLED = "cancelled"
