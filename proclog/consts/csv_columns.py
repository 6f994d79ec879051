from typing import Tuple

CSV_HEADER: Tuple[str, ...] = (
    "Timestamp",
    "PID",
    "Process Name",
    "CPU Usage (%)",
    "Memory Usage (%)",
)

FIELD_COUNT = len(CSV_HEADER)
