import threading
from typing import Optional


class CancellationSignal:
    """Write-once cancellation flag.

    Goes from unset to set exactly once and is never reset. The sampling
    loop only polls it; signal handlers and tests are the writers.
    """

    def __init__(self):
        self._event = threading.Event()

    def set(self) -> None:
        self._event.set()

    def is_set(self) -> bool:
        return self._event.is_set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until set or until timeout elapses. Returns the flag value."""
        return self._event.wait(timeout)
