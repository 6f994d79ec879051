"""
Signal Listener Module

Maps OS termination notifications (SIGINT, SIGTERM) onto a CancellationSignal.
"""
import signal
from typing import Callable, Dict, Optional, Sequence

from proclog.service.cancel.cancellation_signal import CancellationSignal
from proclog.util.log_config import setup_logger

logger = setup_logger(__name__)

DEFAULT_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class SignalSetupError(RuntimeError):
    """Raised when the termination handlers cannot be installed"""


class SignalListener:
    """Install handlers that set a cancellation flag on SIGINT/SIGTERM"""

    def __init__(self, cancel: CancellationSignal, signals: Sequence[int] = DEFAULT_SIGNALS):
        """
        Args:
            cancel: Flag to set when a termination signal arrives
            signals: Signal numbers to listen for (default: SIGINT, SIGTERM)
        """
        self.cancel = cancel
        self.signals = tuple(signals)
        self.received: Optional[int] = None
        self._previous: Dict[int, Callable] = {}

    def _handle(self, signum, frame) -> None:
        # Runs on the main thread between bytecodes: only flip the flag
        self.received = signum
        self.cancel.set()

    def install(self) -> None:
        """
        Register the handler for every configured signal.

        Raises:
            SignalSetupError: If a handler cannot be installed (for example
                              when called outside the main thread)
        """
        if self._previous:
            return
        try:
            for signum in self.signals:
                self._previous[signum] = signal.signal(signum, self._handle)
        except (ValueError, OSError) as e:
            self.uninstall()
            raise SignalSetupError(f"Failed to install signal handlers: {e}") from e
        names = ", ".join(signal.Signals(s).name for s in self.signals)
        logger.debug(f"Listening for termination signals: {names}")

    def uninstall(self) -> None:
        """Restore the handlers that were active before install()"""
        for signum, previous in self._previous.items():
            signal.signal(signum, previous if previous is not None else signal.SIG_DFL)
        self._previous.clear()

    def __enter__(self) -> "SignalListener":
        self.install()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.uninstall()
