"""Cooperative cancellation for the sampling loop."""

from .cancellation_signal import CancellationSignal
from .signal_listener import SignalListener, SignalSetupError

__all__ = ["CancellationSignal", "SignalListener", "SignalSetupError"]
