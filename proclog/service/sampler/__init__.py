"""The periodic process sampling loop."""

from .loop_error import LoopError
from .sampling_loop import SamplingLoop, run

__all__ = ["LoopError", "SamplingLoop", "run"]
