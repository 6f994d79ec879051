"""Periodic process table sampler writing CPU and memory usage to CSV."""

__version__ = "1.0.1"
