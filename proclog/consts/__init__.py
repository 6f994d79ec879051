"""Constants shared across the process logger."""
