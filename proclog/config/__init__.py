"""Configuration module for the process logger."""

from .config_loader import ConfigLoader
from .run_config import ConfigError, RunConfig

__all__ = ["ConfigError", "ConfigLoader", "RunConfig"]
