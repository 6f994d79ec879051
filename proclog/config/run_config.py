"""
Run configuration data class.

This module provides the RunConfig class, validated once on construction
and immutable afterwards.
"""
from dataclasses import dataclass
from typing import Any

DEFAULT_INTERVAL_SECONDS = 1
DEFAULT_OUTPUT_PATH = "process_usage.csv"
DEFAULT_MAX_DURATION_SECONDS = 60


class ConfigError(ValueError):
    """Invalid or unreadable configuration"""


def parse_non_negative_int(name: str, value: Any) -> int:
    """
    Parse a configuration value as a non-negative integer.

    Args:
        name: Field name used in the error message
        value: int, or a string of decimal digits

    Returns:
        The parsed integer

    Raises:
        ConfigError: If the value is not a non-negative integer
    """
    # bool is an int subclass; "true" in YAML must not read as 1
    if isinstance(value, bool):
        raise ConfigError(f"Invalid {name} value: {value!r}")
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, str) and value.strip().isdecimal():
        try:
            parsed = int(value.strip())
        except ValueError as e:
            raise ConfigError(f"Invalid {name} value: {value!r}") from e
    else:
        raise ConfigError(f"Invalid {name} value: {value!r}")
    if parsed < 0:
        raise ConfigError(f"Invalid {name} value: {value!r} (must be >= 0)")
    return parsed


@dataclass(frozen=True)
class RunConfig:

    interval_seconds: int = DEFAULT_INTERVAL_SECONDS
    output_path: str = DEFAULT_OUTPUT_PATH
    max_duration_seconds: int = DEFAULT_MAX_DURATION_SECONDS

    def __post_init__(self):
        object.__setattr__(self, "interval_seconds",
                           parse_non_negative_int("interval", self.interval_seconds))
        object.__setattr__(self, "max_duration_seconds",
                           parse_non_negative_int("duration", self.max_duration_seconds))
        if not isinstance(self.output_path, str) or not self.output_path.strip():
            raise ConfigError(f"Invalid output value: {self.output_path!r}")

    def __str__(self):
        return (f"RunConfig(\n"
                f"  interval_seconds={self.interval_seconds},\n"
                f"  output_path={self.output_path},\n"
                f"  max_duration_seconds={self.max_duration_seconds}\n"
                f")")
