"""
Configuration loader for the process logger.

Loads defaults from config.yaml, applies an optional config_<env>.yaml
overlay and finally the command-line values, producing a RunConfig.
"""
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from proclog.config.run_config import (
    DEFAULT_INTERVAL_SECONDS,
    DEFAULT_MAX_DURATION_SECONDS,
    DEFAULT_OUTPUT_PATH,
    ConfigError,
    RunConfig,
)

DEFAULT_CONFIG_DIR = Path(__file__).resolve().parent.parent / "config_yaml"

# YAML key -> RunConfig field
FIELD_MAP = {
    "interval": "interval_seconds",
    "output": "output_path",
    "duration": "max_duration_seconds",
}


class ConfigLoader:

    def __init__(self, config_path: Optional[Path] = None, env: Optional[str] = None):
        self.config_path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_DIR
        self.env = env
        self.config_data = self._load_config()

    def _read_yaml(self, config_file: Path) -> Dict[str, Any]:
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read configuration file {config_file}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Malformed configuration file {config_file}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration file {config_file} must contain a mapping")
        return data

    def _load_config(self) -> Dict[str, Any]:
        """
        Load and merge the YAML configuration.
        Supports environment-specific overrides via config_<env>.yaml

        Returns:
            Dict with interval, output and duration keys
        """
        data: Dict[str, Any] = {
            "interval": DEFAULT_INTERVAL_SECONDS,
            "output": DEFAULT_OUTPUT_PATH,
            "duration": DEFAULT_MAX_DURATION_SECONDS,
        }

        # A missing base file only means "use the built-in defaults"
        base_config_file = self.config_path / "config.yaml"
        if base_config_file.exists():
            data.update(self._read_yaml(base_config_file))

        # An explicitly requested environment file must exist
        if self.env:
            env_config_file = self.config_path / f"config_{self.env}.yaml"
            data.update(self._read_yaml(env_config_file))

        unknown = sorted(str(key) for key in set(data) - set(FIELD_MAP))
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")
        return data

    def build(self, overrides: Optional[Dict[str, Any]] = None) -> RunConfig:
        """
        Build a validated RunConfig.

        Args:
            overrides: Values from the command line keyed like the YAML file
                       (interval, output, duration). None values are ignored.

        Returns:
            RunConfig: Validated run configuration

        Raises:
            ConfigError: If any value fails validation
        """
        merged = dict(self.config_data)
        for key, value in (overrides or {}).items():
            if value is not None:
                merged[key] = value
        return RunConfig(**{FIELD_MAP[key]: value for key, value in merged.items()})


if __name__ == "__main__":

    # python3 -m proclog.config.config_loader

    config = ConfigLoader(env="dev")
    print(config.build())
